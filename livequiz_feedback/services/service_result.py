"""Service Result — deferred, memoized, failure-translating wrapper around one storage call.

Invariants:
    - The producer runs at most once per instance, even under concurrent reads
    - Any Exception from the producer becomes Failure(PersistenceFailure(cause))
    - A memoized outcome (success or failure) is permanent; failures are not retried
    - with_size()/with_page() return NEW siblings sharing the producer; the
      receiver is never mutated or consumed
    - A cancelled read memoizes nothing; the next read runs the producer again
    - Page validation (ValidationError) happens at with_size()/with_page() time

Design Decisions:
    - Closed variant set (Single, Unpaged, Paged) behind one result() contract
    - asyncio.Lock guards the memo slot (compute-if-absent under the lock)
    - CancelledError is a BaseException, so `except Exception` leaves it alone
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar, Union

from livequiz_feedback.core.errors import PersistenceFailure
from livequiz_feedback.core.page_spec import PageSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")

Producer = Callable[[], Awaitable[T]]
PageableProducer = Callable[[PageSpec], Awaitable[T]]


# ─── Outcome ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_or_none(self) -> T | None:
        return self.value

    def get_or_raise(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: PersistenceFailure

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get_or_none(self) -> None:
        return None

    def get_or_raise(self):
        raise self.error


Outcome = Union[Success[T], Failure]


async def _capture(call: Producer[T], kind: str) -> Outcome[T]:
    """Run a producer and translate any fault into a Failure."""
    try:
        return Success(await call())
    except Exception as e:
        logger.error(
            f"{kind} service result failed: {e}",
            extra={"error_code": "PERSISTENCE_FAILURE"},
        )
        return Failure(PersistenceFailure(e))


# ─── Envelope ────────────────────────────────────────────────────

class ServiceResult(ABC, Generic[T]):
    """Lazily computed result of a service call."""

    @abstractmethod
    async def result(self) -> Outcome[T]:
        """Outcome of the wrapped call, computing it on first access."""

    @property
    @abstractmethod
    def is_computed(self) -> bool: ...

    @staticmethod
    async def single(get_result: Producer[T]) -> "SingleServiceResult[T]":
        """Run get_result now and wrap its outcome. Never pageable."""
        return SingleServiceResult(await _capture(get_result, "single"))

    @staticmethod
    def unpaged(get_result: PageableProducer[T]) -> "UnpagedServiceResult[T]":
        """Wrap a pageable producer that yields everything until given a size."""
        return UnpagedServiceResult(get_result)

    @staticmethod
    def paged(size: int, get_result: PageableProducer[T]) -> "PagedServiceResult[T]":
        """Wrap a pageable producer starting at the first page of `size` elements."""
        return PagedServiceResult(get_result, size=size, page=0)


class SingleServiceResult(ServiceResult[T]):
    """Outcome captured eagerly at construction."""

    def __init__(self, outcome: Outcome[T]):
        self._outcome = outcome

    async def result(self) -> Outcome[T]:
        return self._outcome

    @property
    def is_computed(self) -> bool:
        return True


class _DeferredServiceResult(ServiceResult[T]):
    """Single-flight memo shared by the pageable variants."""

    def __init__(self, get_result: PageableProducer[T]):
        self._get_result = get_result
        self._outcome: Outcome[T] | None = None
        self._lock = asyncio.Lock()

    @abstractmethod
    def _page_spec(self) -> PageSpec: ...

    async def result(self) -> Outcome[T]:
        if self._outcome is not None:
            return self._outcome
        async with self._lock:
            if self._outcome is None:
                spec = self._page_spec()
                self._outcome = await _capture(
                    lambda: self._get_result(spec), type(self).__name__,
                )
        return self._outcome

    @property
    def is_computed(self) -> bool:
        return self._outcome is not None


class UnpagedServiceResult(_DeferredServiceResult[T]):
    """Yields every matching value; can be upgraded to a paged sibling."""

    def _page_spec(self) -> PageSpec:
        return PageSpec.unpaged()

    def with_size(self, size: int) -> "PagedServiceResult[T]":
        """New result for the first page of `size` values. Does not touch this one."""
        return PagedServiceResult(self._get_result, size=size, page=0)


class PagedServiceResult(_DeferredServiceResult[T]):
    """Yields a single page of values."""

    def __init__(self, get_result: PageableProducer[T], size: int = 1, page: int = 0):
        super().__init__(get_result)
        # Validated now, not on first read
        self._spec = PageSpec.of_size(size).with_page(page)

    @property
    def size(self) -> int:
        return self._spec.size

    @property
    def page(self) -> int:
        return self._spec.index

    @property
    def page_spec(self) -> PageSpec:
        return self._spec

    def _page_spec(self) -> PageSpec:
        return self._spec

    def with_page(self, page: int) -> "PagedServiceResult[T]":
        """New result for another page at the current size."""
        return PagedServiceResult(self._get_result, size=self.size, page=page)
