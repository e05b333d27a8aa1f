"""Services Layer — ServiceResult envelope and the per-family aggregation services.

Invariants:
    - Every public operation returns a ServiceResult, never a bare value
    - Services hold a repository; envelopes hold only producers

Design Decisions:
    - Explicit imports from submodules (no star exports)
"""
