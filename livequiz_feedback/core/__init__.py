"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Storage is reached only through the Protocols in repository_protocols.py

Design Decisions:
    - Functional core separated from imperative shell (ADR: services own the awaits)
"""
