"""Infrastructure Layer — database sessions, storage adapters, and logging.

Invariants:
    - Infrastructure implements core Protocols; core never imports infrastructure
    - All SQLAlchemy failures are mapped to DatabaseError before leaving this layer
"""
