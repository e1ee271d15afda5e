"""Infrastructure — database sessions, invoice store, view cache, identity provider, logging.

Invariants:
    - Single async engine per process (initialized via init_db)
    - Every SQLAlchemy failure leaves this layer as DatabaseError

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
