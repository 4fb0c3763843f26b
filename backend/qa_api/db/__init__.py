"""Database Infrastructure — SQLAlchemy Base shared by ORM models and migrations.

Invariants:
    - Single async engine per Store (built by infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""
