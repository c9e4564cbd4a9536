"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - One Base for both services; each service creates only its own tables
"""
