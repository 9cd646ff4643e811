"""Database Infrastructure - SQLAlchemy declarative Base.

Invariants:
    - All ORM models share the single Base in db/base.py
"""
