"""ORM Models - SQLAlchemy declarative models for persisted entities.

Design Decisions:
    - Models imported here so Base.metadata is populated for create_all and Alembic
"""

from student_api.models.student import Student  # noqa: F401
