"""Student ORM - persists student records.

Invariants:
    - id is an auto-incremented 64-bit integer primary key
    - email is unique and stored lower-case (normalized by StudentDTO)
    - updated_at is bumped on every UPDATE (set explicitly by the service as well,
      since an UPDATE with no changed column is never emitted)

Design Decisions:
    - BigInteger id over UUID: path parameter is a plain integer bounded to int64;
      SQLite keeps INTEGER so its rowid autoincrement still applies
    - Timestamps set in Python: identical behavior on PostgreSQL and SQLite tests
"""

from datetime import date, datetime, timezone

from sqlalchemy import BigInteger, Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from student_api.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Student(Base):
    """Student record."""
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utcnow, onupdate=utcnow,
    )
