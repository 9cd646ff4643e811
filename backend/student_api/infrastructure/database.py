"""Student Store - async engine, per-request sessions and SQLAlchemy error translation.

Invariants:
    - A session that sees an exception is rolled back before the exception leaves it
    - A unique violation on students.email surfaces as DuplicateEmailError (409)
    - Every other SQLAlchemy failure surfaces as DatabaseError (503, localized message)
    - Driver text goes to the log, never into the response body

Design Decisions:
    - Module-level db_manager set by the lifespan: get_db reads it at call time so
      tests can swap the engine without rebuilding the app
    - expire_on_commit=False: Student schemas are built from rows after commit
    - Translation table ordered subclass-first (IntegrityError is a DBAPIError)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from student_api.core.errors import (
    DatabaseError, DuplicateEmailError, StudentApiError,
)

logger = logging.getLogger(__name__)

# SQLAlchemy exception → operation label reported in DatabaseError
_OPERATIONS: tuple[tuple[type[SQLAlchemyError], str], ...] = (
    (IntegrityError, "commit"),
    (OperationalError, "execute"),
    (DBAPIError, "query"),
)


def is_email_conflict(exc: IntegrityError) -> bool:
    """True when the violated constraint is the unique index on students.email.

    SQLite reports "UNIQUE constraint failed: students.email"; PostgreSQL names
    the index ix_students_email.
    """
    detail = str(exc.orig).lower()
    return "email" in detail and ("unique" in detail or "duplicate" in detail)


def translate_db_error(exc: SQLAlchemyError) -> StudentApiError:
    """Map a SQLAlchemy failure to the API error the client should see."""
    if isinstance(exc, IntegrityError) and is_email_conflict(exc):
        logger.warning(
            f"Email uniqueness violated at commit: {exc.orig}",
            extra={"operation": "commit"},
        )
        return DuplicateEmailError()
    operation = next(
        (label for cls, label in _OPERATIONS if isinstance(exc, cls)), "unknown",
    )
    logger.error(
        f"Student store {operation} failed: {exc}",
        extra={"operation": operation},
    )
    return DatabaseError(type(exc).__name__, operation)


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that translate their failures."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise translate_db_error(e) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 through a managed session; False on any failure."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            # refused connections can surface as raw OSError from the driver
            logger.error(f"Student store health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> None:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one managed session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
