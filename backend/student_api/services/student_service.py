"""Student Service - SQLAlchemy implementation of the StudentService Protocol.

Invariants:
    - Returns Student schemas, never ORM instances (no lazy-load after session close)
    - get_student_by_id returns None for an absent id; update/delete raise StudentNotFoundError
    - email uniqueness → DuplicateEmailError (409), whether caught by the pre-check
      or by the unique index at commit (concurrent writers)
    - Every write commits before returning; a failed commit is rolled back
    - update always bumps updated_at, even when no column value changes

Design Decisions:
    - One AsyncSession per instance: built per request by the composition root
    - Uniqueness query first so the common case never hits a failed transaction;
      the commit-time check covers the race between query and write
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from student_api.core.domain_types import StudentId
from student_api.core.errors import DuplicateEmailError, StudentNotFoundError
from student_api.infrastructure.database import is_email_conflict
from student_api.models.student import Student as StudentModel, utcnow
from student_api.schemas.student import Student, StudentDTO

logger = logging.getLogger(__name__)


class SqlStudentService:
    """Student persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_student(self, dto: StudentDTO) -> Student:
        await self._ensure_email_free(dto.email)
        student = StudentModel(**dto.model_dump())
        self.db.add(student)
        await self._commit(dto.email)
        await self.db.refresh(student)
        logger.debug(
            "Inserted student row",
            extra={"student_id": student.id, "operation": "create"},
        )
        return Student.model_validate(student)

    async def get_all_students(self) -> list[Student]:
        result = await self.db.execute(
            select(StudentModel).order_by(StudentModel.id),
        )
        return [Student.model_validate(s) for s in result.scalars().all()]

    async def get_student_by_id(self, student_id: StudentId) -> Student | None:
        student = await self._find(student_id)
        return Student.model_validate(student) if student else None

    async def update_student(
        self, student_id: StudentId, dto: StudentDTO,
    ) -> Student:
        student = await self._get_or_raise(student_id)
        if dto.email != student.email:
            await self._ensure_email_free(dto.email)
        for name, value in dto.model_dump().items():
            setattr(student, name, value)
        student.updated_at = utcnow()
        await self._commit(dto.email)
        await self.db.refresh(student)
        return Student.model_validate(student)

    async def delete_student(self, student_id: StudentId) -> None:
        student = await self._get_or_raise(student_id)
        await self.db.delete(student)
        await self.db.commit()

    # --- helpers ------------------------------------------------------------

    async def _commit(self, email: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if is_email_conflict(e):
                raise DuplicateEmailError(email) from e
            raise

    async def _find(self, student_id: StudentId) -> StudentModel | None:
        result = await self.db.execute(
            select(StudentModel).where(StudentModel.id == student_id),
        )
        return result.scalar_one_or_none()

    async def _get_or_raise(self, student_id: StudentId) -> StudentModel:
        student = await self._find(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    async def _ensure_email_free(self, email: str) -> None:
        result = await self.db.execute(
            select(StudentModel.id).where(StudentModel.email == email),
        )
        if result.first() is not None:
            raise DuplicateEmailError(email)
