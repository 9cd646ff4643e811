"""Boundary Protocols - contracts between the request handler and its collaborators.

Invariants:
    - StudentController depends only on these Protocols, never on implementations
    - Implementations provided by the composition root (api/dependencies.py)
    - get_student_by_id returns None for an absent student; other methods raise

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in StudentService: implementations do IO; MessageSource is sync (pure lookup)
"""

from typing import Protocol

from student_api.core.domain_types import Locale, StudentId
from student_api.schemas.student import Student, StudentDTO


class StudentService(Protocol):
    """Contract for student persistence and business rules."""
    async def create_student(self, dto: StudentDTO) -> Student: ...
    async def get_all_students(self) -> list[Student]: ...
    async def get_student_by_id(self, student_id: StudentId) -> Student | None: ...
    async def update_student(
        self, student_id: StudentId, dto: StudentDTO,
    ) -> Student: ...
    async def delete_student(self, student_id: StudentId) -> None: ...


class MessageSource(Protocol):
    """Contract for localized message lookup."""
    def get_message(self, key: str, locale: Locale) -> str: ...
