"""Dependency Providers - composition root wiring Protocols to implementations.

Invariants:
    - One SqlStudentService and one StudentController per request (no shared mutable state)
    - The message source is a process-wide stateless singleton
    - get_locale never fails: absent or unsupported header → configured default locale

Design Decisions:
    - FastAPI Depends over a DI container: the graph is three nodes deep
    - Every provider overridable via app.dependency_overrides in tests
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from student_api.config import get_settings
from student_api.core.domain_types import Locale
from student_api.core.message_catalog import CatalogMessageSource
from student_api.core.repository_protocols import MessageSource, StudentService
from student_api.core.resolve_locale import resolve_locale
from student_api.infrastructure.database import get_db
from student_api.services.student_controller import StudentController
from student_api.services.student_service import SqlStudentService

_message_source = CatalogMessageSource()


def get_message_source() -> MessageSource:
    return _message_source


def get_locale(
    accept_language: str = Header("en", alias="Accept-Language"),
) -> Locale:
    """Resolve the request locale from the Accept-Language header."""
    return resolve_locale(accept_language, get_settings().default_locale)


def get_student_service(db: AsyncSession = Depends(get_db)) -> StudentService:
    return SqlStudentService(db)


def get_student_controller(
    service: StudentService = Depends(get_student_service),
    messages: MessageSource = Depends(get_message_source),
) -> StudentController:
    return StudentController(service, messages)
