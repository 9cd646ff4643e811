"""Student Controller - maps the five CRUD operations onto StudentService calls.

Invariants:
    - Every success returns exactly one ApiResponse with one localized message
    - Status per operation: create 201, list/get/update 200, delete 204
    - Locale only affects ApiResponse.message, never data or status
    - Absent student on get → StudentNotFoundError with the localized not-found message
    - Service errors propagate unchanged (no local recovery)

Design Decisions:
    - Collaborators injected through the constructor as Protocols: the composition
      root wires SqlStudentService + CatalogMessageSource, tests wire fakes
    - Returns envelopes, not HTTP responses: rendering belongs to the route layer
"""

import logging

from fastapi import status

from student_api.core.domain_types import Locale, MessageKey, StudentId
from student_api.core.errors import ErrorContext, StudentNotFoundError
from student_api.core.repository_protocols import MessageSource, StudentService
from student_api.schemas.student import ApiResponse, Student, StudentDTO

logger = logging.getLogger(__name__)


class StudentController:
    """HTTP-agnostic request handler for the Student resource."""

    def __init__(self, service: StudentService, messages: MessageSource):
        self.service = service
        self.messages = messages

    async def create_student(
        self, request: StudentDTO, locale: Locale,
    ) -> ApiResponse[Student]:
        student = await self.service.create_student(request)
        message = self.messages.get_message(MessageKey.STUDENT_CREATED, locale)
        logger.info(
            f"Student with ID {student.id} created successfully",
            extra={"student_id": student.id, "operation": "create"},
        )
        return ApiResponse[Student](
            data=student, message=message, status=status.HTTP_201_CREATED,
        )

    async def get_all_students(self, locale: Locale) -> ApiResponse[list[Student]]:
        students = await self.service.get_all_students()
        message = self.messages.get_message(MessageKey.STUDENTS_RETRIEVED, locale)
        logger.info(
            "Fetched all students from the database.",
            extra={"operation": "list"},
        )
        return ApiResponse[list[Student]](
            data=students, message=message, status=status.HTTP_200_OK,
        )

    async def get_student_by_id(
        self, student_id: StudentId, locale: Locale,
    ) -> ApiResponse[Student]:
        student = await self.service.get_student_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(
                student_id,
                message=self.messages.get_message(
                    MessageKey.STUDENT_NOT_FOUND, locale,
                ),
                context=ErrorContext(locale=locale.value),
            )
        message = self.messages.get_message(MessageKey.STUDENT_RETRIEVED, locale)
        logger.info(
            f"Fetched student with ID: {student_id}",
            extra={"student_id": student_id, "operation": "get"},
        )
        return ApiResponse[Student](
            data=student, message=message, status=status.HTTP_200_OK,
        )

    async def update_student(
        self, student_id: StudentId, request: StudentDTO, locale: Locale,
    ) -> ApiResponse[Student]:
        student = await self.service.update_student(student_id, request)
        message = self.messages.get_message(MessageKey.STUDENT_UPDATED, locale)
        logger.info(
            f"Updated student with ID: {student_id}",
            extra={"student_id": student_id, "operation": "update"},
        )
        return ApiResponse[Student](
            data=student, message=message, status=status.HTTP_200_OK,
        )

    async def delete_student(
        self, student_id: StudentId, locale: Locale,
    ) -> ApiResponse[None]:
        await self.service.delete_student(student_id)
        message = self.messages.get_message(MessageKey.STUDENT_DELETED, locale)
        logger.info(
            f"Deleted student with ID: {student_id}",
            extra={"student_id": student_id, "operation": "delete"},
        )
        return ApiResponse[None](
            data=None, message=message, status=status.HTTP_204_NO_CONTENT,
        )
