"""Student Routes - REST surface for the Student resource.

Invariants:
    - Routes only translate HTTP ↔ StudentController; no business logic here
    - Body and path params validated by FastAPI/Pydantic before the controller runs
    - student_id outside 1..MAX_STUDENT_ID is a 400, never a driver overflow
    - Response status equals ApiResponse.status; Content-Language names the resolved locale
    - 204 responses carry no body (HTTP forbids one); the envelope is still built

Design Decisions:
    - Explicit JSONResponse rendering: status comes from the envelope, not the decorator
    - response_model kept on decorators for the OpenAPI schema only
"""

from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse

from student_api.api.dependencies import get_locale, get_student_controller
from student_api.core.domain_types import MAX_STUDENT_ID, Locale, StudentId
from student_api.schemas.student import ApiResponse, Student, StudentDTO
from student_api.services.student_controller import StudentController

router = APIRouter(prefix="/api/v1/students", tags=["students"])


def to_response(envelope: ApiResponse, locale: Locale) -> Response:
    """Render an envelope as an HTTP response with a matching status code."""
    headers = {"Content-Language": locale.value}
    if envelope.status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=envelope.status, headers=headers)
    return JSONResponse(
        status_code=envelope.status,
        content=envelope.model_dump(mode="json"),
        headers=headers,
    )


@router.post(
    "", response_model=ApiResponse[Student],
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    body: StudentDTO,
    locale: Locale = Depends(get_locale),
    controller: StudentController = Depends(get_student_controller),
):
    """Create a new student."""
    envelope = await controller.create_student(body, locale)
    return to_response(envelope, locale)


@router.get("", response_model=ApiResponse[list[Student]])
async def get_all_students(
    locale: Locale = Depends(get_locale),
    controller: StudentController = Depends(get_student_controller),
):
    """List all students."""
    envelope = await controller.get_all_students(locale)
    return to_response(envelope, locale)


@router.get("/{student_id}", response_model=ApiResponse[Student])
async def get_student_by_id(
    student_id: int = Path(ge=1, le=MAX_STUDENT_ID),
    locale: Locale = Depends(get_locale),
    controller: StudentController = Depends(get_student_controller),
):
    """Get one student; 404 when absent."""
    envelope = await controller.get_student_by_id(StudentId(student_id), locale)
    return to_response(envelope, locale)


@router.put("/{student_id}", response_model=ApiResponse[Student])
async def update_student(
    body: StudentDTO,
    student_id: int = Path(ge=1, le=MAX_STUDENT_ID),
    locale: Locale = Depends(get_locale),
    controller: StudentController = Depends(get_student_controller),
):
    """Replace a student's information."""
    envelope = await controller.update_student(
        StudentId(student_id), body, locale,
    )
    return to_response(envelope, locale)


@router.delete(
    "/{student_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_student(
    student_id: int = Path(ge=1, le=MAX_STUDENT_ID),
    locale: Locale = Depends(get_locale),
    controller: StudentController = Depends(get_student_controller),
):
    """Delete a student."""
    envelope = await controller.delete_student(StudentId(student_id), locale)
    return to_response(envelope, locale)
