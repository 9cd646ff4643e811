"""Student Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - StudentDTO.first_name / last_name: stripped, then 1-100 chars (blank is empty)
    - StudentDTO.email: stripped and lower-cased, then <= 255 chars, local@domain.tld shape
    - StudentDTO.date_of_birth: optional, never in the future
    - ApiResponse is frozen: built once per request, never mutated

Design Decisions:
    - Field pattern over EmailStr: no email-validator dependency for one field
    - extra="forbid" on StudentDTO: unknown keys are a client error, not silently dropped
    - Generic ApiResponse[T]: one envelope type, precise OpenAPI schema per route
"""

from datetime import date, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class StudentDTO(BaseModel):
    """Create/update payload - full replacement of mutable fields."""
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)
    date_of_birth: date | None = None

    # before-validators: length and pattern constraints see the normalized value
    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return v


class Student(BaseModel):
    """Student response - public-facing student record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: date | None = None
    created_at: datetime
    updated_at: datetime


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success envelope: {data, message, status}."""
    model_config = ConfigDict(frozen=True)

    data: T | None = None
    message: str
    status: int
