"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - StudentId wraps int - never use a bare int for a student identifier in domain logic
    - A StudentId fits a signed 64-bit column (1..MAX_STUDENT_ID)
    - Locale values are BCP 47 tags exactly as sent in Content-Language
    - DEFAULT_LOCALE is the fallback for every locale lookup

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and headers without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", int)

# ids are BIGINT: anything outside 1..MAX_STUDENT_ID is rejected before the DB
MAX_STUDENT_ID = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Supported message locales."""
    EN = "en"
    FR = "fr"
    ES = "es"
    PT_BR = "pt-BR"
    DE = "de"


class MessageKey(str, Enum):
    """Catalog keys, one per user-facing outcome."""
    STUDENT_CREATED = "student.created"
    STUDENTS_RETRIEVED = "students.retrieved"
    STUDENT_RETRIEVED = "student.retrieved"
    STUDENT_NOT_FOUND = "student.not.found"
    STUDENT_UPDATED = "student.updated"
    STUDENT_DELETED = "student.deleted"
    STUDENT_EMAIL_EXISTS = "student.email.exists"
    VALIDATION_FAILED = "validation.failed"
    DATABASE_UNAVAILABLE = "database.unavailable"
    INTERNAL_ERROR = "internal.error"


DEFAULT_LOCALE = Locale.EN
