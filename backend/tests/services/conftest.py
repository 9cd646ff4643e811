"""Service test fixtures - async DB, FastAPI test client, and in-memory fakes.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - client: get_db overridden with a bare session; db_manager patched for readiness
    - store_client: the real get_db, so requests run inside DatabaseSessionManager.session()
    - FakeStudentService mirrors SqlStudentService semantics without IO

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session
      sees the tables created by create_all
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from student_api.core.domain_types import StudentId
from student_api.core.errors import StudentNotFoundError
from student_api.core.message_catalog import CatalogMessageSource
from student_api.db.base import Base
from student_api.infrastructure.database import get_db, DatabaseSessionManager
from student_api.models.student import Student as StudentModel
from student_api.schemas.student import Student, StudentDTO
from student_api.services.student_controller import StudentController
import student_api.infrastructure.database as db_module
from student_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def store_client(test_manager):
    """FastAPI test client on the real get_db dependency."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def seed_student(test_db):
    """Insert one student directly into the test DB."""
    student = StudentModel(
        first_name="Ada", last_name="Lovelace", email="ada@example.com",
    )
    test_db.add(student)
    await test_db.commit()
    await test_db.refresh(student)
    return student


class FakeStudentService:
    """Dict-backed StudentService with sequential ids."""

    def __init__(self):
        self.students: dict[int, Student] = {}
        self.calls: list[tuple] = []
        self._next_id = 1

    def _build(self, student_id: int, dto: StudentDTO) -> Student:
        now = datetime.now(timezone.utc)
        return Student(id=student_id, created_at=now, updated_at=now, **dto.model_dump())

    async def create_student(self, dto: StudentDTO) -> Student:
        self.calls.append(("create", dto))
        student = self._build(self._next_id, dto)
        self.students[student.id] = student
        self._next_id += 1
        return student

    async def get_all_students(self) -> list[Student]:
        self.calls.append(("list",))
        return list(self.students.values())

    async def get_student_by_id(self, student_id: StudentId) -> Student | None:
        self.calls.append(("get", student_id))
        return self.students.get(student_id)

    async def update_student(self, student_id: StudentId, dto: StudentDTO) -> Student:
        self.calls.append(("update", student_id, dto))
        if student_id not in self.students:
            raise StudentNotFoundError(student_id)
        student = self._build(student_id, dto)
        self.students[student_id] = student
        return student

    async def delete_student(self, student_id: StudentId) -> None:
        self.calls.append(("delete", student_id))
        if self.students.pop(student_id, None) is None:
            raise StudentNotFoundError(student_id)


@pytest.fixture
def fake_service():
    return FakeStudentService()


@pytest.fixture
def controller(fake_service):
    return StudentController(fake_service, CatalogMessageSource())


@pytest.fixture
def student_dto():
    return StudentDTO(
        first_name="Grace", last_name="Hopper", email="grace@example.com",
    )
