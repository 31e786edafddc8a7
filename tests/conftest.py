"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, seeded users and courses, caller
identities, service mocks and a TestClient with dependency overrides.
Dependencies: pytest, pytest-asyncio, aiosqlite, sqlalchemy, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are switched on per connection so the store rejects
    progress for unknown lessons the same way PostgreSQL does.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy import event
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from coursehub.boundary.db import models  # noqa: F401
    from coursehub.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def admin_user(test_async_db):
    """Committed ADMIN account."""
    from coursehub.boundary.db.CRUD import user_crud
    from coursehub.boundary.db.models import UserRole

    user = await user_crud.create(
        test_async_db,
        name="Ada Admin",
        email="ada@coursehub.dev",
        role=UserRole.ADMIN,
    )
    await test_async_db.commit()
    return user


@pytest.fixture
async def student_user(test_async_db):
    """Committed STUDENT account."""
    from coursehub.boundary.db.CRUD import user_crud
    from coursehub.boundary.db.models import UserRole

    user = await user_crud.create(
        test_async_db,
        name="Sam Student",
        email="sam@student.dev",
        role=UserRole.STUDENT,
        image="https://img.example/sam.png",
    )
    await test_async_db.commit()
    return user


@pytest.fixture
async def published_course(test_async_db, admin_user):
    """
    Published course with two sections.

    Sections are created out of display order, and the "Basics" section
    holds its lessons out of order too, so ordering bugs show up.

    Returns:
        dict: course, sections (display order) and lessons (curriculum order)
    """
    from coursehub.boundary.db.CRUD import course_crud, lesson_crud, section_crud
    from coursehub.boundary.db.models import CourseStatus

    course = await course_crud.create(
        test_async_db,
        slug="intro-to-cpus",
        title="Intro to CPUs",
        subtitle="How processors work",
        description="Registers, pipelines and caches",
        price_cents=4999,
        status=CourseStatus.PUBLISHED,
        category="Computer Architecture",
        level="Beginner",
        language="English",
        created_by_id=admin_user.id,
    )
    advanced = await section_crud.create(test_async_db, title="Pipelines", order=2, course_id=course.id)
    basics = await section_crud.create(test_async_db, title="Basics", order=1, course_id=course.id)

    registers = await lesson_crud.create(
        test_async_db,
        title="Registers",
        slug="registers",
        order=2,
        duration_sec=300,
        section_id=basics.id,
    )
    welcome = await lesson_crud.create(
        test_async_db,
        title="Welcome",
        slug="welcome",
        order=1,
        duration_sec=120,
        free_preview=True,
        section_id=basics.id,
    )
    hazards = await lesson_crud.create(
        test_async_db,
        title="Hazards",
        slug="hazards",
        order=1,
        duration_sec=None,
        section_id=advanced.id,
    )
    await test_async_db.commit()
    return {
        "course": course,
        "sections": [basics, advanced],
        "lessons": [welcome, registers, hazards],
    }


@pytest.fixture
def admin_identity(admin_user):
    from coursehub.boundary.db.models import UserRole
    from coursehub.core.identity import Identity

    return Identity(user_id=admin_user.id, role=UserRole.ADMIN)


@pytest.fixture
def student_identity(student_user):
    from coursehub.boundary.db.models import UserRole
    from coursehub.core.identity import Identity

    return Identity(user_id=student_user.id, role=UserRole.STUDENT)


@pytest.fixture
def client():
    """
    TestClient over a fresh app.

    Dependency overrides set by a test are cleared afterwards.
    """
    from coursehub.main import create_app

    app = create_app()
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_catalog_service():
    """
    Create mock CatalogService for testing.

    Returns:
        AsyncMock: Mocked CatalogService with async methods
    """
    service = AsyncMock()
    service.list_courses = AsyncMock(
        return_value={
            "courses": [],
            "pagination": {
                "page": 1,
                "limit": 20,
                "total_count": 0,
                "total_pages": 0,
                "has_next": False,
                "has_prev": False,
            },
        }
    )
    service.featured_courses = AsyncMock(return_value={"courses": []})
    return service


@pytest.fixture
def mock_course_service():
    return AsyncMock()


@pytest.fixture
def mock_curriculum_service():
    return AsyncMock()


@pytest.fixture
def mock_enrollment_service():
    return AsyncMock()


@pytest.fixture
def mock_progress_service():
    return AsyncMock()


@pytest.fixture
def mock_review_service():
    return AsyncMock()


@pytest.fixture
def mock_admin_stats_service():
    return AsyncMock()


@pytest.fixture
def mock_user_service():
    return AsyncMock()
