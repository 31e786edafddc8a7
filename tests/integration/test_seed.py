"""
Integration test for the demo data seeder.

System role: Verification that seeded data is consistent and queryable
"""

import pytest

from coursehub.application.services import AdminStatsService, CatalogService, CourseService
from coursehub.boundary.db.CRUD import user_crud
from coursehub.boundary.db.models import UserRole
from coursehub.boundary.db.seed import seed_demo_data
from coursehub.configs.catalog import CatalogSettings
from coursehub.core.identity import Identity


@pytest.mark.asyncio
async def test_seed_should_populate_a_browsable_catalog(test_async_db) -> None:
    counts = await seed_demo_data(test_async_db, bcrypt_rounds=4)

    assert counts == {
        "users": 7,
        "tags": 5,
        "courses": 4,
        "lessons": 9,
        "enrollments": 6,
        "reviews": 4,
    }

    catalog = await CatalogService(test_async_db, CatalogSettings()).list_courses()
    assert catalog["pagination"]["total_count"] == 3
    assert "risc-v-from-scratch" not in [course["slug"] for course in catalog["courses"]]

    detail = await CourseService(test_async_db).get_course_detail("complete-cpu-architecture-masterclass")
    assert detail["stats"]["review_count"] == 2
    assert detail["stats"]["average_rating"] == 4.5
    assert detail["sections"][0]["lessons"][0]["slug"] == "what-a-cpu-does"

    admin = await user_crud.get_by_email(test_async_db, "sarah.chen@coursehub.dev")
    stats = await AdminStatsService(test_async_db, CatalogSettings()).get_stats(
        Identity(user_id=admin.id, role=UserRole.ADMIN)
    )
    assert stats["total_enrollments"] == 6
    assert stats["draft_courses"] == 1


@pytest.mark.asyncio
async def test_reseeding_should_replace_previous_data(test_async_db) -> None:
    await seed_demo_data(test_async_db, bcrypt_rounds=4)
    await seed_demo_data(test_async_db, bcrypt_rounds=4)

    assert await user_crud.count(test_async_db) == 7
