"""
Integration tests for CatalogService.

Covers filtering, every sort key, pagination and the featured selection.
Draft courses never appear in public listings.

System role: Verification of the public catalog query
"""

from datetime import datetime, timedelta, timezone

import pytest

from coursehub.application.services import CatalogService, CourseService
from coursehub.boundary.db.CRUD import course_crud, enrollment_crud, review_crud, tag_crud, user_crud
from coursehub.boundary.db.models import CourseStatus
from coursehub.configs.catalog import CatalogSettings

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def catalog(test_async_db, admin_user):
    """
    Four published courses and one draft.

    Enrollments: alpha 3, beta 1, gamma 2, delta 0.
    Visible reviews: beta 2, gamma 1.

    Returns:
        dict: slug -> CourseModel
    """
    specs = [
        ("alpha", "Alpha Assembly", 1000, "Assembly Programming", "Beginner", "Registers and jumps"),
        ("beta", "Beta Pipelines", 5000, "Computer Architecture", "Intermediate", "Hazards explained"),
        ("gamma", "Gamma Caches", 2500, "Computer Architecture", "Advanced", "Cache coherence"),
        ("delta", "Delta Boards", 0, "Embedded Systems", "Beginner", "Blinking LEDs on a CPU board"),
    ]
    courses = {}
    for index, (slug, title, price, category, level, description) in enumerate(specs):
        courses[slug] = await course_crud.create(
            test_async_db,
            slug=slug,
            title=title,
            description=description,
            price_cents=price,
            status=CourseStatus.PUBLISHED,
            category=category,
            level=level,
            created_by_id=admin_user.id,
            created_at=BASE_TIME + timedelta(days=index),
        )
    courses["draft"] = await course_crud.create(
        test_async_db,
        slug="draft",
        title="Draft Assembly",
        price_cents=100,
        status=CourseStatus.DRAFT,
        category="Assembly Programming",
        created_by_id=admin_user.id,
        created_at=BASE_TIME + timedelta(days=10),
    )

    students = [
        await user_crud.create(test_async_db, name=f"Student {n}", email=f"s{n}@student.dev")
        for n in range(3)
    ]
    for slug, enrolled in (("alpha", 3), ("beta", 1), ("gamma", 2)):
        for student in students[:enrolled]:
            await enrollment_crud.create(test_async_db, user_id=student.id, course_id=courses[slug].id)

    await review_crud.upsert_review(test_async_db, students[0].id, courses["beta"].id, 3, None)
    await review_crud.upsert_review(test_async_db, students[1].id, courses["beta"].id, 4, None)
    await review_crud.upsert_review(test_async_db, students[0].id, courses["gamma"].id, 5, None)

    tag = await tag_crud.create(test_async_db, name="Assembly Language")
    await tag_crud.attach(test_async_db, courses["alpha"].id, tag.id)

    await test_async_db.commit()
    return courses


def _slugs(result: dict) -> list[str]:
    return [course["slug"] for course in result["courses"]]


class TestListCourses:
    """Test suite for CatalogService.list_courses()."""

    @pytest.mark.asyncio
    async def test_default_listing_should_sort_by_enrollments_and_skip_drafts(
        self, test_async_db, catalog
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses()

        assert _slugs(result) == ["alpha", "gamma", "beta", "delta"]
        assert result["pagination"]["total_count"] == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("sort_by", "expected"),
        [
            ("popularity", ["alpha", "gamma", "beta", "delta"]),
            # Rating orders by number of visible reviews.
            ("rating", ["beta", "gamma", "delta", "alpha"]),
            ("newest", ["delta", "gamma", "beta", "alpha"]),
            ("price-low", ["delta", "alpha", "gamma", "beta"]),
            ("price-high", ["beta", "gamma", "alpha", "delta"]),
            ("bogus", ["alpha", "gamma", "beta", "delta"]),
        ],
    )
    async def test_sort_keys_should_order_courses(
        self, test_async_db, catalog, sort_by, expected
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(sort_by=sort_by)

        assert _slugs(result) == expected

    @pytest.mark.asyncio
    async def test_filters_should_combine(self, test_async_db, catalog) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(
            category="Computer Architecture",
            min_price="20",
            max_price="30",
        )

        assert _slugs(result) == ["gamma"]

    @pytest.mark.asyncio
    async def test_search_should_match_description_case_insensitively(
        self, test_async_db, catalog
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(search="cpu")

        assert _slugs(result) == ["delta"]

    @pytest.mark.asyncio
    async def test_level_filter_should_match_exactly(self, test_async_db, catalog) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(level="Beginner")

        assert sorted(_slugs(result)) == ["alpha", "delta"]

    @pytest.mark.asyncio
    async def test_pagination_should_slice_and_report_neighbours(
        self, test_async_db, catalog
    ) -> None:
        service = CatalogService(test_async_db, CatalogSettings())

        page_two = await service.list_courses(page="2", limit="3")

        assert _slugs(page_two) == ["delta"]
        assert page_two["pagination"] == {
            "page": 2,
            "limit": 3,
            "total_count": 4,
            "total_pages": 2,
            "has_next": False,
            "has_prev": True,
        }

    @pytest.mark.asyncio
    async def test_malformed_numbers_should_fall_back_to_defaults(
        self, test_async_db, catalog
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(
            page="abc", limit="-1", min_price="cheap"
        )

        assert result["pagination"]["page"] == 1
        assert result["pagination"]["limit"] == 20
        assert len(result["courses"]) == 4

    @pytest.mark.asyncio
    async def test_oversized_numbers_should_fall_back_to_defaults(
        self, test_async_db, catalog
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(
            page="99999999999999999999",
            limit="99999999999999999999",
            min_price="1e30",
            max_price="1e999999999",
        )

        assert result["pagination"]["page"] == 1
        assert result["pagination"]["limit"] == 20
        assert _slugs(result) == ["alpha", "gamma", "beta", "delta"]

    @pytest.mark.asyncio
    async def test_limit_should_be_capped(self, test_async_db, catalog) -> None:
        settings = CatalogSettings(max_page_size=2)

        result = await CatalogService(test_async_db, settings).list_courses(limit="50")

        assert result["pagination"]["limit"] == 2
        assert len(result["courses"]) == 2

    @pytest.mark.asyncio
    async def test_summary_should_carry_stats_instructor_and_tags(
        self, test_async_db, catalog, admin_user
    ) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).list_courses(sort_by="rating")
        beta, alpha = result["courses"][0], result["courses"][-1]

        assert beta["stats"]["review_count"] == 2
        assert beta["stats"]["average_rating"] == 3.5
        assert beta["stats"]["enrollment_count"] == 1
        assert beta["instructor"]["name"] == admin_user.name
        assert alpha["tags"] == ["Assembly Language"]


class TestFeaturedCourses:
    """Test suite for CatalogService.featured_courses()."""

    @pytest.mark.asyncio
    async def test_featured_should_rank_by_enrollments(self, test_async_db, catalog) -> None:
        result = await CatalogService(test_async_db, CatalogSettings()).featured_courses(limit=2)

        assert _slugs(result) == ["alpha", "gamma"]


class TestPublishingLifecycle:
    """A new course stays out of the catalog until it is published."""

    @pytest.mark.asyncio
    async def test_course_should_appear_only_after_publishing(
        self, test_async_db, admin_identity
    ) -> None:
        courses = CourseService(test_async_db)
        catalog_service = CatalogService(test_async_db, CatalogSettings())

        created = await courses.create_course(admin_identity, slug="riscv", title="RISC-V Basics")
        before = await catalog_service.list_courses()
        await courses.update_course(admin_identity, "riscv", {"status": CourseStatus.PUBLISHED})
        after = await catalog_service.list_courses()

        assert created["status"] == CourseStatus.DRAFT
        assert _slugs(before) == []
        assert before["pagination"]["total_count"] == 0
        assert _slugs(after) == ["riscv"]
        assert after["pagination"]["total_count"] == 1
