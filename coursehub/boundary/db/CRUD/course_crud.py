"""
Course CRUD operations.

Provides course lookups, the filtered/sorted catalog query, and the
grouped counts the admin dashboard needs. Sorting by enrollment or
review count uses correlated scalar subqueries so a page of courses is
one SELECT regardless of sort key.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Course persistence operations
"""

from dataclasses import dataclass
from typing import Any, Iterable, Sequence
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.models.course_model import CourseModel, CourseStatus
from coursehub.boundary.db.models.enrollment_model import EnrollmentModel
from coursehub.boundary.db.models.review_model import ReviewModel, ReviewStatus

SORT_POPULARITY = "popularity"
SORT_RATING = "rating"
SORT_NEWEST = "newest"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"

SORT_KEYS = (SORT_POPULARITY, SORT_RATING, SORT_NEWEST, SORT_PRICE_LOW, SORT_PRICE_HIGH)


@dataclass(frozen=True)
class CatalogFilter:
    """Public catalog filter; prices are already in cents."""

    category: str | None = None
    level: str | None = None
    search: str | None = None
    min_price_cents: int | None = None
    max_price_cents: int | None = None


def enrollment_count_subquery():
    """Correlated COUNT of enrollments for the outer CourseModel row."""
    return (
        select(func.count(EnrollmentModel.id))
        .where(EnrollmentModel.course_id == CourseModel.id)
        .correlate(CourseModel)
        .scalar_subquery()
    )


def visible_review_count_subquery():
    """Correlated COUNT of visible reviews for the outer CourseModel row."""
    return (
        select(func.count(ReviewModel.id))
        .where(
            ReviewModel.course_id == CourseModel.id,
            ReviewModel.status == ReviewStatus.VISIBLE,
        )
        .correlate(CourseModel)
        .scalar_subquery()
    )


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with slug lookups, catalog search and dashboard
    aggregates.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> CourseModel | None:
        """
        Retrieve a course by its URL slug.

        Args:
            session: Async database session
            slug: Course slug

        Returns:
            CourseModel if found, None otherwise
        """
        stmt = select(CourseModel).where(CourseModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_exists(self, session: AsyncSession, slug: str) -> bool:
        stmt = select(CourseModel.id).where(CourseModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    def _catalog_conditions(self, catalog_filter: CatalogFilter) -> list[Any]:
        conditions: list[Any] = [CourseModel.status == CourseStatus.PUBLISHED]
        if catalog_filter.category:
            conditions.append(CourseModel.category == catalog_filter.category)
        if catalog_filter.level:
            conditions.append(CourseModel.level == catalog_filter.level)
        if catalog_filter.search:
            term = catalog_filter.search
            conditions.append(
                or_(
                    CourseModel.title.icontains(term, autoescape=True),
                    CourseModel.subtitle.icontains(term, autoescape=True),
                    CourseModel.description.icontains(term, autoescape=True),
                )
            )
        if catalog_filter.min_price_cents is not None:
            conditions.append(CourseModel.price_cents >= catalog_filter.min_price_cents)
        if catalog_filter.max_price_cents is not None:
            conditions.append(CourseModel.price_cents <= catalog_filter.max_price_cents)
        return conditions

    @staticmethod
    def _order_by(sort_by: str) -> list[Any]:
        # "rating" orders by how many reviews a course has, not their mean.
        if sort_by == SORT_RATING:
            primary = [visible_review_count_subquery().desc()]
        elif sort_by == SORT_NEWEST:
            primary = []
        elif sort_by == SORT_PRICE_LOW:
            primary = [CourseModel.price_cents.asc()]
        elif sort_by == SORT_PRICE_HIGH:
            primary = [CourseModel.price_cents.desc()]
        else:
            primary = [enrollment_count_subquery().desc()]
        return [*primary, CourseModel.created_at.desc(), CourseModel.id]

    def catalog_statement(self, catalog_filter: CatalogFilter, sort_by: str) -> Select:
        return (
            select(CourseModel)
            .where(*self._catalog_conditions(catalog_filter))
            .order_by(*self._order_by(sort_by))
        )

    async def search_catalog(
        self,
        session: AsyncSession,
        catalog_filter: CatalogFilter,
        sort_by: str = SORT_POPULARITY,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        """
        One page of published courses matching the filter.

        Args:
            session: Async database session
            catalog_filter: Facets, search term and price bounds
            sort_by: One of SORT_KEYS; anything else sorts by popularity
            limit: Page size
            offset: Rows to skip

        Returns:
            Sequence of CourseModels in display order
        """
        stmt = self.catalog_statement(catalog_filter, sort_by).offset(offset).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_catalog(self, session: AsyncSession, catalog_filter: CatalogFilter) -> int:
        """Total published courses matching the filter."""
        return await self.count(session, *self._catalog_conditions(catalog_filter))

    async def featured(self, session: AsyncSession, limit: int) -> Sequence[CourseModel]:
        """Published courses ranked by enrollments, then by review count."""
        stmt = (
            select(CourseModel)
            .where(CourseModel.status == CourseStatus.PUBLISHED)
            .order_by(
                enrollment_count_subquery().desc(),
                visible_review_count_subquery().desc(),
                CourseModel.created_at.desc(),
                CourseModel.id,
            )
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_enrolled_by_user(self, session: AsyncSession, user_id: UUID) -> Sequence[CourseModel]:
        """
        Courses the user is enrolled in, most popular first.

        Args:
            session: Async database session
            user_id: Student UUID

        Returns:
            Sequence of CourseModels
        """
        stmt = (
            select(CourseModel)
            .join(EnrollmentModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.user_id == user_id)
            .order_by(enrollment_count_subquery().desc(), CourseModel.created_at.desc(), CourseModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_category(self, session: AsyncSession) -> list[tuple[str, int]]:
        """
        Course counts grouped by category, skipping uncategorised courses.

        Returns:
            list of (category, count), largest first
        """
        stmt = (
            select(CourseModel.category, func.count(CourseModel.id))
            .where(CourseModel.category.is_not(None))
            .group_by(CourseModel.category)
            .order_by(func.count(CourseModel.id).desc(), CourseModel.category)
        )
        result = await session.execute(stmt)
        return [(category, count) for category, count in result.all()]

    async def count_by_creator(
        self,
        session: AsyncSession,
        user_ids: Iterable[UUID],
    ) -> dict[UUID, int]:
        """Courses authored per user; users without courses are absent."""
        user_ids = list(user_ids)
        if not user_ids:
            return {}
        stmt = (
            select(CourseModel.created_by_id, func.count(CourseModel.id))
            .where(CourseModel.created_by_id.in_(user_ids))
            .group_by(CourseModel.created_by_id)
        )
        result = await session.execute(stmt)
        return {user_id: count for user_id, count in result.all()}


course_crud = CourseCRUD()
