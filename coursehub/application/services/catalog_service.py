"""
Catalog service orchestrator.

Public course listings: the filtered, sorted, paginated catalog and the
featured selection for the landing page.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core, coursehub.configs
System role: Catalog query use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_assembler import summarize_courses
from coursehub.boundary.db.CRUD import CatalogFilter, course_crud
from coursehub.boundary.db.CRUD.course_crud import SORT_KEYS, SORT_POPULARITY
from coursehub.configs import get_settings
from coursehub.configs.catalog import CatalogSettings
from coursehub.core.course_stats import build_pagination
from coursehub.core.query_params import dollars_to_cents, parse_optional_str, parse_positive_int

logger = logging.getLogger(__name__)


class CatalogService:
    """Catalog service orchestrator."""

    def __init__(self, db: AsyncSession, settings: CatalogSettings | None = None) -> None:
        """
        Initialize catalog service.

        Args:
            db: Async SQLAlchemy session
            settings: Page size and featured count limits
        """
        self.db = db
        self.settings = settings or get_settings().catalog

    async def list_courses(
        self,
        page: str | None = None,
        limit: str | None = None,
        category: str | None = None,
        level: str | None = None,
        search: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
        sort_by: str | None = None,
    ) -> dict:
        """
        One page of the public catalog.

        Raw query-string values are accepted; malformed numbers fall back
        to defaults and malformed prices are ignored.

        Args:
            page: 1-based page number
            limit: Page size, capped at the configured maximum
            category: Exact category match
            level: Exact level match
            search: Case-insensitive substring over title, subtitle, description
            min_price: Inclusive lower bound in dollars
            max_price: Inclusive upper bound in dollars
            sort_by: popularity | rating | newest | price-low | price-high

        Returns:
            dict: courses (list of summaries) and pagination
        """
        page_number = parse_positive_int(page, default=1)
        page_size = parse_positive_int(
            limit,
            default=self.settings.default_page_size,
            maximum=self.settings.max_page_size,
        )
        sort_key = sort_by if sort_by in SORT_KEYS else SORT_POPULARITY
        catalog_filter = CatalogFilter(
            category=parse_optional_str(category),
            level=parse_optional_str(level),
            search=parse_optional_str(search),
            min_price_cents=dollars_to_cents(min_price),
            max_price_cents=dollars_to_cents(max_price),
        )

        try:
            total_count = await course_crud.count_catalog(self.db, catalog_filter)
            courses = await course_crud.search_catalog(
                self.db,
                catalog_filter,
                sort_by=sort_key,
                limit=page_size,
                offset=(page_number - 1) * page_size,
            )
            summaries = await summarize_courses(self.db, courses)
        except Exception as e:
            logger.error(
                "Failed to query catalog",
                extra={"error": str(e), "page": page_number, "sort_by": sort_key},
            )
            raise

        logger.info(
            "Catalog page served",
            extra={
                "page": page_number,
                "limit": page_size,
                "sort_by": sort_key,
                "total_count": total_count,
            },
        )
        return {
            "courses": summaries,
            "pagination": build_pagination(page_number, page_size, total_count),
        }

    async def featured_courses(self, limit: int | None = None) -> dict:
        """
        Most-enrolled published courses, review count breaking ties.

        Args:
            limit: Number of courses (configured featured_count when None)

        Returns:
            dict: courses (list of summaries)
        """
        courses = await course_crud.featured(self.db, limit or self.settings.featured_count)
        return {"courses": await summarize_courses(self.db, courses)}
