"""
Catalog and dashboard tuning.

Dependencies: pydantic_settings
System role: Pagination and aggregate window configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from coursehub.configs.base import BaseSettings


class CatalogSettings(BaseSettings):
    """Page sizes and dashboard window sizes."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CATALOG_",
        case_sensitive=False,
        extra="ignore",
    )

    default_page_size: int = Field(default=20, ge=1, description="Page size when none or a malformed one is given")
    max_page_size: int = Field(default=100, ge=1, description="Upper bound on requested page size")
    featured_count: int = Field(default=6, ge=1, description="Number of featured courses on the landing page")
    recent_courses_count: int = Field(default=5, ge=1, description="Recent courses on the admin dashboard")
    recent_enrollments_count: int = Field(default=10, ge=1, description="Recent enrollments on the admin dashboard")
    growth_window_days: int = Field(default=30, ge=1, description="Window length for enrollment growth")
