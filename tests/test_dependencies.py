"""
Test suite for dependency injection container.

Tests factory functions for service creation and identity extraction
from gateway headers.

System role: Verification of DI container
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.api.deps import (
    get_admin_stats_service,
    get_catalog_service,
    get_optional_identity,
    get_user_service,
)
from coursehub.application.services import AdminStatsService, CatalogService, UserService
from coursehub.boundary.db.models import UserRole
from coursehub.configs import Settings
from coursehub.configs.auth import AuthSettings
from coursehub.configs.catalog import CatalogSettings


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        auth=AuthSettings(user_id_header="X-Forwarded-User", role_header="X-Forwarded-Role", bcrypt_rounds=5),
        catalog=CatalogSettings(featured_count=3),
    )


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


class TestGetOptionalIdentity:
    """Test suite for get_optional_identity."""

    def test_should_read_configured_headers(self, settings: Settings) -> None:
        user_id = uuid.uuid4()
        request = _request({"X-Forwarded-User": str(user_id), "X-Forwarded-Role": "ADMIN"})

        identity = get_optional_identity(request, settings)

        assert identity.user_id == user_id
        assert identity.role == UserRole.ADMIN

    def test_should_ignore_default_headers_when_renamed(self, settings: Settings) -> None:
        request = _request({"X-User-Id": str(uuid.uuid4()), "X-User-Role": "ADMIN"})

        assert get_optional_identity(request, settings) is None


class TestServiceFactories:
    """Test suite for settings-aware service factories."""

    def test_catalog_service_should_receive_catalog_settings(
        self, mock_db_session: AsyncSession, settings: Settings
    ) -> None:
        service = get_catalog_service(db=mock_db_session, settings=settings)

        assert isinstance(service, CatalogService)
        assert service.db is mock_db_session
        assert service.settings.featured_count == 3

    def test_admin_stats_service_should_receive_catalog_settings(
        self, mock_db_session: AsyncSession, settings: Settings
    ) -> None:
        service = get_admin_stats_service(db=mock_db_session, settings=settings)

        assert isinstance(service, AdminStatsService)
        assert service.settings is settings.catalog

    def test_user_service_should_use_configured_bcrypt_cost(
        self, mock_db_session: AsyncSession, settings: Settings
    ) -> None:
        service = get_user_service(db=mock_db_session, settings=settings)

        assert isinstance(service, UserService)
        assert service.bcrypt_rounds == 5
