"""
Caller identity settings.

Identity is resolved by an upstream gateway and forwarded as request
headers. These settings name the headers and tune password hashing
for locally created accounts.

Dependencies: pydantic_settings
System role: Identity propagation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from coursehub.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Identity header names and bcrypt cost."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    user_id_header: str = Field(
        default="X-User-Id",
        description="Header carrying the authenticated user's UUID",
    )
    role_header: str = Field(
        default="X-User-Role",
        description="Header carrying the authenticated user's role (ADMIN or STUDENT)",
    )
    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor for password hashes",
    )
