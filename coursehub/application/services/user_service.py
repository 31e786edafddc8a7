"""
User service orchestrator.

Student self-signup and the admin user list.

Dependencies: bcrypt, coursehub.boundary.db.CRUD, coursehub.core
System role: Account use case orchestration
"""

import asyncio
import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import course_crud, enrollment_crud, user_crud
from coursehub.boundary.db.models import UserModel, UserRole
from coursehub.configs import get_settings
from coursehub.core.exceptions import EmailAlreadyRegisteredError
from coursehub.core.identity import Identity, require_admin

logger = logging.getLogger(__name__)

# bcrypt ignores everything past 72 bytes; newer releases refuse longer input.
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    """bcrypt hash of a plain-text password."""
    secret = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    secret = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.checkpw(secret, password_hash.encode("utf-8"))


def _user_dict(user: UserModel) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "image": user.image,
        "created_at": user.created_at,
    }


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession, bcrypt_rounds: int | None = None) -> None:
        """
        Initialize user service.

        Args:
            db: Async SQLAlchemy session
            bcrypt_rounds: Hashing cost (configured value when None)
        """
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds or get_settings().auth.bcrypt_rounds

    async def signup(self, name: str, email: str, password: str) -> dict:
        """
        Register a STUDENT account.

        Args:
            name: Display name (validated upstream, >= 2 chars)
            email: Login email (validated upstream)
            password: Plain-text password (validated upstream, >= 8 chars)

        Returns:
            dict: Public user fields, never the hash

        Raises:
            EmailAlreadyRegisteredError: An account already uses the email
        """
        if await user_crud.get_by_email(self.db, email):
            raise EmailAlreadyRegisteredError(email)

        # bcrypt blocks for the whole cost factor; run it in a worker thread.
        password_hash = await asyncio.to_thread(hash_password, password, self.bcrypt_rounds)

        try:
            user = await user_crud.create(
                self.db,
                name=name,
                email=email,
                password_hash=password_hash,
                role=UserRole.STUDENT,
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise EmailAlreadyRegisteredError(email)

        logger.info("User signed up", extra={"user_id": str(user.id)})
        return _user_dict(user)

    async def list_users(self, identity: Identity | None) -> list[dict]:
        """
        Every account, newest first, with enrolled course titles and the
        number of courses each user authored.
        """
        require_admin(identity)
        users = await user_crud.get_all(self.db)
        user_ids = [user.id for user in users]
        titles = await enrollment_crud.course_titles_by_user(self.db, user_ids)
        created = await course_crud.count_by_creator(self.db, user_ids)
        return [
            {
                **_user_dict(user),
                "enrolled_courses": titles.get(user.id, []),
                "created_course_count": created.get(user.id, 0),
            }
            for user in users
        ]
