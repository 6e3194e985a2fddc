"""User registration and login."""

import logging
from typing import Optional

from fastapi import Request

from authtoken import TokenSigner

from ..database.users import UserDatabase, user_db
from ..errors import (
    ERROR_INVALID_CREDENTIALS,
    ERROR_USER_EXISTS,
    ERROR_USER_NOT_FOUND,
    ConflictError,
    ServiceUnavailableError,
    UnauthorizedError,
)
from ..models.user import LoginRequest, RegisterRequest, User
from ..security.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """
    Creates users and exchanges credentials for bearer tokens.

    Tokens carry the user's id, name, email and role and are issued by the
    configured TokenSigner. Without a signer, registration and login fail
    with 503.
    """

    def __init__(self, users: UserDatabase, signer: Optional[TokenSigner]):
        self.users = users
        self.signer = signer

    def register(self, request: RegisterRequest) -> tuple[User, str]:
        self._require_signer()

        # Fail fast before paying for the hash; create_user re-checks atomically
        if self.users.get_user_by_email(request.email):
            raise ConflictError(ERROR_USER_EXISTS)

        user = self.users.create_user(
            name=request.name.lower(),
            email=request.email,
            password_hash=hash_password(request.password),
            avatar=request.avatar,
        )
        if user is None:
            raise ConflictError(ERROR_USER_EXISTS)

        logger.info(f"Registered user {user.id}")
        return user, self._issue(user)

    def login(self, request: LoginRequest) -> tuple[User, str]:
        self._require_signer()

        user = self.users.get_user_by_email(request.email)
        if user is None:
            raise UnauthorizedError(ERROR_USER_NOT_FOUND)

        password_hash = self.users.get_password_hash(user.id)
        if password_hash is None or not verify_password(request.password, password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise UnauthorizedError(ERROR_INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return user, self._issue(user)

    def _require_signer(self) -> TokenSigner:
        if self.signer is None:
            raise ServiceUnavailableError("Token signing is not configured")
        return self.signer

    def _issue(self, user: User) -> str:
        return self._require_signer().issue(
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
        )


def get_user_service(request: Request) -> UserService:
    """FastAPI dependency: user service with the app's token signer."""
    return UserService(users=user_db, signer=getattr(request.app.state, "token_signer", None))
