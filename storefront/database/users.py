"""User storage for the storefront"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from authtoken.models import Role

from ..models.user import User

DEMO_USER_ID = "user-001"
DEMO_ADMIN_ID = "admin-001"


def _seed_users() -> dict[str, User]:
    created = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return {
        DEMO_USER_ID: User(
            id=DEMO_USER_ID,
            name="demo shopper",
            email="shopper@example.com",
            role=Role.USER,
            created_at=created,
        ),
        DEMO_ADMIN_ID: User(
            id=DEMO_ADMIN_ID,
            name="store admin",
            email="admin@example.com",
            role=Role.ADMIN,
            created_at=created,
        ),
    }


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserDatabase:
    """
    In-memory user storage.

    Password hashes are kept beside the user records, never on them, so a
    User can be returned to clients as is. Seeded demo users have no
    password and cannot log in.
    """

    def __init__(self, seed: bool = True):
        self._lock = threading.RLock()
        self.users: dict[str, User] = _seed_users() if seed else {}
        self._password_hashes: dict[str, str] = {}

    def reset(self, seed: bool = True) -> None:
        with self._lock:
            self.users = _seed_users() if seed else {}
            self._password_hashes = {}

    def add_user(self, user: User) -> User:
        with self._lock:
            self.users[user.id] = user
            return user

    def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
        avatar: str = "",
    ) -> Optional[User]:
        """
        Register a new user.

        Returns None if the email is already taken. The check and the insert
        happen under one lock hold.
        """
        email = normalize_email(email)
        with self._lock:
            if self._find_by_email(email) is not None:
                return None

            user = User(
                id=uuid.uuid4().hex,
                name=name,
                email=email,
                role=role,
                avatar=avatar,
                created_at=datetime.now(timezone.utc),
            )
            self.users[user.id] = user
            self._password_hashes[user.id] = password_hash
            return user.model_copy()

    def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        with self._lock:
            user = self.users.get(user_id)
            return user.model_copy() if user else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user = self._find_by_email(normalize_email(email))
            return user.model_copy() if user else None

    def get_password_hash(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._password_hashes.get(user_id)

    def _find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)


# Singleton instance
user_db = UserDatabase()
