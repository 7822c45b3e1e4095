"""
User session service - lazily created customer record persisted on the device
"""
import random
import string
import time
from datetime import datetime, timezone
from typing import Optional

import structlog

from core.exceptions import NameRequired, StorageError, UserNotFound
from models.user import User
from database.repository import UserRepository

logger = structlog.get_logger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def generate_user_id() -> str:
    # Millisecond timestamp plus six random base36 characters
    timestamp = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=6))
    return f"user_{timestamp}_{suffix}"


class UserSessionService:
    # Creates the customer on first checkout and remembers it across runs

    def __init__(self, user_repository: UserRepository):
        self.user_repo = user_repository
        self._current_user: Optional[User] = self._load()

    def _load(self) -> Optional[User]:
        try:
            user = self.user_repo.load()
        except StorageError as e:
            logger.warning("Could not restore user", error=str(e))
            return None
        if user:
            logger.info("User restored", user_id=user.user_id)
        return user

    def _save(self, user: User) -> None:
        # A failed write must not break checkout
        try:
            self.user_repo.save(user)
        except StorageError as e:
            logger.error("Could not persist user", user_id=user.user_id, error=str(e))

    def ensure_user(self, candidate_name: Optional[str]) -> str:
        if self._current_user is not None:
            return self._current_user.user_id

        if not candidate_name or not candidate_name.strip():
            raise NameRequired()

        user = User(
            user_id=generate_user_id(),
            email=f"cliente_{int(time.time() * 1000)}@temp.com",
            name=candidate_name.strip(),
            created_at=_utc_now_iso()
        )
        self._current_user = user
        self._save(user)
        logger.info("User created", user_id=user.user_id)
        return user.user_id

    def get_current_user(self) -> Optional[User]:
        return self._current_user

    def get_current_user_id(self) -> Optional[str]:
        return self._current_user.user_id if self._current_user else None

    def is_logged_in(self) -> bool:
        return self._current_user is not None

    def update_user(self, name: Optional[str] = None, email: Optional[str] = None) -> User:
        user = self._current_user
        if user is None:
            raise UserNotFound()

        if name is not None:
            user.name = name.strip()
        if email is not None:
            user.email = email.strip()
        user.updated_at = _utc_now_iso()

        self._save(user)
        return user

    def clear_user(self) -> None:
        # Logout: forget the user in memory and on the device
        self._current_user = None
        try:
            self.user_repo.remove()
        except StorageError as e:
            logger.error("Could not remove stored user", error=str(e))
