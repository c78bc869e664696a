from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: verify credentials (login) and look up the current user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, username: str, password: str, role: str) -> Optional[User]:
        """Return the matching active user, or None.

        Unknown username, wrong role, inactive account and wrong password all
        produce the same None outcome.
        """

        try:
            role_enum = Role(role)
        except ValueError:
            raise ValidationError("role must be one of: guru, koordinator")

        user = self._users.get_by_username_and_role((username or "").strip(), role_enum)
        if not user or not user.is_active:
            logger.info("Login rejected for %r (%s): no active account", username, role_enum.value)
            return None

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except (ValueError, TypeError):
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.info("Login rejected for %r (%s): bad password", username, role_enum.value)
            return None
        return user

    def get_current_user(self, user_id: int) -> Optional[User]:
        user = self._users.get_by_id(int(user_id))
        if not user or not user.is_active:
            return None
        return user
