from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    username: str
    role: str


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        try:
            username = require_non_empty(username, "Username")
        except ValidationError:
            raise AuthenticationError("Invalid username or password")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            logger.warning("login refused for %r", username)
            raise AuthenticationError("Invalid username or password")

        if password is not None and not isinstance(password, str):
            logger.warning("login refused for %r", username)
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("login refused for %r", username)
            raise AuthenticationError("Invalid username or password")

        self._users.touch_last_login(user.user_id)
        logger.info("user %r logged in (role=%s)", user.username, user.role)
        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)
