from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def touch_last_login(self, user_id: int) -> None:
        raise NotImplementedError
