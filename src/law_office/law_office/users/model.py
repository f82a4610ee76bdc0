from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a login account.

    `role` is a label looked up in the permission policy.
    """

    user_id: int
    username: str
    password_hash: str
    role: str
    is_active: bool = True
