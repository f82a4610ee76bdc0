from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, password_hash, role, is_active
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["user_id"]),
                username=row["username"],
                password_hash=row["password_hash"],
                role=row["role"],
                is_active=bool(row.get("is_active", True)),
            )

    def touch_last_login(self, user_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET last_login=UTC_TIMESTAMP() WHERE user_id=%s", (int(user_id),))
