from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Client
from .repository import ClientRepository

CLIENT_COLUMNS = (
    "client_id, last_name, first_name, email, phone, address, birth_date, profession, notes, created_at"
)


def row_to_client(r: dict) -> Client:
    return Client(
        client_id=int(r["client_id"]),
        last_name=r["last_name"],
        first_name=r["first_name"],
        created_at=r["created_at"],
        email=r.get("email"),
        phone=r.get("phone"),
        address=r.get("address"),
        birth_date=normalize_mysql_date(r.get("birth_date")),
        profession=r.get("profession"),
        notes=r.get("notes"),
    )


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {CLIENT_COLUMNS} FROM clients WHERE client_id=%s", (int(client_id),))
            row = fetchone(cur)
            return row_to_client(row) if row else None

    def create(
        self,
        *,
        last_name: str,
        first_name: str,
        email: Optional[str],
        phone: Optional[str],
        address: Optional[str],
        birth_date: Optional[date],
        profession: Optional[str],
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clients(last_name, first_name, email, phone, address,
                                    birth_date, profession, notes, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (last_name, first_name, email, phone, address, birth_date, profession, notes, created_at),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {CLIENT_COLUMNS} FROM clients ORDER BY created_at DESC, client_id DESC")
            return [row_to_client(r) for r in fetchall(cur)]
