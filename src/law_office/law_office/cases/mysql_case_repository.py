from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Case
from .repository import CaseRepository

CASE_COLUMNS = (
    "case_id, client, case_type, employee_id, employee_name, fee, expense, "
    "status, description, week, created_at, updated_at"
)


def row_to_case(r: dict) -> Case:
    return Case(
        case_id=int(r["case_id"]),
        client=r["client"],
        case_type=r["case_type"],
        employee_id=int(r["employee_id"]),
        employee_name=r["employee_name"],
        fee=int(r["fee"]),
        expense=int(r["expense"] or 0),
        status=r["status"],
        week=r["week"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
        description=r.get("description"),
    )


class MySQLCaseRepository(CaseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, case_id: int) -> Optional[Case]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {CASE_COLUMNS} FROM cases WHERE case_id=%s", (int(case_id),))
            row = fetchone(cur)
            return row_to_case(row) if row else None

    def create(
        self,
        *,
        client: str,
        case_type: str,
        employee_id: int,
        employee_name: str,
        fee: int,
        expense: int,
        status: str,
        description: Optional[str],
        week: str,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO cases(client, case_type, employee_id, employee_name, fee, expense,
                                  status, description, week, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    client,
                    case_type,
                    int(employee_id),
                    employee_name,
                    int(fee),
                    int(expense),
                    status,
                    description,
                    week,
                    created_at,
                    created_at,
                ),
            )
            return int(cur.lastrowid)

    def set_status(self, case_id: int, *, status: str, updated_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE cases SET status=%s, updated_at=%s WHERE case_id=%s",
                (status, updated_at, int(case_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, case_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM cases WHERE case_id=%s", (int(case_id),))
            return cur.rowcount > 0

    def list_by_week(self, week: str) -> Sequence[Case]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {CASE_COLUMNS} FROM cases WHERE week=%s ORDER BY created_at DESC, case_id DESC",
                (week,),
            )
            return [row_to_case(r) for r in fetchall(cur)]

    def list_weeks(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT week FROM cases ORDER BY week DESC")
            return [r["week"] for r in fetchall(cur)]
