from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee
from .repository import EmployeeRepository

EMPLOYEE_COLUMNS = "employee_id, name, role, salary, commission, hire_date, status, created_at, updated_at"

# Columns a partial update may touch.
_UPDATABLE = ("name", "role", "salary", "commission", "hire_date", "status")


def row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        role=r["role"],
        salary=int(r["salary"]),
        commission=int(r["commission"]),
        hire_date=normalize_mysql_date(r["hire_date"]),
        status=EmployeeStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return row_to_employee(row) if row else None

    def create(
        self,
        *,
        name: str,
        role: str,
        salary: int,
        commission: int,
        hire_date: date,
        status: EmployeeStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, role, salary, commission, hire_date, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, role, int(salary), int(commission), hire_date, status.value),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        cols = [c for c in _UPDATABLE if c in changes]
        if not cols:
            return self.get_by_id(employee_id) is not None

        params: list[object] = []
        for c in cols:
            value = changes[c]
            params.append(value.value if isinstance(value, EmployeeStatus) else value)
        params.append(int(employee_id))

        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {assignments} WHERE employee_id=%s", tuple(params))
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when the values did not change.
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {EMPLOYEE_COLUMNS} FROM employees ORDER BY name, employee_id")
            return [row_to_employee(r) for r in fetchall(cur)]

    def list_by_status(self, status: EmployeeStatus) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE status=%s ORDER BY name, employee_id",
                (status.value,),
            )
            return [row_to_employee(r) for r in fetchall(cur)]
