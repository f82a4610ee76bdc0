from __future__ import annotations

from typing import Mapping, Sequence

from ..cases.model import Case
from ..cases.mysql_case_repository import CASE_COLUMNS, row_to_case
from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetchall, snapshot_cursor
from ..employees.model import Employee
from ..employees.mysql_employee_repository import EMPLOYEE_COLUMNS, row_to_employee
from .repository import PayrollSnapshotSource


class MySQLPayrollSnapshotSource(PayrollSnapshotSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _active_employees(cur) -> list[Employee]:
        cur.execute(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE status=%s ORDER BY name, employee_id",
            (EmployeeStatus.ACTIVE.value,),
        )
        return [row_to_employee(r) for r in fetchall(cur)]

    def snapshot(self, week: str) -> tuple[Sequence[Employee], Sequence[Case]]:
        with snapshot_cursor(self._conn_factory) as cur:
            employees = self._active_employees(cur)

            cur.execute(
                f"SELECT {CASE_COLUMNS} FROM cases WHERE week=%s ORDER BY created_at DESC, case_id DESC",
                (week,),
            )
            cases = [row_to_case(r) for r in fetchall(cur)]
        return employees, cases

    def performance_snapshot(self) -> tuple[Sequence[Employee], Mapping[int, tuple[int, int]]]:
        with snapshot_cursor(self._conn_factory) as cur:
            employees = self._active_employees(cur)

            cur.execute(
                """
                SELECT employee_id, COUNT(*) AS cases_handled, COALESCE(SUM(fee), 0) AS revenue
                FROM cases
                GROUP BY employee_id
                """
            )
            totals = {
                int(r["employee_id"]): (int(r["cases_handled"]), int(r["revenue"]))
                for r in fetchall(cur)
            }
        return employees, totals
