from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Appointment
from .repository import AppointmentRepository

_SELECT = """
    SELECT a.appointment_id, a.client_id, a.case_id, a.title, a.description, a.scheduled_at,
           a.duration_minutes, a.location, a.status, a.created_at,
           c.last_name AS client_last_name, c.first_name AS client_first_name
    FROM appointments a
    LEFT JOIN clients c ON c.client_id = a.client_id
"""


def row_to_appointment(r: dict) -> Appointment:
    return Appointment(
        appointment_id=int(r["appointment_id"]),
        client_id=int(r["client_id"]),
        title=r["title"],
        scheduled_at=r["scheduled_at"],
        duration_minutes=int(r["duration_minutes"]),
        status=r["status"],
        created_at=r["created_at"],
        case_id=int(r["case_id"]) if r.get("case_id") is not None else None,
        description=r.get("description"),
        location=r.get("location"),
        client_last_name=r.get("client_last_name"),
        client_first_name=r.get("client_first_name"),
    )


class MySQLAppointmentRepository(AppointmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.appointment_id=%s", (int(appointment_id),))
            row = fetchone(cur)
            return row_to_appointment(row) if row else None

    def create(
        self,
        *,
        client_id: int,
        case_id: Optional[int],
        title: str,
        description: Optional[str],
        scheduled_at: datetime,
        duration_minutes: int,
        location: Optional[str],
        status: str,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO appointments(client_id, case_id, title, description, scheduled_at,
                                         duration_minutes, location, status, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (client_id, case_id, title, description, scheduled_at, duration_minutes, location, status, created_at),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Appointment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY a.scheduled_at ASC, a.appointment_id ASC")
            return [row_to_appointment(r) for r in fetchall(cur)]
