from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Appointment


class AppointmentRepository(Protocol):
    def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        raise NotImplementedError

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
        raise NotImplementedError

    def list_all(self) -> Sequence[Appointment]:
        """Soonest first."""

        raise NotImplementedError
