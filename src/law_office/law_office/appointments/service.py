from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..access.policy import PermissionPolicy
from ..cases.repository import CaseRepository
from ..clients.repository import ClientRepository
from ..common.datetime_utils import now_utc, parse_iso_datetime, to_naive_utc
from ..common.validators import optional_text, require_non_empty, require_non_negative_int, require_positive_id
from ..core.constants import DEFAULT_APPOINTMENT_MINUTES, DEFAULT_APPOINTMENT_STATUS
from ..core.enums import Action
from ..core.exceptions import NotFound, ValidationError
from .model import Appointment
from .repository import AppointmentRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """Use case: the client appointment book."""

    def __init__(
        self,
        appointments: AppointmentRepository,
        clients: ClientRepository,
        cases: CaseRepository,
        policy: PermissionPolicy,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._appointments = appointments
        self._clients = clients
        self._cases = cases
        self._policy = policy
        self._clock = clock

    def list_appointments(self, *, current_role: str) -> list[Appointment]:
        self._policy.require(current_role, Action.READ)
        return list(self._appointments.list_all())

    def create_appointment(
        self,
        *,
        current_role: str,
        client_id: Any,
        title: str,
        scheduled_at: Any,
        duration_minutes: Any = DEFAULT_APPOINTMENT_MINUTES,
        case_id: Any = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        status: Optional[str] = DEFAULT_APPOINTMENT_STATUS,
    ) -> Appointment:
        self._policy.require(current_role, Action.CREATE)

        client_id = require_positive_id(client_id, "Client")
        title = require_non_empty(title, "Title")
        if duration_minutes in (None, ""):
            duration_minutes = DEFAULT_APPOINTMENT_MINUTES
        duration = require_non_negative_int(duration_minutes, "Duration")
        if duration == 0:
            raise ValidationError("Duration must be positive")

        if isinstance(scheduled_at, datetime):
            when = scheduled_at
        else:
            try:
                when = parse_iso_datetime(require_non_empty(scheduled_at, "Date"))
            except ValueError:
                raise ValidationError("Date must be an ISO datetime (YYYY-MM-DDTHH:MM)")

        if not self._clients.get_by_id(client_id):
            raise ValidationError(f"Client {client_id} does not exist")
        if case_id not in (None, ""):
            case_id = require_positive_id(case_id, "Case")
            if not self._cases.get_by_id(case_id):
                raise ValidationError(f"Case {case_id} does not exist")
        else:
            case_id = None

        appointment_id = self._appointments.create(
            client_id=client_id,
            case_id=case_id,
            title=title,
            description=optional_text(description),
            scheduled_at=to_naive_utc(when),
            duration_minutes=duration,
            location=optional_text(location),
            status=optional_text(status) or DEFAULT_APPOINTMENT_STATUS,
            created_at=to_naive_utc(self._clock()),
        )
        logger.info("appointment %s created for client %s", appointment_id, client_id)

        appointment = self._appointments.get_by_id(appointment_id)
        if not appointment:
            raise NotFound(f"Appointment {appointment_id} does not exist")
        return appointment
