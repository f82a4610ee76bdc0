from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Appointment:
    """Domain entity: a meeting with a client, optionally about one case.

    Client names are joined in when listing.
    """

    appointment_id: int
    client_id: int
    title: str
    scheduled_at: datetime
    duration_minutes: int
    status: str
    created_at: datetime
    case_id: Optional[int] = None
    description: Optional[str] = None
    location: Optional[str] = None
    client_last_name: Optional[str] = None
    client_first_name: Optional[str] = None
