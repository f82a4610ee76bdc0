from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Client:
    client_id: int
    last_name: str
    first_name: str
    created_at: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[date] = None
    profession: Optional[str] = None
    notes: Optional[str] = None
