from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServiceOffering:
    """Tariff of one kind of legal service."""

    service_id: int
    type: str
    hourly_rate: int
    commission: int
    flat_fee: Optional[str] = None
