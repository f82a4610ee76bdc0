from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import Client


class ClientRepository(Protocol):
    def get_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

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
        raise NotImplementedError

    def list_all(self) -> Sequence[Client]:
        """Newest first."""

        raise NotImplementedError
