from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..access.policy import PermissionPolicy
from ..common.datetime_utils import now_utc, parse_iso_date, to_naive_utc
from ..common.validators import optional_text, require_non_empty
from ..core.enums import Action
from ..core.exceptions import NotFound, ValidationError
from .model import Client
from .repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(
        self,
        clients: ClientRepository,
        policy: PermissionPolicy,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._clients = clients
        self._policy = policy
        self._clock = clock

    def list_clients(self, *, current_role: str) -> list[Client]:
        self._policy.require(current_role, Action.READ)
        return list(self._clients.list_all())

    def create_client(
        self,
        *,
        current_role: str,
        last_name: str,
        first_name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        birth_date: Optional[str] = None,
        profession: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Client:
        self._policy.require(current_role, Action.CREATE)

        last_name = require_non_empty(last_name, "Last name")
        first_name = require_non_empty(first_name, "First name")
        email = optional_text(email)
        if email and "@" not in email:
            raise ValidationError("Email is invalid")

        born = None
        if optional_text(birth_date):
            try:
                born = parse_iso_date(str(birth_date).strip())
            except ValueError:
                raise ValidationError("Birth date must be YYYY-MM-DD")

        client_id = self._clients.create(
            last_name=last_name,
            first_name=first_name,
            email=email,
            phone=optional_text(phone),
            address=optional_text(address),
            birth_date=born,
            profession=optional_text(profession),
            notes=optional_text(notes),
            created_at=to_naive_utc(self._clock()),
        )
        logger.info("client %s created", client_id)

        client = self._clients.get_by_id(client_id)
        if not client:
            raise NotFound(f"Client {client_id} does not exist")
        return client
