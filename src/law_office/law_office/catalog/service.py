from __future__ import annotations

from ..access.policy import PermissionPolicy
from ..core.enums import Action
from .model import ServiceOffering
from .repository import CatalogRepository


class CatalogService:
    def __init__(self, catalog: CatalogRepository, policy: PermissionPolicy):
        self._catalog = catalog
        self._policy = policy

    def list_services(self, *, current_role: str) -> list[ServiceOffering]:
        self._policy.require(current_role, Action.READ)
        return list(self._catalog.list_all())
