"""Role based access policy.

The table maps a role label to the actions it may perform. It is data, loaded
once at startup from a JSON file, so roles can change without a release.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping

from ..core.enums import Action
from ..core.exceptions import PermissionDenied, ValidationError

logger = logging.getLogger(__name__)


class PermissionPolicy:
    def __init__(self, table: Mapping[str, Iterable[Action | str]]):
        parsed: dict[str, frozenset[Action]] = {}
        for role, actions in table.items():
            try:
                parsed[str(role)] = frozenset(Action(a) for a in actions)
            except ValueError as exc:
                raise ValidationError(f"Unknown action for role {role!r}: {exc}") from exc
        self._table = parsed

    @property
    def roles(self) -> list[str]:
        return sorted(self._table)

    def allowed(self, role: str | None) -> frozenset[Action]:
        return self._table.get(role or "", frozenset())

    def can(self, role: str | None, action: Action) -> bool:
        return action in self.allowed(role)

    def require(self, role: str | None, action: Action) -> None:
        if not self.can(role, action):
            logger.warning("permission denied: role=%r action=%s", role, action.value)
            raise PermissionDenied(f"Role {role!r} may not {action.value}")


def load_policy(path: str | Path) -> PermissionPolicy:
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        table = json.load(fh)
    if not isinstance(table, dict):
        raise ValidationError(f"Permission file {path} must hold a JSON object")
    policy = PermissionPolicy(table)
    logger.info("loaded %d roles from %s", len(policy.roles), path)
    return policy
