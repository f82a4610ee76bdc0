from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Actions checked by the access policy."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class EmployeeStatus(str, Enum):
    """Employment status stored with each employee. Only ACTIVE is paid."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"
