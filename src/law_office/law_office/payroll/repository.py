from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from ..cases.model import Case
from ..employees.model import Employee


class PayrollSnapshotSource(Protocol):
    def snapshot(self, week: str) -> tuple[Sequence[Employee], Sequence[Case]]:
        """Active employees and the week's cases, read from one consistent snapshot."""

        raise NotImplementedError

    def performance_snapshot(self) -> tuple[Sequence[Employee], Mapping[int, tuple[int, int]]]:
        """Active employees and, per employee_id, (case count, fee total) over all weeks."""

        raise NotImplementedError
