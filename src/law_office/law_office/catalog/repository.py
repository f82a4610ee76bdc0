from __future__ import annotations

from typing import Protocol, Sequence

from .model import ServiceOffering


class CatalogRepository(Protocol):
    def list_all(self) -> Sequence[ServiceOffering]:
        raise NotImplementedError
