from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ServiceOffering
from .repository import CatalogRepository


class MySQLCatalogRepository(CatalogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ServiceOffering]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT service_id, type, hourly_rate, flat_fee, commission FROM services ORDER BY type")
            return [
                ServiceOffering(
                    service_id=int(r["service_id"]),
                    type=r["type"],
                    hourly_rate=int(r["hourly_rate"]),
                    commission=int(r["commission"]),
                    flat_fee=r.get("flat_fee"),
                )
                for r in fetchall(cur)
            ]
