from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

from ..core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "law_office")),
        )


class DatabaseConnection:
    """Connection factory handed to every repository.

    Built once by the container, opened at startup and closed at shutdown.
    Connections are short-lived (one per operation).
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> "DatabaseConnection":
        self._open = True
        logger.info(
            "database handle opened: %s@%s:%s/%s",
            self._config.user,
            self._config.host,
            self._config.port,
            self._config.database,
        )
        return self

    def close(self) -> None:
        if self._open:
            self._open = False
            logger.info("database handle closed")

    def connect(self):
        if not self._open:
            raise StoreUnavailable("Database handle is closed")
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
        except mysql.connector.Error as exc:
            logger.error("cannot connect to database: %s", exc)
            raise StoreUnavailable("Database unreachable") from exc
