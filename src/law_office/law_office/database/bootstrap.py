from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable whatever the configured database name is.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a schema/seed file on ';' (quotes are respected)."""
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


@contextmanager
def _connect(db_config: dict, *, with_database: bool = True):
    target = DBConfig.from_dict(db_config)
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        params["database"] = target.database
    conn = mysql.connector.connect(**params)
    try:
        yield conn
    finally:
        conn.close()


def _exec_file(db_config: dict, path: str | Path) -> int:
    sql = _strip_create_db_and_use(_strip_comments(Path(path).read_text(encoding="utf-8")))
    count = 0
    with _connect(db_config) as conn:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    return count


def ensure_database_exists(db_config: dict) -> None:
    name = DBConfig.from_dict(db_config).database
    with _connect(db_config, with_database=False) as conn:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _exec_file(db_config, schema_path)
    logger.info("schema applied from %s (%d statements)", schema_path, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _exec_file(db_config, seed_path)
    logger.info("seed applied from %s (%d statements)", seed_path, count)


def ensure_default_admin(db_config: dict, *, username: str = "admin", password: str = "admin123") -> bool:
    """Create the bootstrap admin account when no admin exists yet.

    Returns True when an account was created.
    """
    with _connect(db_config) as conn:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT user_id FROM users WHERE role='admin' LIMIT 1")
        if cur.fetchone():
            logger.info("admin account already present")
            return False

        cur.execute(
            "INSERT INTO users (username, password_hash, role, is_active) VALUES (%s, %s, 'admin', 1)",
            (username, generate_password_hash(password)),
        )
        conn.commit()
        logger.warning("created default admin %r; change its password", username)
        return True


def list_tables(db_config: dict) -> list[str]:
    with _connect(db_config) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
