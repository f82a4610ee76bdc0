from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreUnavailable, ValidationError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection + cursor per operation; commit on success, rollback on error.

    Constraint and range violations surface as ValidationError, other driver
    errors as StoreUnavailable.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except (mysql.connector.DataError, mysql.connector.IntegrityError) as exc:
        conn.rollback()
        logger.warning("query rejected: %s", exc)
        raise ValidationError(f"Rejected by the database: {exc.msg}") from exc
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.exception("query failed")
        raise StoreUnavailable("Database query failed") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def snapshot_cursor(conn_factory: DatabaseConnection):
    """Read-only transaction where every SELECT sees the same snapshot."""
    conn = conn_factory.connect()
    try:
        conn.start_transaction(consistent_snapshot=True, readonly=True)
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.exception("snapshot read failed")
        raise StoreUnavailable("Database query failed") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_date(value: Any) -> Optional[date]:
    """DATE columns come back as date, but string values show up with some drivers."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
