"""Flask helpers shared by the JSON controllers."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any

from flask import Flask, jsonify, request, session
from flask.json.provider import DefaultJSONProvider

from ..core.exceptions import (
    AuthenticationError,
    DomainError,
    NotFound,
    PermissionDenied,
    StoreUnavailable,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (PermissionDenied, 403),
    (NotFound, 404),
    (StoreUnavailable, 503),
]


class LedgerJSONProvider(DefaultJSONProvider):
    """ISO dates instead of Flask's HTTP-date format."""

    @staticmethod
    def default(o: Any) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, date):
            return o.isoformat()
        if isinstance(o, Enum):
            return o.value
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)
        return DefaultJSONProvider.default(o)


def status_for(error: DomainError) -> int:
    for kind, status in _STATUS_BY_ERROR:
        if isinstance(error, kind):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        status = status_for(e)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, e)
        return jsonify({"error": str(e)}), status

    @app.errorhandler(404)
    def _not_found(_e):
        return jsonify({"error": "Route not found"}), 404


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def current_role() -> str:
    return str(session.get("role") or "")


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
