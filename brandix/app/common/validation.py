from __future__ import annotations

import math
from typing import Any, Dict, Iterable
from flask import request

from brandix.app.common.errors import abort_json


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def require_fields(data: Dict[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if data.get(f) is None]
    if missing:
        abort_json(400, "validation_error", "Missing required fields", {"missing": missing})


def number_field(data: Dict[str, Any], field: str) -> float:
    """Read a JSON number (or numeric string) as a finite float."""
    value = data.get(field)
    if isinstance(value, bool):
        abort_json(400, "validation_error", f"{field} must be a number", {"field": field})
    try:
        number = float(value)
    except (TypeError, ValueError):
        abort_json(400, "validation_error", f"{field} must be a number", {"field": field})
    if not math.isfinite(number):
        abort_json(400, "validation_error", f"{field} must be a finite number", {"field": field})
    return number


def text_field(data: Dict[str, Any], field: str) -> str:
    value = str(data.get(field) or "").strip()
    if not value:
        abort_json(400, "validation_error", f"{field} cannot be empty", {"field": field})
    return value


def id_field(data: Dict[str, Any], field: str) -> int:
    """Read a JSON integer (or a string of digits) as a positive id."""
    value = data.get(field)
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        abort_json(400, "validation_error", f"{field} must be a positive integer", {"field": field})
    return value
