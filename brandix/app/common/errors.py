from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: str | None = None,
) -> Dict[str, Any]:
    """The JSON error shape shared by every /api response."""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": request_id,
        }
    }


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        return error_payload(self.code, self.message, self.details, request_id)


def abort_json(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Convenience wrapper."""
    raise ApiError(status_code=status_code, code=code, message=message, details=details)
