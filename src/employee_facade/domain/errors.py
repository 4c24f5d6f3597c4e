"""
employee_facade.domain.errors

Error taxonomy for the facade.

Responsibilities:
- One exception type per failure kind the gateway can surface.
- Each carries a machine `code` and the HTTP status the API layer should answer with.
- `to_response()` renders the JSON error envelope served to callers.

Invariants:
- Only InvalidEmployeeIdError (400) and EmployeeNotFoundError (404) are client-visible
  outcomes; every other kind maps to 500 with its message preserved.
"""

from __future__ import annotations

from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any


class EmployeeFacadeError(Exception):
    """Base exception for every failure the gateway raises on purpose."""

    code: str = "INTERNAL_ERROR"
    http_status: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return error_body(status=self.http_status, code=self.code, message=self.message)


def error_body(*, status: int, code: str, message: str) -> dict[str, Any]:
    return {
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "status": int(status),
        "error": HTTPStatus(status).phrase,
        "code": code,
        "message": message,
    }


# --- Client-visible (4xx) ---------------------------------------------------


class InvalidEmployeeIdError(EmployeeFacadeError):
    code = "INVALID_EMPLOYEE_ID"
    http_status = HTTPStatus.BAD_REQUEST

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Invalid UUID format: {employee_id}")
        self.employee_id = employee_id


class EmployeeNotFoundError(EmployeeFacadeError):
    code = "EMPLOYEE_NOT_FOUND"
    http_status = HTTPStatus.NOT_FOUND

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


# --- Server-side (5xx) ------------------------------------------------------


class UpstreamUnavailableError(EmployeeFacadeError):
    code = "UPSTREAM_UNAVAILABLE"

    def __init__(self, base_url: str, reason: str) -> None:
        super().__init__(
            f"Employee API not reachable at {base_url} ({reason}). "
            "Is the upstream employee service running?"
        )
        self.base_url = base_url


class RateLimitedError(EmployeeFacadeError):
    code = "UPSTREAM_RATE_LIMITED"

    def __init__(self, operation: str, attempts: int) -> None:
        super().__init__(f"{operation}: upstream still rate limiting after {attempts} attempts")
        self.operation = operation
        self.attempts = attempts


class DeleteRejectedError(EmployeeFacadeError):
    code = "DELETE_REJECTED"

    def __init__(self, employee_name: str) -> None:
        super().__init__(f"Delete failed for employee: {employee_name}")
        self.employee_name = employee_name


class UpstreamError(EmployeeFacadeError):
    """Any other upstream failure (non-2xx outside 404/429, or an unexpected error)."""

    code = "UPSTREAM_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamDecodeError(EmployeeFacadeError):
    code = "UPSTREAM_DECODE_ERROR"

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"{operation}: malformed upstream payload: {detail}")
        self.operation = operation


# --- Module Notes -----------------------------------------------------------
# Exception handlers in `api.error_handlers` rely on `http_status` and `to_response()`;
# new failure kinds only need a subclass here.
