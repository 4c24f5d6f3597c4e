"""
employee_facade.api.error_handlers

Global exception handlers.

Responsibilities:
- Register every handler on the app in one place (`register_error_handlers`).
- EmployeeFacadeError -> its own HTTP status and JSON envelope.
- RequestValidationError (bad create body) -> 400 with field-level details.
- Anything else -> 500 with the exception message preserved, logged with traceback.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from employee_facade.domain.errors import EmployeeFacadeError, error_body
from employee_facade.observability.logging import get_logger

log = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeFacadeError, _facade_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


async def _facade_error_handler(request: Request, exc: EmployeeFacadeError) -> JSONResponse:
    if exc.http_status >= HTTP_500_INTERNAL_SERVER_ERROR:
        log.error("request_failed", code=exc.code, error=exc.message)
    else:
        log.info("request_rejected", code=exc.code, error=exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    log.info("request_invalid", details=details)
    body = error_body(
        status=HTTP_400_BAD_REQUEST, code="VALIDATION_ERROR", message="Invalid request data"
    )
    body["details"] = details
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=body)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("request_crashed", exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            status=HTTP_500_INTERNAL_SERVER_ERROR,
            code="INTERNAL_ERROR",
            message=str(exc) or type(exc).__name__,
        ),
    )


# --- Module Notes -----------------------------------------------------------
# The `Exception` handler runs in Starlette's ServerErrorMiddleware, which re-raises
# after the response is sent so the server still logs the crash.
