"""
employee_facade.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the shared upstream HTTP client and
  the employee gateway.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from employee_facade.services.employee_gateway import EmployeeGateway
from employee_facade.settings import Settings


def upstream_http(request: Request) -> httpx.AsyncClient:
    # The client is created on app startup in `employee_facade.api.app.create_app`.
    return request.app.state.upstream_http  # type: ignore[attr-defined]


def employee_gateway(
    request: Request,
    http: httpx.AsyncClient = Depends(upstream_http),
) -> EmployeeGateway:
    # Settings come from the app that is serving the request, not the process-wide cache.
    settings: Settings = request.app.state.settings  # type: ignore[attr-defined]
    return EmployeeGateway.from_settings(settings=settings, http=http)


# --- Module Notes -----------------------------------------------------------
# Tests override `upstream_http` (or `employee_gateway`) via `app.dependency_overrides`
# to route upstream traffic to an `httpx.MockTransport`.
