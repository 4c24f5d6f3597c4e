"""
employee_facade.api.routers.health

Liveness endpoint.

Responsibilities:
- Provide a liveness probe (`/healthz`) that does not touch the upstream service.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


# --- Module Notes -----------------------------------------------------------
# Registered before the employee router so `/healthz` is not captured by `GET /{id}`.
