"""
tests.test_api

REST surface end to end (FastAPI app + fake upstream via dependency override).

Responsibilities:
- Route shapes, response bodies and status codes for each use case.
- Error taxonomy -> HTTP status translation.
"""

from __future__ import annotations

import uuid

import httpx
import pytest
import pytest_asyncio

from employee_facade.api.app import create_app
from employee_facade.api.deps import employee_gateway, upstream_http
from employee_facade.settings import Settings

UPSTREAM_BASE_URL = "http://upstream.test/api/v1/employee"


@pytest_asyncio.fixture
async def api(upstream):
    settings = Settings(env="test", upstream_base_url=UPSTREAM_BASE_URL, retry_base_delay_ms=0)
    app = create_app(settings=settings)
    app.dependency_overrides[upstream_http] = upstream.client

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.asyncio
async def test_get_all_employees(api, upstream) -> None:
    record = upstream.add("Alice", 5000, employee_age=28, employee_title="Dev")

    r = await api.get("/")

    assert r.status_code == 200
    assert r.json() == [record]
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_search(api, upstream) -> None:
    upstream.add("Alice", 1)
    upstream.add("Bob", 2)

    r = await api.get("/search/aLi")

    assert r.status_code == 200
    assert [e["employee_name"] for e in r.json()] == ["Alice"]


@pytest.mark.asyncio
async def test_highest_salary_and_top_ten(api, upstream) -> None:
    upstream.add("low", 100)
    upstream.add("high", 300)

    r = await api.get("/highestSalary")
    assert r.status_code == 200
    assert r.json() == 300

    r = await api.get("/topTenHighestEarningEmployeeNames")
    assert r.status_code == 200
    assert r.json() == ["high", "low"]


@pytest.mark.asyncio
async def test_get_by_id(api, upstream) -> None:
    record = upstream.add("Alice", 5000)

    r = await api.get(f"/{record['id']}")

    assert r.status_code == 200
    assert r.json()["employee_name"] == "Alice"


@pytest.mark.asyncio
async def test_get_by_malformed_id_is_bad_request(api, upstream) -> None:
    r = await api.get("/not-a-uuid")

    assert r.status_code == 400
    body = r.json()
    assert body["status"] == 400
    assert body["code"] == "INVALID_EMPLOYEE_ID"
    assert body["message"] == "Invalid UUID format: not-a-uuid"
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_get_unknown_id_is_not_found(api) -> None:
    missing = str(uuid.uuid4())

    r = await api.get(f"/{missing}")

    assert r.status_code == 404
    assert r.json()["message"] == f"Employee not found: {missing}"


@pytest.mark.asyncio
async def test_create_employee(api, upstream) -> None:
    r = await api.post("/", json={"name": "Grace", "salary": 90000, "age": 45, "title": "Admiral"})

    assert r.status_code == 200
    body = r.json()
    assert body["employee_name"] == "Grace"
    assert body["employee_salary"] == 90000
    assert body["employee_email"] == "grace@company.com"
    assert len(upstream.records) == 1


@pytest.mark.asyncio
async def test_create_with_bad_body_is_bad_request(api, upstream) -> None:
    r = await api.post("/", json={"name": "Grace", "salary": "lots"})

    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert {d["field"] for d in body["details"]} >= {"body.salary", "body.age", "body.title"}
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_delete_returns_plain_text_name(api, upstream) -> None:
    record = upstream.add("Alice", 5000)

    r = await api.delete(f"/{record['id']}")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Alice"


@pytest.mark.asyncio
async def test_delete_rejected_is_server_error(api, upstream) -> None:
    record = upstream.add("Alice", 5000)
    upstream.delete_flag = False

    r = await api.delete(f"/{record['id']}")

    assert r.status_code == 500
    assert r.json()["message"] == "Delete failed for employee: Alice"


@pytest.mark.asyncio
async def test_upstream_down_is_server_error_with_guidance(api, upstream) -> None:
    upstream.transport_error = httpx.ConnectError("connection refused")

    r = await api.get("/")

    assert r.status_code == 500
    body = r.json()
    assert body["code"] == "UPSTREAM_UNAVAILABLE"
    assert "running" in body["message"]


@pytest.mark.asyncio
async def test_rate_limit_exhausted_is_server_error(api, upstream) -> None:
    upstream.respond_with(429, 429, 429)

    r = await api.get("/highestSalary")

    assert r.status_code == 500
    assert r.json()["code"] == "UPSTREAM_RATE_LIMITED"
    assert len(upstream.requests) == 3


@pytest.mark.asyncio
async def test_non_json_upstream_body_is_decode_error(api, upstream) -> None:
    upstream.queue(
        httpx.Response(200, text="<html>oops</html>", headers={"content-type": "text/html"})
    )

    r = await api.get("/")

    assert r.status_code == 500
    body = r.json()
    assert body["code"] == "UPSTREAM_DECODE_ERROR"
    assert "not JSON" in body["message"]


@pytest.mark.asyncio
async def test_nameless_record_is_listed_but_not_searched(api, upstream) -> None:
    upstream.add("Alice", 5000)
    upstream.add(None, 7000, id=None)

    listed = await api.get("/")
    searched = await api.get("/search/ali")

    assert listed.status_code == 200
    assert [(e["id"] is None, e["employee_name"]) for e in listed.json()] == [
        (False, "Alice"),
        (True, None),
    ]
    assert [e["employee_name"] for e in searched.json()] == ["Alice"]


class _BrokenGateway:
    async def list_employees(self):
        raise RuntimeError("gateway wiring is broken")


@pytest.mark.asyncio
async def test_unexpected_error_keeps_its_message() -> None:
    settings = Settings(env="test", upstream_base_url=UPSTREAM_BASE_URL)
    app = create_app(settings=settings)
    app.dependency_overrides[employee_gateway] = _BrokenGateway

    # Starlette re-raises after the catch-all handler has sent its response.
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/")

    assert r.status_code == 500
    body = r.json()
    assert body["code"] == "INTERNAL_ERROR"
    assert body["message"] == "gateway wiring is broken"
