"""
tests.conftest

Shared fixtures.

Responsibilities:
- An in-memory fake of the upstream employee service served through `httpx.MockTransport`.
- A recording replacement for `asyncio.sleep` so retry backoff is observable and instant.
"""

from __future__ import annotations

import json
import uuid
from collections import deque
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from employee_facade.services.employee_gateway import EmployeeGateway
from employee_facade.upstream.retry import RetryingHttpClient, RetryPolicy

UPSTREAM_BASE_URL = "http://upstream.test/api/v1/employee"
UPSTREAM_PATH = "/api/v1/employee"


def _record(name: str | None, salary: Any, **overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": str(uuid.uuid4()),
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": 30,
        "employee_title": "Engineer",
        "employee_email": f"{name.split()[0].lower()}@company.com" if name else None,
    }
    record.update(overrides)
    return record


class FakeUpstream:
    """
    Minimal stand-in for the upstream `/api/v1/employee` resource.
    Responses queued with `respond_with` are served first, in order, for any request.
    """

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []
        self.delete_flag: bool = True
        self.transport_error: Exception | None = None
        self._queued: deque[httpx.Response] = deque()

    def add(self, name: str | None, salary: Any, **overrides: Any) -> dict[str, Any]:
        record = _record(name, salary, **overrides)
        self.records.append(record)
        return record

    def respond_with(self, *statuses: int) -> None:
        for status in statuses:
            self._queued.append(httpx.Response(status, json={"status": "scripted"}))

    def queue(self, response: httpx.Response) -> None:
        self._queued.append(response)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.transport_error is not None:
            raise self.transport_error
        if self._queued:
            return self._queued.popleft()

        path = request.url.path
        if path == UPSTREAM_PATH:
            if request.method == "GET":
                return httpx.Response(200, json={"data": self.records})
            if request.method == "POST":
                body = json.loads(request.content)
                created = _record(body["name"], body["salary"], employee_age=body["age"],
                                  employee_title=body["title"])
                self.records.append(created)
                return httpx.Response(200, json={"data": created})
            if request.method == "DELETE":
                return self._delete(json.loads(request.content)["name"])

        if path.startswith(UPSTREAM_PATH + "/") and request.method == "GET":
            employee_id = path.rsplit("/", 1)[-1]
            for r in self.records:
                if r["id"] == employee_id:
                    return httpx.Response(200, json={"data": r})
            return httpx.Response(404, json={"status": "Not Found"})

        return httpx.Response(405)

    def _delete(self, name: str) -> httpx.Response:
        if not self.delete_flag:
            return httpx.Response(200, json={"data": False})
        self.records = [r for r in self.records if r["employee_name"] != name]
        return httpx.Response(200, json={"data": True})


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def sleeps() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_record() -> Callable[..., dict[str, Any]]:
    return _record


@pytest.fixture
def gateway(upstream: FakeUpstream, sleeps: RecordingSleep) -> EmployeeGateway:
    return EmployeeGateway(
        base_url=UPSTREAM_BASE_URL,
        http=upstream.client(),
        retry=RetryingHttpClient(policy=RetryPolicy(), sleep=sleeps),
    )


# --- Module Notes -----------------------------------------------------------
# MockTransport clients hold no sockets, so fixtures do not need to close them.
