"""
employee_facade.services.employee_gateway

Employee use cases on top of the upstream employee-record service.

Responsibilities:
- List, search, get-by-id, highest salary, top-10 names, create, delete-by-id.
- Issue every outbound call through `RetryingHttpClient` and translate its `Failure`
  into the domain error taxonomy.
- Decode payloads with the upstream mapper; aggregate in memory.

Invariants:
- Id-based operations validate the id before any outbound request.
- Reads always fetch the full collection; nothing is cached between calls.
- Delete resolves the employee name first; the upstream delete is keyed by name.
"""

from __future__ import annotations

from typing import Any

import httpx

from employee_facade.domain import aggregation
from employee_facade.domain.errors import (
    DeleteRejectedError,
    EmployeeFacadeError,
    EmployeeNotFoundError,
    InvalidEmployeeIdError,
    RateLimitedError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamUnavailableError,
)
from employee_facade.domain.models import Employee, EmployeeInput
from employee_facade.domain.validation import is_valid_uuid
from employee_facade.observability.logging import get_logger
from employee_facade.settings import Settings
from employee_facade.upstream import mapper
from employee_facade.upstream.retry import Failure, RetryingHttpClient, RetryPolicy

log = get_logger(__name__)

NOT_FOUND = 404


class EmployeeGateway:
    def __init__(
        self,
        *,
        base_url: str,
        http: httpx.AsyncClient,
        retry: RetryingHttpClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http
        self._retry = retry or RetryingHttpClient()

    @classmethod
    def from_settings(
        cls,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        retry: RetryingHttpClient | None = None,
    ) -> EmployeeGateway:
        return cls(
            base_url=settings.upstream_base_url,
            http=http,
            retry=retry or RetryingHttpClient(policy=RetryPolicy.from_settings(settings)),
        )

    # --- Reads ----------------------------------------------------------------

    async def list_employees(self) -> list[Employee]:
        operation = "GET all employees"
        response = await self._call(operation, "GET", self._base_url)
        body = mapper.response_payload(response, operation=operation)
        employees = mapper.decode_employee_list(body, operation=operation)
        log.info("employees_fetched", count=len(employees))
        return employees

    async def search_by_name(self, fragment: str) -> list[Employee]:
        matches = aggregation.search_by_name(await self.list_employees(), fragment)
        log.info("employees_searched", fragment=fragment, matches=len(matches))
        return matches

    async def get_employee(self, employee_id: str) -> Employee:
        if not is_valid_uuid(employee_id):
            log.warning("invalid_employee_id", employee_id=employee_id)
            raise InvalidEmployeeIdError(employee_id)

        operation = "GET employee by id"
        try:
            response = await self._call(operation, "GET", f"{self._base_url}/{employee_id}")
        except UpstreamError as e:
            if e.status_code == NOT_FOUND:
                log.warning("employee_not_found", employee_id=employee_id)
                raise EmployeeNotFoundError(employee_id) from e
            raise
        body = mapper.response_payload(response, operation=operation)
        return mapper.decode_employee_envelope(body, operation=operation)

    async def highest_salary(self) -> int:
        top = aggregation.highest_salary(await self.list_employees())
        log.info("highest_salary_computed", highest_salary=top)
        return top

    async def top_earner_names(self) -> list[str | None]:
        names = aggregation.top_earner_names(await self.list_employees())
        log.info("top_earners_computed", names=names)
        return names

    # --- Writes ---------------------------------------------------------------

    async def create_employee(self, employee_input: EmployeeInput) -> Employee:
        operation = "POST create employee"
        log.info("employee_create", name=employee_input.name, title=employee_input.title)
        response = await self._call(
            operation, "POST", self._base_url, json=mapper.creation_payload(employee_input)
        )
        body = mapper.response_payload(response, operation=operation)
        created = mapper.decode_employee_envelope(body, operation=operation)
        log.info("employee_created", employee_id=created.id)
        return created

    async def delete_employee(self, employee_id: str) -> str:
        # Lookup failures (bad id, 404, upstream errors) propagate unchanged.
        name = (await self.get_employee(employee_id)).name

        operation = "DELETE employee"
        if name is None:
            # The upstream delete is keyed by name; a nameless record cannot be addressed.
            raise UpstreamDecodeError(operation, f"employee {employee_id} has no name to delete by")
        response = await self._call(operation, "DELETE", self._base_url, json={"name": name})
        body = mapper.response_payload(response, operation=operation)
        if not mapper.decode_delete_flag(body, operation=operation):
            log.error("employee_delete_rejected", employee_id=employee_id, name=name)
            raise DeleteRejectedError(name)

        log.info("employee_deleted", employee_id=employee_id, name=name)
        return name

    # --- Upstream plumbing ----------------------------------------------------

    async def _call(
        self,
        description: str,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        async def send() -> httpx.Response:
            r = await self._http.request(method, url, json=json)
            r.raise_for_status()
            return r

        result = await self._retry.execute(send, description=description)
        if isinstance(result, Failure):
            raise self._translate(description, result)
        return result.value

    def _translate(self, description: str, failure: Failure) -> EmployeeFacadeError:
        error = failure.error
        if failure.rate_limited:
            translated: EmployeeFacadeError = RateLimitedError(description, failure.attempts)
        elif isinstance(error, EmployeeFacadeError):
            return error
        elif isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            translated = UpstreamError(
                f"{description}: upstream answered {status} {error.response.reason_phrase}",
                status_code=status,
            )
        elif isinstance(error, httpx.TransportError):
            log.error("upstream_unreachable", operation=description, error=str(error))
            translated = UpstreamUnavailableError(self._base_url, type(error).__name__)
        else:
            translated = UpstreamError(f"{description}: {error}")
        translated.__cause__ = error
        return translated


# --- Module Notes -----------------------------------------------------------
# The gateway is request-scoped in the API layer (see `api.deps`), but it holds no
# mutable state, so one instance could equally serve many requests.
