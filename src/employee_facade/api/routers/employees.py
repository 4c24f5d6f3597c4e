"""
employee_facade.api.routers.employees

Public employee endpoints.

Responsibilities:
- Map HTTP requests onto `EmployeeGateway` use cases.
- Shape responses with the upstream field names (`employee_name`, ...).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from employee_facade.api.deps import employee_gateway
from employee_facade.domain.models import Employee, EmployeeInput
from employee_facade.observability.logging import get_logger
from employee_facade.services.employee_gateway import EmployeeGateway

router = APIRouter(tags=["employees"])

log = get_logger(__name__)


class EmployeeResponse(BaseModel):
    id: str | None = None
    employee_name: str | None = None
    employee_salary: int
    employee_age: int
    employee_title: str | None = None
    employee_email: str | None = None

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeResponse:
        return cls(
            id=employee.id,
            employee_name=employee.name,
            employee_salary=employee.salary,
            employee_age=employee.age,
            employee_title=employee.title,
            employee_email=employee.email,
        )


class CreateEmployeeRequest(BaseModel):
    name: str
    salary: int
    age: int
    title: str

    def to_domain(self) -> EmployeeInput:
        return EmployeeInput(name=self.name, salary=self.salary, age=self.age, title=self.title)


# Fixed paths are declared before `/{employee_id}` so they are not captured as ids.


@router.get("/", response_model=list[EmployeeResponse])
async def get_all_employees(
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> list[EmployeeResponse]:
    log.info("api_request", route="GET /")
    return [EmployeeResponse.from_domain(e) for e in await gateway.list_employees()]


@router.get("/search/{fragment}", response_model=list[EmployeeResponse])
async def search_employees_by_name(
    fragment: str,
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> list[EmployeeResponse]:
    log.info("api_request", route="GET /search/{fragment}", fragment=fragment)
    return [EmployeeResponse.from_domain(e) for e in await gateway.search_by_name(fragment)]


@router.get("/highestSalary")
async def get_highest_salary(gateway: EmployeeGateway = Depends(employee_gateway)) -> int:
    log.info("api_request", route="GET /highestSalary")
    return await gateway.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames")
async def get_top_ten_highest_earning_employee_names(
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> list[str | None]:
    log.info("api_request", route="GET /topTenHighestEarningEmployeeNames")
    return await gateway.top_earner_names()


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee_by_id(
    employee_id: str,
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> EmployeeResponse:
    # `employee_id` stays a plain str: format checking belongs to the gateway (400, not 422).
    log.info("api_request", route="GET /{employee_id}", employee_id=employee_id)
    return EmployeeResponse.from_domain(await gateway.get_employee(employee_id))


@router.post("/", response_model=EmployeeResponse)
async def create_employee(
    body: CreateEmployeeRequest,
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> EmployeeResponse:
    log.info("api_request", route="POST /", name=body.name)
    return EmployeeResponse.from_domain(await gateway.create_employee(body.to_domain()))


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee_by_id(
    employee_id: str,
    gateway: EmployeeGateway = Depends(employee_gateway),
) -> PlainTextResponse:
    log.info("api_request", route="DELETE /{employee_id}", employee_id=employee_id)
    return PlainTextResponse(await gateway.delete_employee(employee_id))


# --- Module Notes -----------------------------------------------------------
# Every endpoint re-fetches from upstream; there is no response caching here either.
