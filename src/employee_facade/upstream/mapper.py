"""
employee_facade.upstream.mapper

Upstream payload schemas and the record -> `Employee` mapping.

Responsibilities:
- Describe the upstream envelopes (`{"data": ...}`) as pydantic models with explicit
  required/optional fields.
- Coerce numeric fields to int; reject anything that is not a JSON number.
- Parse response bodies; a non-JSON body is a decode failure like any other.
- Fail atomically: one malformed record fails the whole envelope.
"""

from __future__ import annotations

import math
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError, field_validator

from employee_facade.domain.errors import UpstreamDecodeError
from employee_facade.domain.models import Employee, EmployeeInput


class UpstreamEmployeeRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = None
    employee_name: str | None = None
    employee_salary: int
    employee_age: int
    employee_title: str | None = None
    employee_email: str | None = None

    @field_validator("employee_salary", "employee_age", mode="before")
    @classmethod
    def _numeric_to_int(cls, value: Any) -> int:
        # Upstream sends JSON numbers; floats are truncated like an integer narrowing.
        # bool is an int subclass and numeric strings would pass lax mode, so both are rejected.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {type(value).__name__}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("expected a finite number")
        return int(value)

    def to_domain(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.employee_name,
            salary=self.employee_salary,
            age=self.employee_age,
            title=self.employee_title,
            email=self.employee_email,
        )


class EmployeeListEnvelope(BaseModel):
    data: list[UpstreamEmployeeRecord]


class EmployeeEnvelope(BaseModel):
    data: UpstreamEmployeeRecord


class DeleteEnvelope(BaseModel):
    data: StrictBool


def decode_employee(record: Any, *, operation: str = "decode employee") -> Employee:
    return _validate(UpstreamEmployeeRecord, record, operation).to_domain()


def decode_employee_list(payload: Any, *, operation: str) -> list[Employee]:
    envelope = _validate(EmployeeListEnvelope, payload, operation)
    return [r.to_domain() for r in envelope.data]


def decode_employee_envelope(payload: Any, *, operation: str) -> Employee:
    return _validate(EmployeeEnvelope, payload, operation).data.to_domain()


def decode_delete_flag(payload: Any, *, operation: str) -> bool:
    return _validate(DeleteEnvelope, payload, operation).data


def response_payload(response: httpx.Response, *, operation: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueError subclasses.
        content_type = response.headers.get("content-type", "<none>")
        raise UpstreamDecodeError(operation, f"body is not JSON ({content_type}): {e}") from e


def creation_payload(employee_input: EmployeeInput) -> dict[str, Any]:
    return {
        "name": employee_input.name,
        "salary": employee_input.salary,
        "age": employee_input.age,
        "title": employee_input.title,
    }


def _validate(model: type[BaseModel], payload: Any, operation: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise UpstreamDecodeError(operation, _summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(p) for p in first["loc"]) or "<root>"
    return f"{loc}: {first['msg']} ({error.error_count()} error(s))"


# --- Module Notes -----------------------------------------------------------
# Upstream field names (`employee_*`) stop here; everything past the gateway sees `Employee`.
# Only salary and age are required: records with a null id or name still decode.
