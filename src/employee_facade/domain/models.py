"""
employee_facade.domain.models

Employee domain models.

Responsibilities:
- Define the immutable `Employee` entity produced by decoding upstream payloads.
- Define `EmployeeInput`, the transient value carried by a create request.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Employee:
    """
    Employee record as known to the upstream service.
    Frozen: the id (and every other field) is fixed at construction.
    """

    id: str | None
    name: str | None
    salary: int
    age: int
    title: str | None = None
    email: str | None = None


@dataclass(frozen=True, slots=True)
class EmployeeInput:
    # id and email are assigned by the upstream service.
    name: str
    salary: int
    age: int
    title: str


# --- Module Notes -----------------------------------------------------------
# API DTOs (field names `employee_name`, `employee_salary`, ...) live in the router;
# these types stay free of wire naming.
