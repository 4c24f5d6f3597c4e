"""
employee_facade.domain.aggregation

Read-side computations over a fetched employee collection.

Responsibilities:
- Name substring search, highest salary, top earners.

Invariants:
- Inputs are never mutated; every function returns a new value.
- Upstream ordering is preserved for search results and for salary ties.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from operator import attrgetter

from employee_facade.domain.models import Employee

TOP_EARNERS_LIMIT = 10


def search_by_name(employees: Sequence[Employee], fragment: str) -> list[Employee]:
    # "" is a substring of every name, so an empty fragment matches everyone.
    # Nameless records never match, not even the empty fragment.
    needle = fragment.casefold()
    return [e for e in employees if e.name is not None and needle in e.name.casefold()]


def highest_salary(employees: Sequence[Employee]) -> int:
    return max((e.salary for e in employees), default=0)


def top_earner_names(
    employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT
) -> list[str | None]:
    # nlargest is documented as sorted(..., reverse=True)[:n], which is stable on ties,
    # and only keeps `limit` items in memory.
    top = heapq.nlargest(limit, employees, key=attrgetter("salary"))
    return [e.name for e in top]


# --- Module Notes -----------------------------------------------------------
# These run on the full upstream listing for every request (no cache), so they are
# written as single passes over the sequence.
