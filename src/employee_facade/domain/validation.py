"""
employee_facade.domain.validation

Identifier validation.

Responsibilities:
- Decide whether a caller-supplied employee id is a canonical UUID
  (8-4-4-4-12 hex groups, any case) before it reaches the upstream service.
"""

from __future__ import annotations

import re
import uuid

_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_uuid(value: str) -> bool:
    if not isinstance(value, str) or _CANONICAL_UUID.fullmatch(value) is None:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


# --- Module Notes -----------------------------------------------------------
# `uuid.UUID()` alone is too lenient (it accepts braces, `urn:uuid:` prefixes and
# unhyphenated hex), so the canonical shape is matched first.
