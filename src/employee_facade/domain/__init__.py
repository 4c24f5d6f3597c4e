"""
employee_facade.domain

Domain package.

Responsibilities:
- Employee entity and creation input.
- Error taxonomy shared by the gateway and the API layer.
- Pure helpers: id validation and in-memory aggregation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; everything here is safe to unit test directly.
