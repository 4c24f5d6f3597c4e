"""
employee_facade.services

Service-layer package.

Responsibilities:
- Implement each employee use case as a short pipeline over upstream calls.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake transports.
