"""
employee_facade.upstream

Upstream employee-record service boundary.

Responsibilities:
- Schema-checked models of the upstream wire payloads and their mapping to domain types.
- The retry-on-429 wrapper used around every outbound call.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The gateway depends on this boundary; routers never talk to the upstream directly.
