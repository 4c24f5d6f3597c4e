"""
employee_facade.api

API package for the Employee Facade service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error handlers and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + delegation to the gateway.
