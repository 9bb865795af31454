# fleetlink/utils/errors.py
"""
Domain errors raised by the services layer.
Each carries the HTTP status it maps to; main.py renders them in the
standard error envelope.
"""

from typing import Optional


class FleetLinkError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)


class ValidationError(FleetLinkError):
    status_code = 422
    default_message = "Received data is not valid"


class NotFoundError(FleetLinkError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(FleetLinkError):
    status_code = 409
    default_message = "Vehicle is no longer available for the selected time slot"


class StoreError(FleetLinkError):
    """Persistence-layer failure (connectivity, driver errors). Never shown verbatim."""
    status_code = 500
    default_message = "Internal server error"
