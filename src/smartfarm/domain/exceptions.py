"""Domain exceptions."""


class SmartFarmError(Exception):
    """Base exception for the Smart Farm backend."""

    status_code = 500


class NotFound(SmartFarmError):
    """Requested resource was not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class ValidationError(SmartFarmError):
    """Validation failed for input data."""

    status_code = 400


class Conflict(SmartFarmError):
    """Request conflicts with the current state of a resource."""

    status_code = 409
