"""Error taxonomy for the front desk relay."""


class FrontDeskError(Exception):
    """Base class for errors raised by the relay."""


class ConfigurationError(FrontDeskError):
    """A required setting is missing at startup."""


class BadRequest(FrontDeskError):
    """The kiosk sent a body that is not a valid visitor announcement."""


class ExternalServiceError(FrontDeskError):
    """The directory or messaging API was unreachable or rejected the call."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class SerializationError(FrontDeskError):
    """A response payload could not be encoded as JSON."""
