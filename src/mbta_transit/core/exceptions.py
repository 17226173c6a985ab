"""Custom exceptions for MBTA transit line analysis."""


class TransitError(Exception):
    """Base exception for transit analysis errors."""

    pass


class StopNotFoundError(TransitError):
    """Raised when a stop name is not present in the transit network."""

    def __init__(self, stop_name: str):
        super().__init__(f"No such stop: {stop_name}")
        self.stop_name = stop_name


class MalformedDataError(TransitError):
    """Raised when an API payload does not have the expected shape."""

    pass


class NetworkError(TransitError):
    """Raised when there's a network-related error."""

    pass


class ValidationError(TransitError):
    """Raised when input validation fails."""

    pass
