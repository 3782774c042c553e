"""
Chronos client exceptions.

Every failure of an operation is raised as a subclass of ChronosError so callers
can catch the whole family at once or pick out the kind they care about.
"""
from typing import Any


class ChronosError(Exception):
    """Base exception for all Chronos client errors."""
    pass


class InvalidInputError(ChronosError, ValueError):
    """
    Raised when caller input is rejected before any request is sent.

    Examples:
    - Repetitions not of the form R<n>
    - Interval not starting with P
    - Blank job name for a search
    """
    pass


class SerializationError(ChronosError):
    """Raised when a request body cannot be converted to JSON."""
    pass


class TransportError(ChronosError):
    """Raised when the HTTP round trip itself fails (refused, timeout, DNS, TLS)."""
    pass


class DecodingError(ChronosError):
    """Raised when a response body is not the JSON the caller expected."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class ServiceError(ChronosError):
    """
    Raised when Chronos answers with a status outside 200-299.

    The message is the status line, e.g. "404 Not Found". Whatever JSON the
    server sent back is kept on `result`.
    """

    def __init__(self, status_code: int, status_line: str, result: Any = None):
        self.status_code = status_code
        self.status_line = status_line
        self.result = result
        super().__init__(status_line)


class ConnectivityError(ChronosError):
    """Raised when the cluster cannot be reached while connecting."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Could not reach chronos cluster: {detail}")
