"""
Query Service Errors
--------------------
Every failure the service reports to a caller derives from QueryServiceError
and carries the HTTP status it maps to.
"""

from typing import Iterable, Optional


class QueryServiceError(Exception):
    """Base class for errors surfaced by the query service."""
    status_code = 500


class ClientInputError(QueryServiceError):
    """Raised when request parameters are missing or unusable."""
    status_code = 400


class MissingParameterError(ClientInputError):
    """One or more required query parameters were absent or empty."""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        noun = "parameter" if len(self.fields) == 1 else "parameters"
        super().__init__(f"Missing required {noun}: {', '.join(self.fields)}")


class InvalidParameterError(ClientInputError):
    """A query parameter was present but could not be interpreted."""

    def __init__(self, field: str, value: Optional[str], reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for parameter '{field}': {reason}")


class StoreError(QueryServiceError):
    """Raised when connecting to, querying, or releasing the document store fails."""
    status_code = 500


class ConfigurationError(Exception):
    """Raised when settings are missing or malformed."""
    pass
