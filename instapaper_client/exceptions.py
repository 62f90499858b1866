"""
Custom exceptions for Instapaper client library.
"""


class InstapaperError(Exception):
    """Base exception for Instapaper client errors."""
    pass


class ConfigurationError(InstapaperError):
    """Raised when client configuration is invalid."""
    pass


class PreconditionError(InstapaperError):
    """Raised when a token is needed but no username/password has been set."""
    pass


class ProtocolError(InstapaperError):
    """Raised when the access token response lacks the expected fields."""
    pass


class ParameterError(InstapaperError, ValueError):
    """Raised when endpoint parameters fail validation."""
    pass


class HTTPError(InstapaperError):
    """Raised when the HTTP request itself fails."""
    pass


class ApiError(InstapaperError):
    """
    Raised when the API answers with a non-2xx status.

    The raw body is kept as-is; some endpoints return a JSON error list,
    others plain text.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error: {status_code} {body}")
