"""Custom exceptions for google_places operations."""


class PlacesError(Exception):
    """Base exception for all google_places errors."""


class TransportError(PlacesError):
    """
    Raised when the HTTP exchange itself fails.

    Covers connection failures, timeouts that outlived the transport
    retries, and non-2xx HTTP responses.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(PlacesError):
    """Raised when a response body cannot be decoded into typed objects."""


class OptionsValidationError(PlacesError, ValueError):
    """Raised when search options are invalid, before any request is made."""


class ApiStatusError(PlacesError):
    """
    Raised when the API answers with a non-OK status.

    The raw status string and the optional ``error_message`` from the
    response body are kept for callers that want to branch on them.
    """

    def __init__(
        self,
        message: str,
        status: str | None = None,
        error_message: str | None = None,
    ):
        super().__init__(message)
        self.status = status
        self.error_message = error_message


class OverQueryLimitError(ApiStatusError):
    """Raised when the API key is over its quota."""


class RequestDeniedError(ApiStatusError):
    """Raised when the request was denied, usually a bad API key."""


class InvalidRequestError(ApiStatusError):
    """Raised when a query parameter is missing or a page token is not valid yet."""


class NotFoundError(ApiStatusError):
    """Raised when the referenced place does not exist."""


class UnknownError(ApiStatusError):
    """Raised for server side errors and statuses this package does not know."""
