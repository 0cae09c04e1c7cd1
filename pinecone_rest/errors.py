"""Exception hierarchy raised by every remote-facing operation.

All errors derive from :class:`PineconeError`, so callers can catch broadly
or pick a specific kind:

==========================  ==================================================
Class                       Raised when
==========================  ==================================================
``PineconeValidationError`` Local input is rejected before any network call.
``PineconeAuthError``       The service answers 401 or 403.
``PineconeTimeoutError``    The service answers 408/504, or the transport
                            deadline expires.
``PineconeApiError``        Any other status ``>= 400``.
``PineconeRateLimitError``  Status 429 (a :class:`PineconeApiError`).
``PineconeTransportError``  DNS / connection-level failure.
``PineconeDecodeError``     A successful response carries malformed JSON.
==========================  ==================================================
"""

from typing import Any, Optional


class PineconeError(Exception):
    """Base exception for all client errors.

    Attributes:
        status_code: HTTP status that produced the error, or ``None`` for
                     errors raised locally or at the transport layer.
        cause:       The underlying exception, if any.
    """

    def __init__(
        self,
        message: str = "",
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause


class PineconeApiError(PineconeError):
    """The service rejected the request with a non-auth, non-timeout status.

    ``response_data`` holds the decoded error body (``{}`` when the body was
    empty or not a JSON object).
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_data: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, status_code=status_code, cause=cause)
        self.response_data = response_data or {}


class PineconeRateLimitError(PineconeApiError):
    """HTTP 429."""


class PineconeAuthError(PineconeError):
    """HTTP 401 or 403."""


class PineconeTimeoutError(PineconeError):
    """HTTP 408/504, or a transport-level deadline."""


class PineconeValidationError(PineconeError, ValueError):
    """Local input rejected before reaching the network."""


class PineconeTransportError(PineconeError):
    """The request never produced an HTTP response."""


class PineconeDecodeError(PineconeError):
    """A successful response body was not valid JSON."""
