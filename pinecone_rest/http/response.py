"""Uniform classification of HTTP responses.

:func:`classify_response` is the only place that decides whether a response
is a success.  Every facade funnels its responses through it (via
:class:`~pinecone_rest.http.resource_client.ResourceClient`), so failures are
reported the same way no matter which endpoint produced them.
"""

import json
from typing import Any, Union

from pinecone_rest.errors import (
    PineconeApiError,
    PineconeAuthError,
    PineconeDecodeError,
    PineconeRateLimitError,
    PineconeTimeoutError,
)

DecodedBody = Union[dict[str, Any], list[Any]]

DEFAULT_ERROR_MESSAGE = "API request failed"

AUTH_STATUSES = frozenset({401, 403})
TIMEOUT_STATUSES = frozenset({408, 504})
RATE_LIMIT_STATUS = 429


def classify_response(status_code: int, body: Union[str, bytes]) -> DecodedBody:
    """Decode a successful response or raise the matching error.

    Statuses below 400 are successes: an empty body (or JSON ``null``)
    decodes to ``{}``, anything else must be valid UTF-8 JSON.

    Statuses from 400 up are failures.  The body is parsed leniently and the
    message taken from ``message``, then ``error.message``, then ``error``,
    then :data:`DEFAULT_ERROR_MESSAGE`.

    Raises:
        PineconeDecodeError:    Malformed JSON on a successful status.
        PineconeAuthError:      401 / 403.
        PineconeTimeoutError:   408 / 504.
        PineconeRateLimitError: 429.
        PineconeApiError:       Any other status ``>= 400``.
    """
    if status_code >= 400:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        data = _parse_error_body(body)
        message = _extract_message(data)

        if status_code in AUTH_STATUSES:
            raise PineconeAuthError(message, status_code=status_code)
        if status_code in TIMEOUT_STATUSES:
            raise PineconeTimeoutError(message, status_code=status_code)
        if status_code == RATE_LIMIT_STATUS:
            raise PineconeRateLimitError(message, status_code, data)
        raise PineconeApiError(message, status_code, data)

    if not body:
        return {}

    try:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        decoded = json.loads(body)
    except ValueError as exc:
        raise PineconeDecodeError(
            f"Failed to decode JSON response: {exc}", status_code=status_code, cause=exc
        ) from exc

    return decoded if decoded is not None else {}


def _parse_error_body(body: str) -> dict[str, Any]:
    # An unreadable error body must never mask the status-based error.
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _extract_message(data: dict[str, Any]) -> str:
    message = data.get("message")
    if message is None:
        error = data.get("error")
        if isinstance(error, dict) and error.get("message") is not None:
            message = error["message"]
        else:
            message = error
    if message is None:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(message, (dict, list)):
        return json.dumps(message)
    return str(message)
