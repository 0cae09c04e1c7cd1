"""Thin request executor bound to one base URL.

:class:`ResourceClient` owns a single :class:`httpx.Client` configured with
the base URL, header set and timeout of one resource (the control plane, an
index host or an assistant host).  It performs exactly one request per call,
never retries, and hands every response to
:func:`~pinecone_rest.http.response.classify_response`.

Transport failures are re-raised as :class:`PineconeTimeoutError` or
:class:`PineconeTransportError` with an operation-specific prefix::

    Failed to list indexes: <cause>
    Failed to describe index: my-index. <cause>
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from pinecone_rest.errors import PineconeTimeoutError, PineconeTransportError
from pinecone_rest.http.response import DecodedBody, classify_response

logger = logging.getLogger(__name__)


def quote_segment(value: Any) -> str:
    """Percent-encode a user-supplied identifier for use as one path segment."""
    return quote(str(value), safe="")


def failure_message(operation: str, subject: Optional[str], cause: Any) -> str:
    """Format the message attached to a failed operation."""
    if subject is not None:
        return f"Failed to {operation}: {subject}. {cause}"
    return f"Failed to {operation}: {cause}"


class ResourceClient:
    """Request executor over one base URL.

    Args:
        base_url:  Origin (optionally with a path prefix) every request is
                   resolved against.
        headers:   Header set sent with every request.
        timeout:   Request timeout in seconds.
        transport: Optional :class:`httpx.BaseTransport`; tests pass an
                   :class:`httpx.MockTransport` here.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self._http = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        subject: Optional[str] = None,
        json: Any = None,
        params: Any = None,
        files: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> DecodedBody:
        """Send one request and return the decoded body.

        Args:
            method:    HTTP verb.
            path:      Path relative to :attr:`base_url`; identifiers must
                       already be encoded with :func:`quote_segment`.
            operation: Human description used in failure messages
                       (e.g. ``"describe index"``).
            subject:   Optional resource name appended to the message.
            json:      JSON body; ``None`` sends no body.
            params:    Query parameters (a mapping or a list of pairs).
            files:     Multipart files, passed straight to httpx.
            headers:   Per-request header overrides.

        Raises:
            PineconeTimeoutError:   The transport deadline expired.
            PineconeTransportError: No HTTP response was received.
            PineconeError:          Any error raised by
                                    :func:`classify_response`.
        """
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = self._http.request(
                method,
                path,
                json=json,
                params=params,
                files=files,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            message = failure_message(operation, subject, exc)
            logger.error(message)
            raise PineconeTimeoutError(message, cause=exc) from exc
        except httpx.HTTPError as exc:
            message = failure_message(operation, subject, exc)
            logger.error(message)
            raise PineconeTransportError(message, cause=exc) from exc

        return classify_response(response.status_code, response.content)

    def get(self, path: str, **kwargs: Any) -> DecodedBody:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> DecodedBody:
        return self.request("POST", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> DecodedBody:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> DecodedBody:
        return self.request("DELETE", path, **kwargs)

    def close(self):
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "ResourceClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
