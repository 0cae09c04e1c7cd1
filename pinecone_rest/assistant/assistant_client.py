"""Chat and file management for one assistant.

Requests go to the assistant's data host (``host`` from the describe
response) and every path carries the assistant name::

    /assistant/chat/<name>/completions
    /assistant/files/<name>[/<file_id>]
"""

import logging
import os
import secrets
from typing import Any, Optional, Sequence

from pinecone_rest.errors import PineconeValidationError
from pinecone_rest.http.resource_client import ResourceClient, quote_segment

logger = logging.getLogger(__name__)


class AssistantClient:
    """Operations scoped to the assistant called ``name``.

    Args:
        client: :class:`ResourceClient` bound to the assistant host.
        name:   Assistant name, encoded into every request path.
    """

    def __init__(self, client: ResourceClient, name: str):
        self._client = client
        self.name = name

    @property
    def _files_path(self) -> str:
        return f"/assistant/files/{quote_segment(self.name)}"

    def close(self):
        self._client.close()

    def chat(
        self,
        messages: Sequence[dict[str, Any]],
        options: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send a chat turn.

        Args:
            messages: ``[{"role": "user", "content": "..."}, ...]``.
            options:  Extra body fields (``model``, ``filter``, ...) merged
                      after ``messages``.
        """
        if not messages:
            raise PineconeValidationError("At least one message is required for chat.")

        payload = {"messages": list(messages), **(options or {})}
        return self._client.post(
            f"/assistant/chat/{quote_segment(self.name)}/completions",
            json=payload,
            operation="chat with assistant",
        )

    def upload_file(self, path: str) -> dict[str, Any]:
        """Upload a local file as a multipart ``file`` part.

        Raises:
            PineconeValidationError: ``path`` is not an existing file.  No
                request is made.
        """
        if not os.path.isfile(path):
            raise PineconeValidationError(f"File not found: {path}")

        # Overrides the client-wide JSON content type; httpx reuses the boundary.
        boundary = secrets.token_hex(16)
        headers = {"Content-Type": f"multipart/form-data; boundary={boundary}"}

        logger.info("Uploading %s to assistant %r", path, self.name)
        with open(path, "rb") as handle:
            return self._client.post(
                self._files_path,
                files={"file": (os.path.basename(path), handle)},
                headers=headers,
                operation="upload file to assistant",
            )

    def list_files(self) -> dict[str, Any]:
        return self._client.get(self._files_path, operation="list assistant files")

    def describe_file(self, file_id: str) -> dict[str, Any]:
        return self._client.get(
            f"{self._files_path}/{quote_segment(file_id)}",
            operation="describe assistant file",
            subject=file_id,
        )

    def delete_file(self, file_id: str) -> None:
        self._client.delete(
            f"{self._files_path}/{quote_segment(file_id)}",
            operation="delete assistant file",
            subject=file_id,
        )
