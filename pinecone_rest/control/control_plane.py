"""Account-level resource lifecycle: indexes, collections, backups, restore
jobs and assistants.

Every method is a direct translation of its arguments into one request on the
controller host.  List operations unwrap the response's collection key
(``indexes``, ``collections`` ...) and return ``[]`` when it is absent.
"""

import logging
from typing import Any, Optional

from pinecone_rest.errors import PineconeValidationError
from pinecone_rest.http.resource_client import ResourceClient, quote_segment

logger = logging.getLogger(__name__)

#: Optional keys forwarded by :meth:`ControlPlane.create_for_model`.
CREATE_FOR_MODEL_OPTIONAL_KEYS = ("deletion_protection", "tags", "schema", "read_capacity")


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


class ControlPlane:
    """Facade over the controller host.

    Args:
        client: :class:`ResourceClient` bound to the controller host.
    """

    def __init__(self, client: ResourceClient):
        self._client = client

    # ------------------------------------------------------------------
    # Indexes
    # ------------------------------------------------------------------

    def list_indexes(self) -> list[dict[str, Any]]:
        data = self._client.get("/indexes", operation="list indexes")
        return data.get("indexes", [])

    def create_index(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        """Create an index.

        ``name`` is always sent and ``metric`` defaults to ``"cosine"``; every
        other non-``None`` field of ``request`` (``dimension``, ``spec``,
        ``tags``, ``deletion_protection`` ...) is forwarded verbatim.
        """
        payload = _compact(request)
        payload["name"] = name
        payload.setdefault("metric", "cosine")
        logger.info("Creating index %s", name)
        return self._client.post(
            "/indexes", json=payload, operation="create index", subject=name
        )

    def create_for_model(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        """Create an index with integrated embedding.

        ``request`` must carry ``cloud``, ``region`` and ``embed``; the keys in
        :data:`CREATE_FOR_MODEL_OPTIONAL_KEYS` are sent only when present.

        Raises:
            PineconeValidationError: If a required key is missing.
        """
        missing = [key for key in ("cloud", "region", "embed") if request.get(key) is None]
        if missing:
            raise PineconeValidationError(
                f"Missing required field(s) for create_for_model: {', '.join(missing)}."
            )
        payload = {
            "name": name,
            "cloud": request["cloud"],
            "region": request["region"],
            "embed": request["embed"],
        }
        for key in CREATE_FOR_MODEL_OPTIONAL_KEYS:
            if request.get(key) is not None:
                payload[key] = request[key]
        return self._client.post(
            "/indexes/create-for-model",
            json=payload,
            operation="create index for model",
            subject=name,
        )

    def describe_index(self, name: str) -> dict[str, Any]:
        return self._client.get(
            f"/indexes/{quote_segment(name)}", operation="describe index", subject=name
        )

    def delete_index(self, name: str) -> None:
        logger.info("Deleting index %s", name)
        self._client.delete(
            f"/indexes/{quote_segment(name)}", operation="delete index", subject=name
        )

    def configure_index(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        """PATCH ``request`` onto the index as-is (no defaulting)."""
        return self._client.patch(
            f"/indexes/{quote_segment(name)}",
            json=request,
            operation="configure index",
            subject=name,
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def create_collection(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._client.post(
            "/collections", json=request, operation="create collection"
        )

    def list_collections(self) -> list[dict[str, Any]]:
        data = self._client.get("/collections", operation="list collections")
        return data.get("collections", [])

    def describe_collection(self, name: str) -> dict[str, Any]:
        return self._client.get(
            f"/collections/{quote_segment(name)}",
            operation="describe collection",
            subject=name,
        )

    def delete_collection(self, name: str) -> None:
        self._client.delete(
            f"/collections/{quote_segment(name)}",
            operation="delete collection",
            subject=name,
        )

    # ------------------------------------------------------------------
    # Backups
    # ------------------------------------------------------------------

    def create_backup(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._client.post("/backups", json=request, operation="create backup")

    def list_backups(self) -> list[dict[str, Any]]:
        data = self._client.get("/backups", operation="list backups")
        return data.get("backups", [])

    def describe_backup(self, backup_id: str) -> dict[str, Any]:
        return self._client.get(
            f"/backups/{quote_segment(backup_id)}",
            operation="describe backup",
            subject=backup_id,
        )

    def delete_backup(self, backup_id: str) -> None:
        self._client.delete(
            f"/backups/{quote_segment(backup_id)}",
            operation="delete backup",
            subject=backup_id,
        )

    def create_index_from_backup(
        self, backup_id: str, request: dict[str, Any]
    ) -> dict[str, Any]:
        """Start a restore job that creates a new index from a backup."""
        return self._client.post(
            f"/backups/{quote_segment(backup_id)}/create-index",
            json=_compact(request),
            operation="create index from backup",
            subject=backup_id,
        )

    # ------------------------------------------------------------------
    # Restore jobs
    # ------------------------------------------------------------------

    def list_restore_jobs(
        self, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """List restore jobs; ``params`` (e.g. ``limit``) become the query string."""
        data = self._client.get(
            "/restore",
            params=_compact(params) if params else None,
            operation="list restore jobs",
        )
        return data.get("jobs", [])

    def describe_restore_job(self, job_id: str) -> dict[str, Any]:
        return self._client.get(
            f"/restore/{quote_segment(job_id)}",
            operation="describe restore job",
            subject=job_id,
        )

    # ------------------------------------------------------------------
    # Assistants
    # ------------------------------------------------------------------

    def create_assistant(self, request: dict[str, Any]) -> dict[str, Any]:
        return self._client.post(
            "/assistants", json=request, operation="create assistant"
        )

    def list_assistants(self) -> list[dict[str, Any]]:
        data = self._client.get("/assistants", operation="list assistants")
        return data.get("assistants", [])

    def describe_assistant(self, name: str) -> dict[str, Any]:
        return self._client.get(
            f"/assistants/{quote_segment(name)}",
            operation="describe assistant",
            subject=name,
        )

    def update_assistant(self, name: str, request: dict[str, Any]) -> dict[str, Any]:
        return self._client.patch(
            f"/assistants/{quote_segment(name)}",
            json=request,
            operation="update assistant",
            subject=name,
        )

    def delete_assistant(self, name: str) -> None:
        self._client.delete(
            f"/assistants/{quote_segment(name)}",
            operation="delete assistant",
            subject=name,
        )
