"""Vector operations against one index host.

Request bodies are built from the models in :mod:`pinecone_rest.models.requests`,
so optional arguments that are ``None`` (or empty) never appear in the
payload.  Query strings are built from ordered ``(key, value)`` pairs:

- ``fetch`` repeats the ``ids`` key (``ids=a&ids=b``), the encoding the
  service expects, rather than any indexed-array form.
- ``list_vector_ids`` emits only the supplied parameters, in the order
  ``prefix``, ``limit``, ``paginationToken``, ``namespace``.
"""

import logging
from typing import Any, Optional, Sequence, Union

from pinecone_rest.errors import PineconeValidationError
from pinecone_rest.http.resource_client import ResourceClient
from pinecone_rest.models.base import build_payload
from pinecone_rest.models.requests import (
    DeleteRequest,
    QueryRequest,
    UpdateRequest,
    UpsertRequest,
)
from pinecone_rest.models.vectors import SparseValues, VectorRecord

logger = logging.getLogger(__name__)

VectorLike = Union[VectorRecord, dict[str, Any]]
SparseLike = Union[SparseValues, dict[str, Any]]


class DataPlane:
    """Vector CRUD, query and listing for one index.

    Args:
        client: :class:`ResourceClient` bound to the index host.
    """

    def __init__(self, client: ResourceClient):
        self._client = client

    def upsert(
        self, vectors: Sequence[VectorLike], namespace: Optional[str] = None
    ) -> dict[str, Any]:
        """Insert or overwrite ``vectors``.

        Returns:
            The service response, e.g. ``{"upsertedCount": 2}``.
        """
        payload = build_payload(UpsertRequest, vectors=list(vectors), namespace=namespace)
        logger.debug("Upserting %d vector(s)", len(payload["vectors"]))
        return self._client.post(
            "/vectors/upsert", json=payload, operation="upsert vectors"
        )

    def query(
        self,
        vector: Optional[Sequence[float]] = None,
        id: Optional[str] = None,
        top_k: int = 10,
        filter: Optional[dict[str, Any]] = None,
        namespace: Optional[str] = None,
        include_values: bool = False,
        include_metadata: bool = True,
        sparse_vector: Optional[SparseLike] = None,
    ) -> dict[str, Any]:
        """Similarity search by dense ``vector``, stored ``id`` and/or sparse vector.

        ``topK``, ``includeValues`` and ``includeMetadata`` are always sent;
        the rest only when given.  The service expects exactly one of
        ``vector`` and ``id``; that rule is left to the server.
        """
        payload = build_payload(
            QueryRequest,
            vector=vector,
            id=id,
            top_k=top_k,
            filter=filter,
            namespace=namespace,
            include_values=include_values,
            include_metadata=include_metadata,
            sparse_vector=sparse_vector,
        )
        return self._client.post("/query", json=payload, operation="query vectors")

    def fetch(
        self, ids: Sequence[str], namespace: Optional[str] = None
    ) -> dict[str, dict[str, Any]]:
        """Fetch vectors by ID.

        Returns:
            The ``vectors`` map of the response, keyed by ID (``{}`` if absent).

        Raises:
            PineconeValidationError: If ``ids`` is empty.  No request is made.
        """
        if not ids:
            raise PineconeValidationError("At least one vector ID is required for fetch.")

        params: list[tuple[str, str]] = [("ids", str(vector_id)) for vector_id in ids]
        if namespace is not None:
            params.append(("namespace", namespace))

        data = self._client.get(
            "/vectors/fetch", params=params, operation="fetch vectors"
        )
        return data.get("vectors", {})

    def delete(
        self,
        ids: Optional[Sequence[str]] = None,
        filter: Optional[dict[str, Any]] = None,
        namespace: Optional[str] = None,
        delete_all: bool = False,
    ) -> dict[str, Any]:
        """Delete by IDs, by metadata filter, or everything in the namespace.

        With ``delete_all=True``, ``ids`` and ``filter`` are ignored.  Otherwise
        both are sent when both are given.
        """
        payload = build_payload(
            DeleteRequest,
            ids=list(ids) if ids is not None else None,
            filter=filter,
            namespace=namespace,
            delete_all=delete_all,
        )
        return self._client.post(
            "/vectors/delete", json=payload, operation="delete vectors"
        )

    def update(
        self,
        id: str,
        values: Optional[Sequence[float]] = None,
        set_metadata: Optional[dict[str, Any]] = None,
        namespace: Optional[str] = None,
        sparse_values: Optional[SparseLike] = None,
    ) -> dict[str, Any]:
        """Update one vector's values, metadata and/or sparse values."""
        payload = build_payload(
            UpdateRequest,
            id=id,
            values=values,
            set_metadata=set_metadata,
            namespace=namespace,
            sparse_values=sparse_values,
        )
        return self._client.post(
            "/vectors/update", json=payload, operation="update vector"
        )

    def list_vector_ids(
        self,
        prefix: Optional[str] = None,
        limit: Optional[int] = None,
        pagination_token: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> dict[str, Any]:
        """List one page of vector IDs.

        Returns:
            The raw page, typically ``{"vectors": [{"id": ...}], "pagination":
            {"next": <token>}}``; pass ``pagination["next"]`` back as
            ``pagination_token`` to get the next page.
        """
        params = [
            (key, value)
            for key, value in (
                ("prefix", prefix),
                ("limit", limit),
                ("paginationToken", pagination_token),
                ("namespace", namespace),
            )
            if value is not None
        ]
        return self._client.get(
            "/vectors/list", params=params or None, operation="list vector IDs"
        )
