"""Client for one index's dedicated data-plane host.

Obtain instances through :meth:`pinecone_rest.client.Pinecone.index`, which
discovers the host with a describe call::

    index = pc.index("movies")
    index.upsert([{"id": "m1", "values": [0.1, 0.2]}], namespace="2024")
    index.namespace("2024").query(vector=[0.1, 0.2], top_k=3)
"""

import logging
from typing import Any, Optional, Sequence

from pinecone_rest.data.data_plane import DataPlane, SparseLike, VectorLike
from pinecone_rest.data.namespace import IndexNamespace
from pinecone_rest.http.resource_client import ResourceClient, quote_segment

logger = logging.getLogger(__name__)


class Index:
    """Index-scoped operations: stats, bulk imports, namespaces and vectors.

    Vector operations are delegated to a :class:`DataPlane` sharing the same
    :class:`ResourceClient`.
    """

    def __init__(self, client: ResourceClient, name: Optional[str] = None):
        self.name = name
        self._client = client
        self._data_plane = DataPlane(client)

    @property
    def host(self) -> str:
        return self._client.base_url

    def close(self):
        self._client.close()

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def describe_index_stats(
        self, filter: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """Return vector counts, dimension and per-namespace stats."""
        payload = {"filter": filter} if filter is not None else {}
        return self._client.post(
            "/describe_index_stats", json=payload, operation="describe index stats"
        )

    # ------------------------------------------------------------------
    # Bulk imports
    # ------------------------------------------------------------------

    def start_import(self, request: dict[str, Any]) -> dict[str, Any]:
        """Start a bulk import; ``request`` carries ``uri`` and optional ``errorMode``."""
        return self._client.post(
            "/bulk/imports", json=request, operation="start import"
        )

    def list_imports(
        self, limit: Optional[int] = None, pagination_token: Optional[str] = None
    ) -> dict[str, Any]:
        params = [
            (key, value)
            for key, value in (("limit", limit), ("paginationToken", pagination_token))
            if value is not None
        ]
        return self._client.get(
            "/bulk/imports", params=params or None, operation="list imports"
        )

    def describe_import(self, import_id: str) -> dict[str, Any]:
        return self._client.get(
            f"/bulk/imports/{quote_segment(import_id)}",
            operation="describe import",
            subject=import_id,
        )

    def cancel_import(self, import_id: str) -> None:
        self._client.delete(
            f"/bulk/imports/{quote_segment(import_id)}",
            operation="cancel import",
            subject=import_id,
        )

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def list_namespaces(self) -> list[str]:
        data = self._client.post(
            "/describe_index_stats", json={}, operation="list namespaces"
        )
        return list(data.get("namespaces", {}).keys())

    def describe_namespace(self, namespace: str) -> dict[str, Any]:
        """Stats of one namespace (``{}`` when it does not exist)."""
        data = self._client.post(
            "/describe_index_stats", json={}, operation="describe namespace"
        )
        return data.get("namespaces", {}).get(namespace, {})

    def delete_namespace(self, namespace: str) -> None:
        """Delete every vector in ``namespace``."""
        logger.info("Deleting namespace %r", namespace)
        self._client.post(
            "/vectors/delete",
            json={"deleteAll": True, "namespace": namespace},
            operation="delete namespace",
        )

    def namespace(self, namespace: str) -> IndexNamespace:
        """Return a view of this index with ``namespace`` fixed."""
        return IndexNamespace(self._data_plane, namespace)

    # ------------------------------------------------------------------
    # Vector operations (see DataPlane)
    # ------------------------------------------------------------------

    def upsert(
        self, vectors: Sequence[VectorLike], namespace: Optional[str] = None
    ) -> dict[str, Any]:
        return self._data_plane.upsert(vectors, namespace)

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
        return self._data_plane.query(
            vector=vector,
            id=id,
            top_k=top_k,
            filter=filter,
            namespace=namespace,
            include_values=include_values,
            include_metadata=include_metadata,
            sparse_vector=sparse_vector,
        )

    def fetch(
        self, ids: Sequence[str], namespace: Optional[str] = None
    ) -> dict[str, dict[str, Any]]:
        return self._data_plane.fetch(ids, namespace)

    def delete(
        self,
        ids: Optional[Sequence[str]] = None,
        filter: Optional[dict[str, Any]] = None,
        namespace: Optional[str] = None,
        delete_all: bool = False,
    ) -> dict[str, Any]:
        return self._data_plane.delete(ids, filter, namespace, delete_all)

    def update(
        self,
        id: str,
        values: Optional[Sequence[float]] = None,
        set_metadata: Optional[dict[str, Any]] = None,
        namespace: Optional[str] = None,
        sparse_values: Optional[SparseLike] = None,
    ) -> dict[str, Any]:
        return self._data_plane.update(id, values, set_metadata, namespace, sparse_values)

    def list_vector_ids(
        self,
        prefix: Optional[str] = None,
        limit: Optional[int] = None,
        pagination_token: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> dict[str, Any]:
        return self._data_plane.list_vector_ids(prefix, limit, pagination_token, namespace)
