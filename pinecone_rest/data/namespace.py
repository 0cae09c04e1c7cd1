"""A data-plane view with the namespace fixed at construction."""

from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from pinecone_rest.data.data_plane import DataPlane, SparseLike, VectorLike


class IndexNamespace:
    """Same operations as :class:`~pinecone_rest.data.data_plane.DataPlane`,
    minus the ``namespace`` argument, which is always :attr:`namespace`.
    """

    def __init__(self, data_plane: "DataPlane", namespace: str):
        self._data_plane = data_plane
        self.namespace = namespace

    def upsert(self, vectors: Sequence["VectorLike"]) -> dict[str, Any]:
        return self._data_plane.upsert(vectors, self.namespace)

    def query(
        self,
        vector: Optional[Sequence[float]] = None,
        id: Optional[str] = None,
        top_k: int = 10,
        filter: Optional[dict[str, Any]] = None,
        include_values: bool = False,
        include_metadata: bool = True,
        sparse_vector: Optional["SparseLike"] = None,
    ) -> dict[str, Any]:
        return self._data_plane.query(
            vector=vector,
            id=id,
            top_k=top_k,
            filter=filter,
            namespace=self.namespace,
            include_values=include_values,
            include_metadata=include_metadata,
            sparse_vector=sparse_vector,
        )

    def fetch(self, ids: Sequence[str]) -> dict[str, dict[str, Any]]:
        return self._data_plane.fetch(ids, self.namespace)

    def delete(
        self,
        ids: Optional[Sequence[str]] = None,
        filter: Optional[dict[str, Any]] = None,
        delete_all: bool = False,
    ) -> dict[str, Any]:
        return self._data_plane.delete(ids, filter, self.namespace, delete_all)

    def update(
        self,
        id: str,
        values: Optional[Sequence[float]] = None,
        set_metadata: Optional[dict[str, Any]] = None,
        sparse_values: Optional["SparseLike"] = None,
    ) -> dict[str, Any]:
        return self._data_plane.update(
            id, values, set_metadata, self.namespace, sparse_values
        )

    def list_vector_ids(
        self,
        prefix: Optional[str] = None,
        limit: Optional[int] = None,
        pagination_token: Optional[str] = None,
    ) -> dict[str, Any]:
        return self._data_plane.list_vector_ids(
            prefix, limit, pagination_token, self.namespace
        )
