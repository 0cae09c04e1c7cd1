"""Data-plane facades: vector operations, index-level operations and
namespace views."""

from pinecone_rest.data.data_plane import DataPlane
from pinecone_rest.data.index import Index
from pinecone_rest.data.namespace import IndexNamespace

__all__ = ["DataPlane", "Index", "IndexNamespace"]
