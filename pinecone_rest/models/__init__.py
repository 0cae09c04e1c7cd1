"""Pydantic wire models: request bodies, vectors and index descriptions."""

from .base import ApiModel, RequestModel, build_payload
from .index import (
    ByocSpec,
    IndexDescription,
    IndexEmbed,
    IndexSpec,
    IndexStatus,
    PodSpec,
    ServerlessSpec,
)
from .requests import DeleteRequest, QueryRequest, UpdateRequest, UpsertRequest
from .vectors import QueryMatch, SparseValues, VectorRecord

__all__ = [
    "ApiModel",
    "RequestModel",
    "build_payload",
    "ByocSpec",
    "IndexDescription",
    "IndexEmbed",
    "IndexSpec",
    "IndexStatus",
    "PodSpec",
    "ServerlessSpec",
    "DeleteRequest",
    "QueryRequest",
    "UpdateRequest",
    "UpsertRequest",
    "QueryMatch",
    "SparseValues",
    "VectorRecord",
]
