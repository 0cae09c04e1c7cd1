"""Vector-level wire models: records, sparse pairs and query matches."""

from typing import Any, Optional

from pydantic import ConfigDict, model_validator

from .base import ApiModel


class SparseValues(ApiModel):
    """A sparse embedding: parallel ``indices`` and ``values`` arrays."""

    indices: list[int]
    values: list[float]

    @model_validator(mode="after")
    def check_lengths(self) -> "SparseValues":
        if len(self.indices) != len(self.values):
            raise ValueError("Sparse indices and values must have the same length.")
        return self


class VectorRecord(ApiModel):
    """One vector as sent to ``/vectors/upsert``.

    Attributes:
        id:            Unique within a namespace.
        values:        Dense values; may be omitted for sparse-only records.
        metadata:      Flat map of scalar metadata.
        sparse_values: Optional sparse embedding (``sparseValues`` on the wire).

    Unknown keys are kept and forwarded as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    values: Optional[list[float]] = None
    metadata: Optional[dict[str, Any]] = None
    sparse_values: Optional[SparseValues] = None


class QueryMatch(ApiModel):
    """One entry of a query response's ``matches`` list."""

    id: str
    score: float
    values: Optional[list[float]] = None
    metadata: Optional[dict[str, Any]] = None
    sparse_values: Optional[SparseValues] = None
