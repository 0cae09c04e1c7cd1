"""Request bodies for the data-plane vector endpoints.

Each model maps one endpoint.  Optional fields are ``None`` when absent, and
empty sequences/maps are normalized to ``None`` before validation, so a field
either appears in the payload with a value or does not appear at all::

    >>> QueryRequest(vector=[0.1, 0.2], top_k=5).to_payload()
    {'vector': [0.1, 0.2], 'topK': 5, 'includeValues': False, 'includeMetadata': True}

The server expects exactly one of ``vector`` / ``id`` on a query, and does
its own checking of ``ids`` / ``filter`` on delete; neither rule is enforced
here.
"""

from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from .base import RequestModel, empty_as_none
from .vectors import SparseValues, VectorRecord


class UpsertRequest(RequestModel):
    vectors: list[VectorRecord]
    namespace: Optional[str] = None


class QueryRequest(RequestModel):
    vector: Optional[list[float]] = None
    id: Optional[str] = None
    top_k: int = Field(default=10, gt=0)
    filter: Optional[dict[str, Any]] = None
    namespace: Optional[str] = None
    include_values: bool = False
    include_metadata: bool = True
    sparse_vector: Optional[SparseValues] = None

    @field_validator("vector", "filter", mode="before")
    @classmethod
    def drop_empty(cls, value: Any) -> Any:
        return empty_as_none(value)


class DeleteRequest(RequestModel):
    """Body of ``/vectors/delete``.

    ``delete_all`` takes absolute precedence: when it is true, ``ids`` and
    ``filter`` are discarded whatever the caller passed.  ``deleteAll`` is
    only serialized when true.
    """

    ids: Optional[list[str]] = None
    filter: Optional[dict[str, Any]] = None
    namespace: Optional[str] = None
    delete_all: bool = False

    @field_validator("ids", "filter", mode="before")
    @classmethod
    def drop_empty(cls, value: Any) -> Any:
        return empty_as_none(value)

    @model_validator(mode="after")
    def delete_all_takes_precedence(self) -> "DeleteRequest":
        if self.delete_all:
            self.ids = None
            self.filter = None
        return self

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if not self.delete_all:
            payload.pop("deleteAll", None)
        return payload


class UpdateRequest(RequestModel):
    id: str
    values: Optional[list[float]] = None
    set_metadata: Optional[dict[str, Any]] = None
    namespace: Optional[str] = None
    sparse_values: Optional[SparseValues] = None

    @field_validator("values", "set_metadata", mode="before")
    @classmethod
    def drop_empty(cls, value: Any) -> Any:
        return empty_as_none(value)
