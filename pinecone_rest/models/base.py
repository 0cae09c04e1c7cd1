"""Shared pydantic base classes for wire models.

The service speaks camelCase on the data plane (``topK``, ``sparseValues``)
and snake_case on the control plane (``deletion_protection``).  Models
derived from :class:`ApiModel` accept both spellings on input and serialize
with camelCase aliases.
"""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from pinecone_rest.errors import PineconeValidationError


class ApiModel(BaseModel):
    """Base for every model that crosses the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_api(cls, data: dict[str, Any]):
        """Map one decoded response object onto this model."""
        return cls.model_validate(data)

    @classmethod
    def list_from_api(cls, items: Iterable[dict[str, Any]]) -> list:
        """Map a decoded list of response objects onto this model."""
        return [cls.model_validate(item) for item in items]


class RequestModel(ApiModel):
    """Base for request bodies.

    Optional fields default to ``None`` and are left out of the payload by
    :meth:`to_payload`; a field is either present with a value or absent.
    """

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def empty_as_none(value: Any) -> Any:
    """Treat empty sequences and mappings as "not supplied"."""
    if value is not None and hasattr(value, "__len__") and len(value) == 0:
        return None
    return value


def build_payload(model: type[RequestModel], **fields: Any) -> dict[str, Any]:
    """Validate ``fields`` against ``model`` and return the JSON payload.

    Raises:
        PineconeValidationError: If the fields do not satisfy the model.
    """
    try:
        request = model(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise PineconeValidationError(
            f"Invalid request field {location!r}: {error['msg']}"
        ) from exc
    return request.to_payload()
