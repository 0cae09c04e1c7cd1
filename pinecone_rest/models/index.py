"""Typed views over describe-index responses.

The control plane returns plain JSON maps; these models give callers (and
the CLI) attribute access without changing what the facades return.
Unknown keys are ignored, and both snake_case and camelCase keys are
accepted::

    index = IndexDescription.from_api(pc.describe_index("movies"))
    if index.status.ready:
        ...
"""

from typing import Any, Optional

from pydantic import Field

from .base import ApiModel


class ServerlessSpec(ApiModel):
    cloud: str
    region: str


class PodSpec(ApiModel):
    environment: str
    pod_type: Optional[str] = None
    pods: Optional[int] = None
    replicas: Optional[int] = None
    shards: Optional[int] = None
    metadata_config: Optional[dict[str, Any]] = None


class ByocSpec(ApiModel):
    environment: str
    index_schema: Optional[dict[str, Any]] = Field(default=None, alias="schema")


class IndexSpec(ApiModel):
    """Deployment spec; exactly one of the three is normally set."""

    serverless: Optional[ServerlessSpec] = None
    pod: Optional[PodSpec] = None
    byoc: Optional[ByocSpec] = None


class IndexStatus(ApiModel):
    ready: bool
    state: str


class IndexEmbed(ApiModel):
    """Integrated-embedding configuration of an index created for a model."""

    model: str
    vector_type: str = "dense"
    metric: Optional[str] = None
    dimension: Optional[int] = None
    field_map: Optional[dict[str, Any]] = None
    read_parameters: Optional[dict[str, Any]] = None
    write_parameters: Optional[dict[str, Any]] = None


class IndexDescription(ApiModel):
    """One index as returned by ``describe_index`` / ``list_indexes``.

    Attributes:
        name:                Index name.
        status:              Readiness and lifecycle state.
        host:                Dedicated data-plane host (no scheme).
        spec:                Serverless / pod / BYOC deployment spec.
        metric:              Similarity metric.
        vector_type:         ``"dense"`` or ``"sparse"``.
        deletion_protection: ``"enabled"`` or ``"disabled"``.
        dimension:           Vector dimension (absent for sparse indexes).
        tags:                User tags.
        embed:               Integrated-embedding configuration, if any.
    """

    name: str
    status: IndexStatus
    host: str
    spec: IndexSpec
    metric: str = "cosine"
    vector_type: str = "dense"
    deletion_protection: str = "disabled"
    dimension: Optional[int] = None
    tags: Optional[dict[str, str]] = None
    embed: Optional[IndexEmbed] = None
