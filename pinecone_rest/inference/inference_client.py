"""Hosted embedding and reranking models, served from the controller host."""

import logging
from typing import Any, Optional, Sequence, Union

from pinecone_rest.errors import PineconeValidationError
from pinecone_rest.http.resource_client import ResourceClient

logger = logging.getLogger(__name__)

EmbedInput = Union[str, dict[str, Any]]


class InferenceClient:
    """Wrapper for ``/embed``, ``/rerank`` and ``/models``."""

    def __init__(self, client: ResourceClient):
        self._client = client

    def embed(
        self,
        model: str,
        inputs: Sequence[EmbedInput],
        parameters: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Embed ``inputs`` with ``model``.

        Plain strings are sent as ``{"text": ...}``; dicts are sent unchanged.

        Raises:
            PineconeValidationError: ``model`` or ``inputs`` is empty.
        """
        if not model:
            raise PineconeValidationError("Model name is required for embedding.")
        if not inputs:
            raise PineconeValidationError("At least one input is required for embedding.")

        payload: dict[str, Any] = {
            "model": model,
            "inputs": [
                {"text": item} if isinstance(item, str) else item for item in inputs
            ],
        }
        if parameters:
            payload["parameters"] = parameters

        logger.debug("Embedding %d input(s) with %s", len(inputs), model)
        return self._client.post("/embed", json=payload, operation="generate embeddings")

    def rerank(
        self,
        model: str,
        query: str,
        documents: Sequence[Any],
        top_n: int = 0,
        return_documents: bool = True,
        rank_fields: Optional[Sequence[str]] = None,
        parameters: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Order ``documents`` by relevance to ``query``.

        ``top_n`` of 0 returns every document.
        """
        if not model:
            raise PineconeValidationError("Model name is required for reranking.")
        if not query:
            raise PineconeValidationError("Query is required for reranking.")
        if not documents:
            raise PineconeValidationError(
                "At least one document is required for reranking."
            )

        payload: dict[str, Any] = {
            "model": model,
            "query": query,
            "documents": list(documents),
            "return_documents": return_documents,
        }
        if top_n > 0:
            payload["top_n"] = top_n
        if rank_fields:
            payload["rank_fields"] = list(rank_fields)
        if parameters:
            payload["parameters"] = parameters

        return self._client.post("/rerank", json=payload, operation="rerank documents")

    def list_models(self) -> dict[str, Any]:
        return self._client.get("/models", operation="list models")
