"""
pinecone-rest - a synchronous REST client for the Pinecone vector database

Covers the control plane (indexes, collections, backups, restore jobs and
assistants), per-index data planes, hosted inference and assistant chat.
"""

__version__ = "0.1.0"
__title__ = "pinecone-rest"
__description__ = "Synchronous REST client for the Pinecone vector database"

from pinecone_rest.client import Pinecone  # noqa: E402
from pinecone_rest.errors import (  # noqa: E402
    PineconeApiError,
    PineconeAuthError,
    PineconeDecodeError,
    PineconeError,
    PineconeRateLimitError,
    PineconeTimeoutError,
    PineconeTransportError,
    PineconeValidationError,
)

__all__ = [
    "Pinecone",
    "PineconeError",
    "PineconeApiError",
    "PineconeAuthError",
    "PineconeDecodeError",
    "PineconeRateLimitError",
    "PineconeTimeoutError",
    "PineconeTransportError",
    "PineconeValidationError",
]
