"""HTTP layer: the request executor and the response classifier."""

from pinecone_rest.http.resource_client import ResourceClient, quote_segment
from pinecone_rest.http.response import DecodedBody, classify_response

__all__ = [
    "ResourceClient",
    "quote_segment",
    "DecodedBody",
    "classify_response",
]
