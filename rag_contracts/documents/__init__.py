"""Document chunking module."""

from rag_contracts.documents.chunker import Chunker
from rag_contracts.documents.models import ChunksRequest, ChunksResponse

__all__ = [
    "Chunker",
    "ChunksRequest",
    "ChunksResponse",
]
