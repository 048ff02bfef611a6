"""Embedding request module."""

from rag_contracts.embeddings.models import EmbeddingRequest, InputText
from rag_contracts.embeddings.service import EmbeddingService

__all__ = [
    "EmbeddingRequest",
    "EmbeddingService",
    "InputText",
]
