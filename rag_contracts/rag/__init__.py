"""RAG request module."""

from rag_contracts.rag.builder import RagChatCompletionRequestBuilder
from rag_contracts.rag.models import RagChatCompletionsRequest, RagEmbeddingRequest

__all__ = [
    "RagChatCompletionRequestBuilder",
    "RagChatCompletionsRequest",
    "RagEmbeddingRequest",
]
