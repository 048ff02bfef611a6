"""Embedding collaborator interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rag_contracts.embeddings.models import EmbeddingRequest
from rag_contracts.exceptions import EmbeddingError, ErrorCode
from rag_contracts.logging_config import get_logger
from rag_contracts.retrieval.query import build_retrieval_query

if TYPE_CHECKING:
    from rag_contracts.rag.models import RagChatCompletionsRequest

logger = get_logger(__name__)


class EmbeddingService(ABC):
    """Abstract base class for embedding collaborators.

    Implementations provide ``embed``; the concrete helpers derive the
    retrieval query of a RAG request and embed it.
    """

    @abstractmethod
    def embed(self, request: EmbeddingRequest) -> list[list[float]]:
        """Embed every input of ``request``.

        Args:
            request: Embedding request.

        Returns:
            One vector per input, in input order.

        Raises:
            EmbeddingError: If embedding fails.
        """
        ...

    def embedding_request_for(
        self,
        request: "RagChatCompletionsRequest",
    ) -> EmbeddingRequest:
        """Build the embedding request for a RAG request's retrieval query.

        Raises:
            ValidationError: If the request has no user message text.
        """
        query = build_retrieval_query(
            request.messages,
            request.effective_context_window,
        )
        return EmbeddingRequest(
            model=request.embedding_model,
            input=[query],
            encoding_format=request.encoding_format,
            user=request.user,
        )

    def embed_query(self, request: "RagChatCompletionsRequest") -> list[float]:
        """Embed the retrieval query of a RAG request.

        Args:
            request: RAG request.

        Returns:
            Query vector.

        Raises:
            EmbeddingError: If embedding fails or does not yield one vector.
        """
        embedding_request = self.embedding_request_for(request)

        try:
            vectors = self.embed(embedding_request)
        except EmbeddingError:
            raise
        except Exception as e:
            logger.error(f"Embedding failed: {e}")
            raise EmbeddingError(
                f"Failed to embed retrieval query: {e}",
                code=ErrorCode.EMBEDDING_SERVICE_ERROR,
                details={"model": request.embedding_model, "error": str(e)},
            ) from e

        if len(vectors) != 1:
            raise EmbeddingError(
                f"Expected 1 embedding for the query, got {len(vectors)}",
                code=ErrorCode.EMBEDDING_COUNT_MISMATCH,
                details={"model": request.embedding_model, "count": len(vectors)},
            )

        return vectors[0]
