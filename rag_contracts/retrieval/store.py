"""Vector-store collaborator interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rag_contracts.exceptions import ErrorCode, RetrievalError
from rag_contracts.logging_config import get_logger
from rag_contracts.retrieval.models import RagScoredPoint, RetrieveObject

if TYPE_CHECKING:
    from rag_contracts.rag.models import RagChatCompletionsRequest

logger = get_logger(__name__)


class VectorStore(ABC):
    """Abstract base class for vector-store collaborators.

    Implementations provide ``search``; ``retrieve`` shapes the result into
    a ``RetrieveObject`` for a RAG request.
    """

    @abstractmethod
    def search(
        self,
        vector_store_url: str,
        collection_name: str,
        vector: list[float],
        limit: int,
    ) -> list[RagScoredPoint]:
        """Search a collection for points similar to ``vector``.

        Args:
            vector_store_url: Vector-store URL.
            collection_name: Collection to search.
            vector: Query vector.
            limit: Maximum results to return.

        Returns:
            Scored points, best first.

        Raises:
            RetrievalError: If the search fails.
        """
        ...

    def retrieve(
        self,
        request: "RagChatCompletionsRequest",
        vector: list[float],
        score_threshold: float = 0.0,
    ) -> RetrieveObject:
        """Search the request's collection and keep points above threshold.

        Args:
            request: RAG request naming the store, collection and limit.
            vector: Embedded retrieval query.
            score_threshold: Minimum score to keep.

        Returns:
            RetrieveObject with at most ``request.limit`` points.

        Raises:
            RetrievalError: If the search fails.
        """
        try:
            points = self.search(
                request.vector_store_url,
                request.collection_name,
                vector,
                request.limit,
            )
        except RetrievalError:
            raise
        except Exception as e:
            logger.error(f"Vector-store search failed: {e}")
            raise RetrievalError(
                f"Failed to search collection {request.collection_name}: {e}",
                code=ErrorCode.RETRIEVAL_ERROR,
                details={
                    "url": request.vector_store_url,
                    "collection": request.collection_name,
                    "error": str(e),
                },
            ) from e

        accepted = [p for p in points if p.score >= score_threshold][: request.limit]

        logger.debug(
            f"Retrieved {len(accepted)} points",
            extra={
                "collection": request.collection_name,
                "returned": len(points),
                "accepted": len(accepted),
            },
        )

        return RetrieveObject(
            points=accepted,
            limit=request.limit,
            score_threshold=score_threshold,
        )
