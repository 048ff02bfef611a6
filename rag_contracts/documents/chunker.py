"""Chunking collaborator interface."""

from abc import ABC, abstractmethod

from rag_contracts.documents.models import ChunksRequest, ChunksResponse
from rag_contracts.exceptions import DocumentError, ErrorCode
from rag_contracts.logging_config import get_logger

logger = get_logger(__name__)


class Chunker(ABC):
    """Abstract base class for chunking collaborators."""

    @abstractmethod
    def chunk(self, id: str, filename: str, capacity: int) -> list[str]:
        """Split a stored file into chunks.

        Args:
            id: File identifier.
            filename: File name.
            capacity: Maximum size of one chunk.

        Returns:
            Chunk texts in document order.

        Raises:
            DocumentError: If chunking fails.
        """
        ...

    def handle(self, request: ChunksRequest) -> ChunksResponse:
        """Answer a ``ChunksRequest``, echoing its id and filename.

        Raises:
            DocumentError: If chunking fails.
        """
        try:
            chunks = self.chunk(request.id, request.filename, request.chunk_capacity)
        except DocumentError:
            raise
        except Exception as e:
            logger.error(f"Chunking failed: {e}")
            raise DocumentError(
                f"Failed to chunk {request.filename}: {e}",
                code=ErrorCode.CHUNK_ERROR,
                details={"id": request.id, "filename": request.filename},
            ) from e

        logger.debug(
            f"Chunked {request.filename}",
            extra={"file_id": request.id, "chunk_count": len(chunks)},
        )

        return ChunksResponse(id=request.id, filename=request.filename, chunks=chunks)
