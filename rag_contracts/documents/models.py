"""Chunking request and response data models."""

from pydantic import Field

from rag_contracts.base import Count, WireModel


class ChunksRequest(WireModel):
    """Request to split an uploaded file into chunks.

    Attributes:
        id: File identifier.
        filename: File name.
        chunk_capacity: Maximum size of one chunk.
    """

    id: str = Field(description="File identifier")
    filename: str = Field(description="File name")
    chunk_capacity: Count = Field(description="Maximum size of one chunk")


class ChunksResponse(WireModel):
    """Chunks produced for a ``ChunksRequest``.

    Attributes:
        id: File identifier, echoed from the request.
        filename: File name, echoed from the request.
        chunks: Chunk texts in document order.
    """

    id: str = Field(description="File identifier")
    filename: str = Field(description="File name")
    chunks: list[str] = Field(description="Chunk texts")
