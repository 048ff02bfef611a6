"""Embedding request data models."""

from pydantic import Field

from rag_contracts.base import WireModel

# A single string, a batch of strings, one token-id sequence, or a batch of them.
InputText = str | list[str] | list[int] | list[list[int]]


class EmbeddingRequest(WireModel):
    """Request for the embedding collaborator.

    Attributes:
        model: Embedding model id.
        input: Text or tokens to embed.
        encoding_format: Vector encoding, ``float`` or ``base64``.
        user: End-user identifier.
    """

    model: str = Field(description="Embedding model id")
    input: InputText = Field(description="Text or tokens to embed")
    encoding_format: str | None = Field(
        default=None,
        description="Vector encoding format",
    )
    user: str | None = Field(default=None, description="End-user identifier")
