"""Retrieval response data models."""

from pydantic import Field

from rag_contracts.base import Count, WireModel


class RagScoredPoint(WireModel):
    """A retrieved chunk source with its similarity score.

    Attributes:
        source: Origin of the retrieved chunk.
        score: Similarity to the query vector (higher is more similar).
    """

    source: str = Field(description="Source of the context")
    score: float = Field(description="Similarity score")


class RetrieveObject(WireModel):
    """Result of a vector-store search.

    ``points`` is omitted from the wire form when unset. A search that ran
    and matched nothing may send an empty list instead.

    Attributes:
        points: Retrieved points, best first.
        limit: Requested maximum number of points.
        score_threshold: Minimum accepted score.
    """

    points: list[RagScoredPoint] | None = Field(
        default=None,
        description="Retrieved sources",
    )
    limit: Count = Field(description="Number of similar points to retrieve")
    score_threshold: float = Field(description="Score threshold")
