"""Tests for retrieval response models, query building and the store interface."""

import pytest

from rag_contracts.chat.models import (
    AssistantMessage,
    SystemMessage,
    TextContentPart,
    UserMessage,
)
from rag_contracts.exceptions import (
    DeserializationError,
    ErrorCode,
    RetrievalError,
    ValidationError,
)
from rag_contracts.rag.builder import RagChatCompletionRequestBuilder
from rag_contracts.rag.models import RagChatCompletionsRequest
from rag_contracts.retrieval.models import RagScoredPoint, RetrieveObject
from rag_contracts.retrieval.query import build_retrieval_query
from rag_contracts.retrieval.store import VectorStore


class FakeVectorStore(VectorStore):
    """Vector store returning canned points."""

    def __init__(self, points: list[RagScoredPoint]) -> None:
        self.points = points
        self.calls: list[tuple[str, str, list[float], int]] = []

    def search(
        self,
        vector_store_url: str,
        collection_name: str,
        vector: list[float],
        limit: int,
    ) -> list[RagScoredPoint]:
        self.calls.append((vector_store_url, collection_name, vector, limit))
        return self.points


class BrokenVectorStore(VectorStore):
    """Vector store raising a fixed error."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def search(
        self,
        vector_store_url: str,
        collection_name: str,
        vector: list[float],
        limit: int,
    ) -> list[RagScoredPoint]:
        raise self.error


def _rag_request(messages, limit: int = 2) -> RagChatCompletionsRequest:
    return RagChatCompletionRequestBuilder(
        messages, "http://localhost:6333", "docs", limit
    ).build()


class TestRetrieveObject:
    """Tests for RetrieveObject wire form."""

    def test_serialize_with_points(self) -> None:
        """Points are serialized in order."""
        ro = RetrieveObject(
            points=[RagScoredPoint(source="source", score=0.5)],
            limit=1,
            score_threshold=0.5,
        )
        assert ro.to_json() == (
            '{"points":[{"source":"source","score":0.5}],"limit":1,"score_threshold":0.5}'
        )

    def test_serialize_without_points(self) -> None:
        """Absent points are omitted."""
        ro = RetrieveObject(limit=1, score_threshold=0.5)
        assert ro.to_json() == '{"limit":1,"score_threshold":0.5}'

    def test_serialize_empty_points(self) -> None:
        """An explicit empty list is kept."""
        ro = RetrieveObject(points=[], limit=1, score_threshold=0.5)
        assert ro.to_dict() == {"points": [], "limit": 1, "score_threshold": 0.5}

    def test_deserialize_with_points(self) -> None:
        """Points decode into RagScoredPoint values."""
        ro = RetrieveObject.from_json(
            '{"points":[{"source":"source","score":0.5}],"limit":1,"score_threshold":0.5}'
        )

        assert ro.limit == 1
        assert ro.score_threshold == 0.5
        assert ro.points == [RagScoredPoint(source="source", score=0.5)]

    def test_deserialize_without_points(self) -> None:
        """Missing points decode as None."""
        ro = RetrieveObject.from_json('{"limit":1,"score_threshold":0.5}')

        assert ro.points is None
        assert ro.limit == 1
        assert ro.score_threshold == 0.5

    def test_round_trip(self) -> None:
        """Encoding then decoding yields an equal value."""
        ro = RetrieveObject(
            points=[
                RagScoredPoint(source="a.md", score=0.91),
                RagScoredPoint(source="b.md", score=0.42),
            ],
            limit=5,
            score_threshold=0.4,
        )
        assert RetrieveObject.from_json(ro.to_json()) == ro

    def test_negative_limit_rejected(self) -> None:
        """limit is unsigned."""
        with pytest.raises(DeserializationError) as exc_info:
            RetrieveObject.from_json('{"limit":-1,"score_threshold":0.5}')
        assert exc_info.value.fields == ["limit"]

    def test_point_missing_score(self) -> None:
        """Nested errors carry the full field path."""
        with pytest.raises(DeserializationError) as exc_info:
            RetrieveObject.from_json(
                '{"points":[{"source":"a.md"}],"limit":1,"score_threshold":0.5}'
            )
        assert exc_info.value.fields == ["points.0.score"]


class TestBuildRetrievalQuery:
    """Tests for build_retrieval_query."""

    def test_last_user_message(self, messages) -> None:
        """The default window uses the last user message."""
        assert build_retrieval_query(messages) == "How does Qdrant index them?"

    def test_wider_window(self, messages) -> None:
        """User messages are joined in conversation order."""
        assert build_retrieval_query(messages, 2) == (
            "What is a vector store?\nHow does Qdrant index them?"
        )

    def test_window_larger_than_history(self, messages) -> None:
        """A window past the start uses every user message."""
        assert build_retrieval_query(messages, 10) == build_retrieval_query(messages, 2)

    def test_zero_window_counts_as_one(self, messages) -> None:
        """Windows below 1 use the last user message."""
        assert build_retrieval_query(messages, 0) == "How does Qdrant index them?"

    def test_skips_non_user_and_empty_messages(self) -> None:
        """Only user messages with text contribute."""
        query = build_retrieval_query(
            [
                UserMessage(content=[TextContentPart(text="Compare"), TextContentPart(text="HNSW")]),
                AssistantMessage(content="Sure."),
                UserMessage(content="   "),
            ],
            context_window=2,
        )
        assert query == "Compare HNSW"

    def test_no_user_message(self) -> None:
        """A conversation without user text is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            build_retrieval_query([SystemMessage(content="Be brief.")])
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR


class TestVectorStore:
    """Tests for VectorStore.retrieve."""

    def test_passes_request_target(self, messages) -> None:
        """search() receives the request's store, collection and limit."""
        store = FakeVectorStore([])
        store.retrieve(_rag_request(messages, limit=3), [0.1, 0.2])

        assert store.calls == [("http://localhost:6333", "docs", [0.1, 0.2], 3)]

    def test_filters_by_threshold(self, messages) -> None:
        """Points below the threshold are dropped."""
        store = FakeVectorStore(
            [
                RagScoredPoint(source="high.md", score=0.9),
                RagScoredPoint(source="edge.md", score=0.5),
                RagScoredPoint(source="low.md", score=0.3),
            ]
        )
        ro = store.retrieve(_rag_request(messages, limit=5), [0.1], score_threshold=0.5)

        assert [p.source for p in ro.points] == ["high.md", "edge.md"]
        assert ro.limit == 5
        assert ro.score_threshold == 0.5

    def test_truncates_to_limit(self, messages) -> None:
        """No more than limit points are returned."""
        store = FakeVectorStore(
            [RagScoredPoint(source=f"{i}.md", score=1.0 - i / 10) for i in range(4)]
        )
        ro = store.retrieve(_rag_request(messages, limit=2), [0.1])

        assert [p.source for p in ro.points] == ["0.md", "1.md"]

    def test_no_matches_yields_empty_points(self, messages) -> None:
        """A search with no matches reports an empty list."""
        ro = FakeVectorStore([]).retrieve(_rag_request(messages), [0.1])
        assert ro.points == []

    def test_wraps_failures(self, messages) -> None:
        """Collaborator failures surface as RetrievalError."""
        store = BrokenVectorStore(TimeoutError("search timed out"))

        with pytest.raises(RetrievalError) as exc_info:
            store.retrieve(_rag_request(messages), [0.1])

        assert exc_info.value.details["collection"] == "docs"
        assert "search timed out" in exc_info.value.message

    def test_retrieval_error_passes_through(self, messages) -> None:
        """RetrievalError from the collaborator is not re-wrapped."""
        original = RetrievalError("collection missing")
        store = BrokenVectorStore(original)

        with pytest.raises(RetrievalError) as exc_info:
            store.retrieve(_rag_request(messages), [0.1])

        assert exc_info.value is original
