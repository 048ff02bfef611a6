"""RAG request data models.

A RAG chat request is a plain chat-completion request plus the parameters
needed to embed the query and search a vector-store collection.
"""

from typing import ClassVar, Self

from pydantic import Field, StrictBool

from rag_contracts.base import Count, WireModel
from rag_contracts.chat.models import (
    ChatCompletionRequest,
    ChatCompletionRequestMessage,
    ChatResponseFormat,
    StreamOptions,
    Tool,
    ToolChoice,
)
from rag_contracts.config import get_settings
from rag_contracts.embeddings.models import EmbeddingRequest
from rag_contracts.logging_config import get_logger

logger = get_logger(__name__)

# Fields shared verbatim with ChatCompletionRequest; ``chat_model`` maps to ``model``.
CHAT_FIELDS = (
    "messages",
    "temperature",
    "top_p",
    "n_choice",
    "stream",
    "stream_options",
    "stop",
    "max_tokens",
    "presence_penalty",
    "frequency_penalty",
    "logit_bias",
    "user",
    "response_format",
    "tool_choice",
    "tools",
    "context_window",
)


class RagEmbeddingRequest(WireModel):
    """Embedding request bound to a vector-store collection.

    Attributes:
        embedding_request: The request passed to the embedding collaborator.
        vector_store_url: Vector-store endpoint.
        collection_name: Target collection.
    """

    embedding_request: EmbeddingRequest = Field(
        alias="embeddings",
        description="Embedding request",
    )
    vector_store_url: str = Field(alias="url", description="Vector-store URL")
    collection_name: str = Field(description="Vector-store collection")

    @classmethod
    def new(
        cls,
        inputs: list[str],
        vector_store_url: str,
        collection_name: str,
    ) -> Self:
        """Wrap input texts with the placeholder embedding model.

        Args:
            inputs: Texts to embed, forwarded verbatim (may be empty).
            vector_store_url: Vector-store endpoint.
            collection_name: Target collection.

        Returns:
            New RagEmbeddingRequest with no encoding format or user.
        """
        embedding_request = EmbeddingRequest(
            model=get_settings().placeholders.embedding_model,
            input=list(inputs),
        )
        return cls.from_embedding_request(
            embedding_request,
            vector_store_url,
            collection_name,
        )

    @classmethod
    def from_embedding_request(
        cls,
        embedding_request: EmbeddingRequest,
        vector_store_url: str,
        collection_name: str,
    ) -> Self:
        """Attach a vector-store target to an existing embedding request."""
        return cls(
            embedding_request=embedding_request,
            vector_store_url=vector_store_url,
            collection_name=collection_name,
        )


class RagChatCompletionsRequest(WireModel):
    """Chat-completion request augmented with retrieval parameters.

    Chat and sampling fields carry the same meaning as on
    ``ChatCompletionRequest``. ``tools`` and ``tool_choice`` are always
    present on the wire, as ``null`` when unset.

    Attributes:
        chat_model: Chat model id.
        messages: Conversation so far. Expected to be non-empty.
        embedding_model: Embedding model id.
        encoding_format: Embedding encoding, ``float`` or ``base64``.
        vector_store_url: Vector-store URL (wire key ``qdrant_url``).
        collection_name: Collection (wire key ``qdrant_collection_name``).
        limit: Maximum retrieved points.
        context_window: Trailing user messages used for the retrieval query.
    """

    nullable_keys: ClassVar[frozenset[str]] = frozenset({"tools", "tool_choice"})

    chat_model: str | None = Field(default=None, description="Chat model id")
    messages: list[ChatCompletionRequestMessage] = Field(
        description="Conversation so far",
    )
    embedding_model: str = Field(description="Embedding model id")
    encoding_format: str | None = Field(
        default=None,
        description="Embedding encoding format",
    )
    vector_store_url: str = Field(alias="qdrant_url", description="Vector-store URL")
    collection_name: str = Field(
        alias="qdrant_collection_name",
        description="Vector-store collection",
    )
    limit: Count = Field(description="Maximum retrieved points")
    temperature: float | None = Field(default=None, description="Temperature")
    top_p: float | None = Field(default=None, description="Top-p")
    n_choice: Count | None = Field(default=None, description="Choices to generate")
    stream: StrictBool | None = Field(default=None, description="Stream results")
    stream_options: StreamOptions | None = Field(
        default=None,
        description="Streaming options",
    )
    stop: list[str] | None = Field(default=None, description="Stop sequences")
    max_tokens: Count | None = Field(default=None, description="Token cap")
    presence_penalty: float | None = Field(default=None, description="Presence penalty")
    frequency_penalty: float | None = Field(
        default=None,
        description="Frequency penalty",
    )
    logit_bias: dict[str, float] | None = Field(default=None, description="Logit bias")
    user: str | None = Field(default=None, description="End-user identifier")
    response_format: ChatResponseFormat | None = Field(
        default=None,
        description="Output format",
    )
    tools: list[Tool] | None = Field(default=None, description="Available tools")
    tool_choice: ToolChoice | None = Field(default=None, description="Tool choice")
    context_window: Count | None = Field(
        default=None,
        description="Trailing user messages used for retrieval",
    )

    @property
    def effective_context_window(self) -> int:
        """Context window, defaulting to 1 when unset."""
        return 1 if self.context_window is None else self.context_window

    def to_plain_chat_request(self) -> ChatCompletionRequest:
        """Project onto a plain chat-completion request.

        Retrieval fields are dropped. Legacy ``functions`` and
        ``function_call`` stay unset; RAG requests only use tools.
        """
        chat_request = ChatCompletionRequest(
            model=self.chat_model,
            functions=None,
            function_call=None,
            **{name: getattr(self, name) for name in CHAT_FIELDS},
        )

        logger.debug(
            "Converted RAG request to chat request",
            extra={"message_count": len(self.messages)},
        )

        return chat_request

    @classmethod
    def from_plain_chat_request(
        cls,
        chat_request: ChatCompletionRequest,
        vector_store_url: str,
        collection_name: str,
        limit: int,
    ) -> Self:
        """Build a RAG request from a plain chat-completion request.

        The embedding model is the placeholder id and ``encoding_format`` is
        left unset. Legacy function-call data on ``chat_request`` is dropped.

        Args:
            chat_request: Source chat request.
            vector_store_url: Vector-store URL.
            collection_name: Vector-store collection.
            limit: Maximum retrieved points.

        Returns:
            New RagChatCompletionsRequest.
        """
        return cls(
            chat_model=chat_request.model,
            embedding_model=get_settings().placeholders.embedding_model,
            encoding_format=None,
            vector_store_url=vector_store_url,
            collection_name=collection_name,
            limit=limit,
            **{name: getattr(chat_request, name) for name in CHAT_FIELDS},
        )
