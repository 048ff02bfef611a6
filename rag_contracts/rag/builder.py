"""Fluent builder for RAG chat-completion requests."""

from typing import Self

from pydantic import ValidationError as PydanticValidationError

from rag_contracts.base import field_errors
from rag_contracts.chat.models import (
    ChatCompletionRequestMessage,
    ChatCompletionRequestSampling,
    Temperature,
    TopP,
)
from rag_contracts.config import get_settings
from rag_contracts.exceptions import ValidationError
from rag_contracts.logging_config import get_logger
from rag_contracts.rag.models import RagChatCompletionsRequest

logger = get_logger(__name__)

# Neutral value of whichever sampling parameter is not selected
NEUTRAL_SAMPLING = 1.0
MIN_N_CHOICE = 1
# Floor for an explicit max_tokens override; lower than the initial default.
MAX_TOKENS_FLOOR = 16


class RagChatCompletionRequestBuilder:
    """Builds a ``RagChatCompletionsRequest`` from placeholder defaults.

    Each ``with_*`` setter replaces the request under construction and
    returns the builder, so calls chain. Setters clamp the choice count and
    token cap. Every value is validated and copied into the new request;
    a negative or fractional counter raises ``ValidationError``. ``build()`` performs no further validation.

    Example:
        request = (
            RagChatCompletionRequestBuilder(messages, url, "docs", 5)
            .with_sampling(Temperature(0.2))
            .with_max_tokens(512)
            .build()
        )
    """

    def __init__(
        self,
        messages: list[ChatCompletionRequestMessage],
        vector_store_url: str,
        collection_name: str,
        limit: int,
    ) -> None:
        """Initialize the builder.

        Args:
            messages: Conversation so far.
            vector_store_url: Vector-store URL.
            collection_name: Vector-store collection.
            limit: Maximum retrieved points.
        """
        settings = get_settings()
        defaults = settings.defaults

        self._request = RagChatCompletionsRequest(
            chat_model=settings.placeholders.chat_model,
            messages=messages,
            embedding_model=settings.placeholders.embedding_model,
            encoding_format=defaults.encoding_format,
            vector_store_url=vector_store_url,
            collection_name=collection_name,
            limit=limit,
            temperature=defaults.temperature,
            top_p=defaults.top_p,
            n_choice=defaults.n_choice,
            stream=defaults.stream,
            max_tokens=defaults.max_tokens,
            presence_penalty=defaults.presence_penalty,
            frequency_penalty=defaults.frequency_penalty,
            context_window=defaults.context_window,
        )

    def _set(self, **values: object) -> Self:
        # Revalidation copies lists and dicts, so later changes by the
        # caller do not reach the request.
        try:
            self._request = RagChatCompletionsRequest.model_validate(
                {**dict(self._request), **values}
            )
        except PydanticValidationError as e:
            errors = field_errors(e)
            raise ValidationError(
                f"Invalid builder value: {', '.join(err['field'] for err in errors)}",
                details={"errors": errors},
            ) from e
        return self

    def with_sampling(self, sampling: ChatCompletionRequestSampling) -> Self:
        """Select temperature or top-p sampling.

        The other parameter is reset to its neutral value, 1.0.

        Raises:
            TypeError: If ``sampling`` is neither ``Temperature`` nor ``TopP``.
        """
        match sampling:
            case Temperature(value=temperature):
                top_p = NEUTRAL_SAMPLING
            case TopP(value=top_p):
                temperature = NEUTRAL_SAMPLING
            case _:
                raise TypeError(
                    f"sampling must be Temperature or TopP, got {type(sampling).__name__}"
                )
        return self._set(temperature=temperature, top_p=top_p)

    def with_n_choices(self, n: int) -> Self:
        """Set the number of choices; values below 1 become 1."""
        return self._set(n_choice=max(n, MIN_N_CHOICE))

    def with_stream(self, flag: bool) -> Self:
        return self._set(stream=flag)

    def with_stop(self, stop: list[str]) -> Self:
        return self._set(stop=stop)

    def with_max_tokens(self, max_tokens: int) -> Self:
        """Set the completion token cap; values below 1 become 16."""
        if max_tokens < 1:
            max_tokens = MAX_TOKENS_FLOOR
        return self._set(max_tokens=max_tokens)

    def with_presence_penalty(self, penalty: float) -> Self:
        return self._set(presence_penalty=penalty)

    def with_frequency_penalty(self, penalty: float) -> Self:
        return self._set(frequency_penalty=penalty)

    def with_logits_bias(self, bias: dict[str, float]) -> Self:
        return self._set(logit_bias=bias)

    def with_user(self, user: str) -> Self:
        return self._set(user=user)

    def with_context_window(self, context_window: int) -> Self:
        return self._set(context_window=context_window)

    def build(self) -> RagChatCompletionsRequest:
        """Return the finished request."""
        logger.debug(
            "Built RAG chat request",
            extra={
                "message_count": len(self._request.messages),
                "limit": self._request.limit,
            },
        )
        return self._request
