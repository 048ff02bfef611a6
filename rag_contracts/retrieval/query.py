"""Retrieval query construction."""

from collections.abc import Sequence

from rag_contracts.chat.models import ChatCompletionRequestMessage, UserMessage
from rag_contracts.exceptions import ValidationError


def build_retrieval_query(
    messages: Sequence[ChatCompletionRequestMessage],
    context_window: int = 1,
) -> str:
    """Build the text embedded for retrieval.

    Takes the last ``context_window`` user messages that carry text, in
    conversation order, joined by newlines. A window below 1 counts as 1.

    Args:
        messages: Conversation so far.
        context_window: Number of trailing user messages to use.

    Returns:
        Query text.

    Raises:
        ValidationError: If no user message carries text.
    """
    texts = [m.text_content() for m in messages if isinstance(m, UserMessage)]
    user_texts = [t for t in texts if t.strip()]
    if not user_texts:
        raise ValidationError(
            "No user message to build a retrieval query from",
            details={"message_count": len(messages)},
        )

    window = max(context_window, 1)
    return "\n".join(user_texts[-window:])
