"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from rag_contracts.chat.models import (
    AssistantMessage,
    ChatCompletionRequestMessage,
    SystemMessage,
    UserMessage,
)
from rag_contracts.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings for every test so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def messages() -> list[ChatCompletionRequestMessage]:
    """A short conversation ending in a user question.

    Returns:
        System prompt, two user turns and one assistant turn.
    """
    return [
        SystemMessage(content="You are a helpful assistant."),
        UserMessage(content="What is a vector store?"),
        AssistantMessage(content="A database of embeddings."),
        UserMessage(content="How does Qdrant index them?"),
    ]
