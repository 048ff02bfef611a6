"""Plain chat-completion request schemas."""

from rag_contracts.chat.models import (
    AssistantMessage,
    ChatCompletionRequest,
    ChatCompletionRequestMessage,
    ChatCompletionRequestSampling,
    ChatResponseFormat,
    FunctionCall,
    FunctionCallName,
    FunctionDefinition,
    ImageContentPart,
    ImageUrl,
    NamedToolChoice,
    StreamOptions,
    SystemMessage,
    Temperature,
    TextContentPart,
    Tool,
    ToolCall,
    ToolCallFunction,
    ToolChoice,
    ToolChoiceFunction,
    ToolMessage,
    TopP,
    UserMessage,
)

__all__ = [
    "AssistantMessage",
    "ChatCompletionRequest",
    "ChatCompletionRequestMessage",
    "ChatCompletionRequestSampling",
    "ChatResponseFormat",
    "FunctionCall",
    "FunctionCallName",
    "FunctionDefinition",
    "ImageContentPart",
    "ImageUrl",
    "NamedToolChoice",
    "StreamOptions",
    "SystemMessage",
    "Temperature",
    "TextContentPart",
    "Tool",
    "ToolCall",
    "ToolCallFunction",
    "ToolChoice",
    "ToolChoiceFunction",
    "ToolMessage",
    "TopP",
    "UserMessage",
]
