"""Chat-completion request data models.

These mirror the OpenAI-style chat-completion request accepted by the
inference engine. A RAG request converts to and from ``ChatCompletionRequest``.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from rag_contracts.base import Count, WireModel


class TextContentPart(WireModel):
    """Text segment of a multi-part user message."""

    type: Literal["text"] = "text"
    text: str = Field(description="Text content")


class ImageUrl(WireModel):
    """Image reference of a multi-part user message."""

    url: str = Field(description="Image URL or base64 data URL")
    detail: str | None = Field(default=None, description="Image detail level")


class ImageContentPart(WireModel):
    """Image segment of a multi-part user message."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl = Field(description="Image reference")


ContentPart = Annotated[
    TextContentPart | ImageContentPart,
    Field(discriminator="type"),
]


class SystemMessage(WireModel):
    """System prompt message."""

    role: Literal["system"] = "system"
    content: str = Field(description="System prompt")
    name: str | None = Field(default=None, description="Participant name")

    def text_content(self) -> str:
        return self.content


class UserMessage(WireModel):
    """User message.

    Content is either plain text or a list of text and image parts.
    """

    role: Literal["user"] = "user"
    content: str | list[ContentPart] = Field(description="Message content")
    name: str | None = Field(default=None, description="Participant name")

    def text_content(self) -> str:
        """Plain text of the message; text parts are joined by a space."""
        if isinstance(self.content, str):
            return self.content
        return " ".join(
            part.text for part in self.content if isinstance(part, TextContentPart)
        )


class ToolCallFunction(WireModel):
    """Function invocation requested by the model."""

    name: str = Field(description="Function name")
    arguments: str = Field(description="JSON-encoded arguments")


class ToolCall(WireModel):
    """Tool call made by an assistant turn."""

    id: str = Field(description="Tool call identifier")
    type: Literal["function"] = "function"
    function: ToolCallFunction = Field(description="Invoked function")


class AssistantMessage(WireModel):
    """Previous assistant turn."""

    role: Literal["assistant"] = "assistant"
    content: str | None = Field(default=None, description="Message content")
    name: str | None = Field(default=None, description="Participant name")
    tool_calls: list[ToolCall] | None = Field(
        default=None,
        description="Tool calls generated by the model",
    )

    def text_content(self) -> str:
        return self.content or ""


class ToolMessage(WireModel):
    """Result of a tool call fed back to the model."""

    role: Literal["tool"] = "tool"
    content: str = Field(description="Tool output")
    tool_call_id: str | None = Field(
        default=None,
        description="Tool call this message responds to",
    )

    def text_content(self) -> str:
        return self.content


ChatCompletionRequestMessage = Annotated[
    SystemMessage | UserMessage | AssistantMessage | ToolMessage,
    Field(discriminator="role"),
]


class FunctionDefinition(WireModel):
    """Function the model may generate JSON inputs for."""

    name: str = Field(description="Function name")
    description: str | None = Field(default=None, description="What it does")
    parameters: dict[str, Any] | None = Field(
        default=None,
        description="JSON Schema of the parameters",
    )


class Tool(WireModel):
    """Tool the model may call. Only functions are supported."""

    type: Literal["function"] = "function"
    function: FunctionDefinition = Field(description="Function definition")


class ToolChoiceFunction(WireModel):
    name: str = Field(description="Function name")


class NamedToolChoice(WireModel):
    """Forces the model to call one specific tool."""

    type: Literal["function"] = "function"
    function: ToolChoiceFunction = Field(description="Function to call")


ToolChoice = Literal["none", "auto", "required"] | NamedToolChoice


class FunctionCallName(WireModel):
    name: str = Field(description="Function name")


# Legacy function-call mechanism, superseded by tools
FunctionCall = Literal["none", "auto"] | FunctionCallName


class ChatResponseFormat(WireModel):
    """Format the model must output."""

    type: Literal["text", "json_object"] = "text"


class StreamOptions(WireModel):
    """Streaming options. Only meaningful when ``stream`` is true."""

    include_usage: StrictBool | None = Field(
        default=None,
        description="Send a usage chunk before the end of the stream",
    )


class Temperature(BaseModel):
    """Temperature-based sampling."""

    model_config = ConfigDict(frozen=True)

    value: float

    def __init__(self, value: float) -> None:
        super().__init__(value=value)


class TopP(BaseModel):
    """Nucleus (top-p) sampling."""

    model_config = ConfigDict(frozen=True)

    value: float

    def __init__(self, value: float) -> None:
        super().__init__(value=value)


ChatCompletionRequestSampling = Temperature | TopP


class ChatCompletionRequest(WireModel):
    """Plain chat-completion request.

    Attributes:
        model: Chat model id.
        messages: Conversation so far.
        temperature: Sampling temperature, between 0.0 and 2.0.
        top_p: Nucleus sampling mass, between 0.0 and 1.0.
        n_choice: Completion choices per request.
        stream: Whether to stream partial results.
        stream_options: Streaming options.
        stop: Up to 4 stop sequences.
        max_tokens: Maximum tokens to generate.
        presence_penalty: Between -2.0 and 2.0.
        frequency_penalty: Between -2.0 and 2.0.
        logit_bias: Token id to bias value, -100 to 100.
        user: End-user identifier.
        functions: Legacy function definitions.
        function_call: Legacy function-call control.
        response_format: Output format constraint.
        tool_choice: Tool-call control.
        tools: Tools the model may call.
        context_window: Trailing user messages used for retrieval.
    """

    model: str | None = Field(default=None, description="Chat model id")
    messages: list[ChatCompletionRequestMessage] = Field(
        description="Conversation so far",
    )
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
    functions: list[FunctionDefinition] | None = Field(
        default=None,
        description="Legacy function definitions",
    )
    function_call: FunctionCall | None = Field(
        default=None,
        description="Legacy function-call control",
    )
    response_format: ChatResponseFormat | None = Field(
        default=None,
        description="Output format",
    )
    tool_choice: ToolChoice | None = Field(default=None, description="Tool choice")
    tools: list[Tool] | None = Field(default=None, description="Available tools")
    context_window: Count | None = Field(
        default=None,
        description="Trailing user messages used for retrieval",
    )
