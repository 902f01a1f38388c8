"""Pydantic schemas for normalized chat-completion requests."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Content parts
# ---------------------------------------------------------------------------


class TextContentPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ImageUrl(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str


class ImageUrlContentPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


ContentPart = Annotated[
    TextContentPart | ImageUrlContentPart,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class ToolCallRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    arguments: str | None = None


class RequestUserMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str | list[ContentPart]


class RequestAssistantMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["assistant"] = "assistant"
    content: str | None = None
    tool_calls: list[ToolCallRequest] | None = None


class RequestSystemMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system"] = "system"
    content: str


class RequestToolMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["tool"] = "tool"
    content: str
    tool_call: ToolCallRequest


RequestMessage = Annotated[
    RequestUserMessage
    | RequestAssistantMessage
    | RequestSystemMessage
    | RequestToolMessage,
    Field(discriminator="role"),
]


def message_text_length(message: RequestMessage) -> int:
    """Character length of a message's textual content.

    String content counts its characters, part lists count the characters
    of their text parts, and missing content counts as zero.
    """
    content = message.content
    if content is None:
        return 0
    if isinstance(content, str):
        return len(content)
    return sum(len(part.text) for part in content if isinstance(part, TextContentPart))


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class LLMRequest(BaseModel):
    model: str
    messages: list[RequestMessage]
    stream: bool = False
    temperature: float | None = None
    max_tokens: int | None = None


class LLMRequestNonStreaming(LLMRequest):
    stream: Literal[False] = False


class LLMRequestStreaming(LLMRequest):
    stream: Literal[True] = True


class LLMOptions(BaseModel):
    """Per-call options. Adapters may ignore any of these."""

    timeout_seconds: float | None = None
