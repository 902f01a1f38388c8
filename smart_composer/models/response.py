"""Pydantic schemas mirroring chat-completion responses and chunks."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ResponseMessage(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: str | None = None


class ResponseDelta(BaseModel):
    role: Literal["assistant"] | None = None
    content: str | None = None


class NonStreamingChoice(BaseModel):
    message: ResponseMessage
    finish_reason: str | None = None


class StreamingChoice(BaseModel):
    delta: ResponseDelta
    finish_reason: str | None = None


class ResponseUsage(BaseModel):
    """Token counts for one completion.

    ``is_estimate`` is set when the counts are approximations (for example
    character lengths) rather than tokenizer output.
    """

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    is_estimate: bool = False


class LLMResponseNonStreaming(BaseModel):
    id: str
    object: Literal["chat.completion"] = "chat.completion"
    created: int
    model: str
    choices: list[NonStreamingChoice]
    usage: ResponseUsage | None = None


class LLMResponseStreaming(BaseModel):
    id: str
    object: Literal["chat.completion.chunk"] = "chat.completion.chunk"
    created: int
    model: str
    choices: list[StreamingChoice]
