from smart_composer.models.chat_model import ChatModel
from smart_composer.models.provider import LLMProvider, LLMProviderType
from smart_composer.models.request import (
    ContentPart,
    ImageUrl,
    ImageUrlContentPart,
    LLMOptions,
    LLMRequest,
    LLMRequestNonStreaming,
    LLMRequestStreaming,
    RequestAssistantMessage,
    RequestMessage,
    RequestSystemMessage,
    RequestToolMessage,
    RequestUserMessage,
    TextContentPart,
    ToolCallRequest,
)
from smart_composer.models.response import (
    LLMResponseNonStreaming,
    LLMResponseStreaming,
    NonStreamingChoice,
    ResponseDelta,
    ResponseMessage,
    ResponseUsage,
    StreamingChoice,
)

__all__ = [
    "ChatModel",
    "ContentPart",
    "ImageUrl",
    "ImageUrlContentPart",
    "LLMOptions",
    "LLMProvider",
    "LLMProviderType",
    "LLMRequest",
    "LLMRequestNonStreaming",
    "LLMRequestStreaming",
    "LLMResponseNonStreaming",
    "LLMResponseStreaming",
    "NonStreamingChoice",
    "RequestAssistantMessage",
    "RequestMessage",
    "RequestSystemMessage",
    "RequestToolMessage",
    "RequestUserMessage",
    "ResponseDelta",
    "ResponseMessage",
    "ResponseUsage",
    "StreamingChoice",
    "TextContentPart",
    "ToolCallRequest",
]
