from smart_composer.config import build_provider, llm_registry, resolve_chat_model
from smart_composer.llm import (
    BaseLLMProvider,
    SiekeLLMProvider,
    UnsupportedOperationError,
    generate_footnote_markdown,
    messages_to_contents,
)
from smart_composer.settings import migrate_from_10_to_11

__all__ = [
    "BaseLLMProvider",
    "SiekeLLMProvider",
    "UnsupportedOperationError",
    "build_provider",
    "generate_footnote_markdown",
    "llm_registry",
    "messages_to_contents",
    "migrate_from_10_to_11",
    "resolve_chat_model",
]
