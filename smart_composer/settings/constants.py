"""Built-in providers and chat models shipped with the current settings schema."""

from __future__ import annotations

from typing import Any

from smart_composer.models import ChatModel, LLMProvider, LLMProviderType

SETTINGS_SCHEMA_VERSION = 11

SIEKE_PROVIDER_ID = "sieke"
SIEKE_DEFAULT_CHAT_MODEL_ID = "sieke-default-chat"


def _provider(provider_type: LLMProviderType) -> LLMProvider:
    return LLMProvider(type=provider_type, id=provider_type.value)


DEFAULT_PROVIDERS: list[LLMProvider] = [
    _provider(LLMProviderType.OPENAI),
    _provider(LLMProviderType.ANTHROPIC),
    _provider(LLMProviderType.GEMINI),
    _provider(LLMProviderType.DEEPSEEK),
    _provider(LLMProviderType.GROQ),
    _provider(LLMProviderType.OPENROUTER),
    _provider(LLMProviderType.OLLAMA),
    _provider(LLMProviderType.LM_STUDIO),
    LLMProvider(type=LLMProviderType.SIEKE, id=SIEKE_PROVIDER_ID),
]

DEFAULT_CHAT_MODELS: list[ChatModel] = [
    ChatModel(
        provider_type=LLMProviderType.ANTHROPIC,
        provider_id="anthropic",
        id="claude-sonnet-4.0",
        model="claude-sonnet-4-0",
    ),
    ChatModel(
        provider_type=LLMProviderType.OPENAI,
        provider_id="openai",
        id="gpt-4.1",
        model="gpt-4.1",
    ),
    ChatModel(
        provider_type=LLMProviderType.OPENAI,
        provider_id="openai",
        id="gpt-4.1-mini",
        model="gpt-4.1-mini",
    ),
    ChatModel(
        provider_type=LLMProviderType.GEMINI,
        provider_id="gemini",
        id="gemini-2.5-pro",
        model="gemini-2.5-pro",
    ),
    ChatModel(
        provider_type=LLMProviderType.GEMINI,
        provider_id="gemini",
        id="gemini-2.5-flash",
        model="gemini-2.5-flash",
    ),
    ChatModel(
        provider_type=LLMProviderType.DEEPSEEK,
        provider_id="deepseek",
        id="deepseek-chat",
        model="deepseek-chat",
    ),
    ChatModel(
        provider_type=LLMProviderType.SIEKE,
        provider_id=SIEKE_PROVIDER_ID,
        id=SIEKE_DEFAULT_CHAT_MODEL_ID,
        model="gemini-2.5-flash-preview-04-17",
    ),
]


def dump_defaults(entries: list[LLMProvider] | list[ChatModel]) -> list[dict[str, Any]]:
    """Serialize default entries to their persisted (camelCase) form."""
    return [entry.model_dump(mode="json", by_alias=True) for entry in entries]
