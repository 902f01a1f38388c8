from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LLMProviderType(enum.StrEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    GROQ = "groq"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"
    LM_STUDIO = "lm-studio"
    DEEPSEEK = "deepseek"
    SIEKE = "sieke"
    OPENAI_COMPATIBLE = "openai-compatible"


class LLMProvider(BaseModel):
    """A configured LLM provider as persisted in plugin settings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: LLMProviderType
    id: str
    api_key: str | None = None
    base_url: str | None = None
    additional_settings: dict[str, Any] = Field(default_factory=dict)
