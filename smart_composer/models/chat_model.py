from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from smart_composer.models.provider import LLMProviderType


class ChatModel(BaseModel):
    """A chat model entry bound to one configured provider."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    provider_type: LLMProviderType
    provider_id: str
    id: str
    model: str
    enable: bool = True
