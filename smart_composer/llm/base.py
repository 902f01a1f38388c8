from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from smart_composer.models import (
    ChatModel,
    LLMOptions,
    LLMProvider,
    LLMRequestNonStreaming,
    LLMRequestStreaming,
    LLMResponseNonStreaming,
    LLMResponseStreaming,
)


class BaseLLMProvider[P: LLMProvider](ABC):
    """Common surface every chat provider adapter implements.

    Parameters
    ----------
    provider:
        The persisted provider record this adapter was built from.
    """

    def __init__(self, provider: P) -> None:
        self.provider = provider

    @abstractmethod
    async def generate_response(
        self,
        model: ChatModel,
        request: LLMRequestNonStreaming,
        options: LLMOptions | None = None,
    ) -> LLMResponseNonStreaming: ...

    @abstractmethod
    async def stream_response(
        self,
        model: ChatModel,
        request: LLMRequestStreaming,
        options: LLMOptions | None = None,
    ) -> AsyncIterator[LLMResponseStreaming]:
        """Start a completion and return an iterator over its chunks."""
        ...

    @abstractmethod
    async def get_embedding(self, model: str, text: str) -> list[float]: ...
