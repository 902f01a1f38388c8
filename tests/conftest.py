from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from google.genai import types

from smart_composer.llm.sieke import SiekeLLMProvider
from smart_composer.models import ChatModel, LLMProvider, LLMProviderType


def make_response(
    text: str | None,
    grounding: types.GroundingMetadata | None = None,
) -> types.GenerateContentResponse:
    """Build a single-candidate response as the Gemini API returns it."""
    parts = [types.Part(text=text)] if text else []
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=parts),
                grounding_metadata=grounding,
            )
        ]
    )


def web_chunk(uri: str | None, title: str | None) -> types.GroundingChunk:
    return types.GroundingChunk(web=types.GroundingChunkWeb(uri=uri, title=title))


def support(
    start: int | None,
    end: int | None,
    text: str | None,
    indices: list[int],
) -> types.GroundingSupport:
    return types.GroundingSupport(
        segment=types.Segment(start_index=start, end_index=end, text=text),
        grounding_chunk_indices=indices,
    )


class FakeModels:
    """Stands in for ``client.aio.models``; records every call."""

    def __init__(self) -> None:
        self.response: types.GenerateContentResponse = make_response("")
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, **kwargs: Any) -> types.GenerateContentResponse:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeGenaiClient:
    def __init__(self) -> None:
        self.models = FakeModels()
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture()
def genai_client() -> FakeGenaiClient:
    return FakeGenaiClient()


@pytest.fixture()
def sieke_provider_record() -> LLMProvider:
    return LLMProvider(type=LLMProviderType.SIEKE, id="sieke", api_key="test-key")


@pytest.fixture()
def sieke(
    sieke_provider_record: LLMProvider, genai_client: FakeGenaiClient
) -> SiekeLLMProvider:
    return SiekeLLMProvider(sieke_provider_record, genai_client=genai_client)  # type: ignore[arg-type]


@pytest.fixture()
def sieke_model() -> ChatModel:
    return ChatModel(
        provider_type=LLMProviderType.SIEKE,
        provider_id="sieke",
        id="sieke-default-chat",
        model="gemini-2.5-flash-preview-04-17",
    )
