"""Sieke provider: search-grounded Gemini chat behind the chat-completion shape."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import Counter
from collections.abc import AsyncIterator, Sequence

from google import genai
from google.genai import types

from smart_composer.llm.base import BaseLLMProvider
from smart_composer.llm.exceptions import UnsupportedOperationError
from smart_composer.llm.footnotes import generate_footnote_markdown
from smart_composer.models import (
    ChatModel,
    ImageUrlContentPart,
    LLMOptions,
    LLMProvider,
    LLMRequestNonStreaming,
    LLMRequestStreaming,
    LLMResponseNonStreaming,
    LLMResponseStreaming,
    NonStreamingChoice,
    RequestAssistantMessage,
    RequestMessage,
    RequestSystemMessage,
    RequestToolMessage,
    RequestUserMessage,
    ResponseDelta,
    ResponseMessage,
    ResponseUsage,
    StreamingChoice,
    TextContentPart,
)
from smart_composer.models.request import message_text_length

logger = logging.getLogger(__name__)

CHUNK_DELAY_SECONDS = 0.001

SYSTEM_INSTRUCTION = """\
You are an intelligent assistant to help answer any questions that the user has, particularly about editing and organizing markdown files in Obsidian.
1. Please keep your response as concise as possible. Avoid being verbose.
2. Do not lie or make up facts.
3. Format your response in markdown.
4. Respond in the same language as the user's message.
5. When writing out new markdown blocks, also wrap them with <smtcmp_block> tags. For example:
<smtcmp_block language="markdown">
{{ content }}
</smtcmp_block>
6. When providing markdown blocks for an existing file, add the filename and language attributes to the <smtcmp_block> tags. Restate the relevant section or heading, so the user knows which part of the file you are editing. For example:
<smtcmp_block filename="path/to/file.md" language="markdown">
## Section Title
...
{{ content }}
...
</smtcmp_block>
7. When the user is asking for edits to their markdown, please provide a simplified version of the markdown block emphasizing only the changes. Use comments to show where unchanged content has been skipped. Wrap the markdown block with <smtcmp_block> tags. Add filename and language attributes to the <smtcmp_block> tags. For example:
<smtcmp_block filename="path/to/file.md" language="markdown">
<!-- ... existing content ... -->
{{ edit_1 }}
<!-- ... existing content ... -->
{{ edit_2 }}
<!-- ... existing content ... -->
</smtcmp_block>
The user has full access to the file, so they prefer seeing only the changes in the markdown. Often this will mean that the start/end of the file will be skipped, but that's okay! Rewrite the entire file only if specifically requested. Always provide a brief explanation of the updates, except when the user specifically asks for just the content.
8. Default to attempting to search Google, unless it is clear it is not a research/information/factual question."""


def _user_parts(message: RequestUserMessage) -> list[types.Part]:
    if isinstance(message.content, str):
        return [types.Part(text=message.content)]

    parts: list[types.Part] = []
    for part in message.content:
        match part:
            case TextContentPart(text=text):
                parts.append(types.Part(text=text))
            case ImageUrlContentPart():
                logger.debug("Dropping image_url part: Sieke only accepts text")
    return parts


def messages_to_contents(messages: Sequence[RequestMessage]) -> list[types.Content]:
    """Convert chat messages into Gemini ``Content`` entries.

    Only user text and plain-string assistant replies are carried over.
    ``system`` and ``tool`` messages, non-string assistant content and
    non-text parts are dropped; a warning names the dropped message roles.
    """
    contents: list[types.Content] = []
    dropped: Counter[str] = Counter()

    for message in messages:
        match message:
            case RequestUserMessage():
                parts = _user_parts(message)
                if parts:
                    contents.append(types.Content(role="user", parts=parts))
            case RequestAssistantMessage(content=str(text)) if text:
                contents.append(
                    types.Content(role="model", parts=[types.Part(text=text)])
                )
            case RequestAssistantMessage():
                dropped["assistant"] += 1
            case RequestSystemMessage() | RequestToolMessage():
                dropped[message.role] += 1

    if dropped:
        logger.warning(
            "Sieke ignores %s message(s); they were not sent to the model",
            ", ".join(f"{n} {role}" for role, n in sorted(dropped.items())),
        )
    return contents


def _build_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
        response_mime_type="text/plain",
        system_instruction=types.Content(parts=[types.Part(text=SYSTEM_INSTRUCTION)]),
    )


def _chunk(
    response: LLMResponseNonStreaming,
    delta: ResponseDelta,
    finish_reason: str | None = None,
) -> LLMResponseStreaming:
    return LLMResponseStreaming(
        id=response.id,
        created=response.created,
        model=response.model,
        choices=[StreamingChoice(delta=delta, finish_reason=finish_reason)],
    )


async def _replay_as_stream(
    response: LLMResponseNonStreaming,
) -> AsyncIterator[LLMResponseStreaming]:
    """Replay a finished response as word-sized chunks ending in a stop chunk."""
    content = response.choices[0].message.content or ""

    if content == "":
        yield _chunk(response, ResponseDelta(role="assistant", content=""))
        await asyncio.sleep(CHUNK_DELAY_SECONDS)
        yield _chunk(response, ResponseDelta(), finish_reason="stop")
        return

    words = content.split(" ")
    last = len(words) - 1
    for i, word in enumerate(words):
        yield _chunk(
            response,
            ResponseDelta(
                role="assistant" if i == 0 else None,
                content=word if i == last else word + " ",
            ),
        )
        if i != last:
            await asyncio.sleep(CHUNK_DELAY_SECONDS)

    yield _chunk(response, ResponseDelta(), finish_reason="stop")


class SiekeLLMProvider(BaseLLMProvider[LLMProvider]):
    """Chat adapter for the Sieke provider.

    Every call enables Google Search grounding and a fixed system
    instruction; system messages in the request are not forwarded.
    Streaming is emulated by replaying the finished reply word by word.

    Parameters
    ----------
    provider:
        The persisted ``sieke`` provider record. Its ``api_key`` is used to
        build a client when *genai_client* is not given.
    genai_client:
        An authenticated ``google.genai.Client`` instance.
    """

    def __init__(
        self,
        provider: LLMProvider,
        genai_client: genai.Client | None = None,
    ) -> None:
        super().__init__(provider)
        self._client = genai_client or genai.Client(api_key=provider.api_key or "")
        logger.debug("Initialised Sieke provider %s", provider.id)

    async def generate_response(
        self,
        model: ChatModel,
        request: LLMRequestNonStreaming,
        options: LLMOptions | None = None,
    ) -> LLMResponseNonStreaming:
        contents = messages_to_contents(request.messages)
        logger.debug(
            "Sending %d content entries to %s", len(contents), model.model
        )

        response = await self._client.aio.models.generate_content(
            model=model.model,
            contents=contents,
            config=_build_config(),
        )

        text = response.text or ""
        grounding = (
            response.candidates[0].grounding_metadata if response.candidates else None
        )
        logger.debug(
            "Received %d characters (grounded: %s)", len(text), grounding is not None
        )

        prompt_chars = sum(message_text_length(m) for m in request.messages)
        now = time.time()

        return LLMResponseNonStreaming(
            id=f"sieke-resp-{int(now * 1000)}",
            created=int(now),
            model=model.model,
            choices=[
                NonStreamingChoice(
                    message=ResponseMessage(
                        content=generate_footnote_markdown(text, grounding)
                    ),
                    finish_reason="stop",
                )
            ],
            usage=ResponseUsage(
                prompt_tokens=prompt_chars,
                completion_tokens=len(text),
                total_tokens=prompt_chars + len(text),
                is_estimate=True,
            ),
        )

    async def stream_response(
        self,
        model: ChatModel,
        request: LLMRequestStreaming,
        options: LLMOptions | None = None,
    ) -> AsyncIterator[LLMResponseStreaming]:
        non_streaming = LLMRequestNonStreaming.model_validate(
            request.model_dump(exclude={"stream"})
        )
        response = await self.generate_response(model, non_streaming, options)
        return _replay_as_stream(response)

    async def get_embedding(self, model: str, text: str) -> list[float]:
        raise UnsupportedOperationError("Embeddings", "Sieke")
