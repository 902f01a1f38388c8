"""Rewrite search-grounding citations as inline markdown footnotes."""

from __future__ import annotations

from google.genai import types


def _footnote_marker(uri: str, footnote_id: int) -> str:
    return f'<sup><a href="{uri}">{footnote_id}</a></sup>'


def _is_well_formed(support: types.GroundingSupport) -> bool:
    segment = support.segment
    return (
        segment is not None
        and isinstance(segment.start_index, int)
        and isinstance(segment.end_index, int)
        and bool(segment.text)
    )


def _first_cited_uri(
    support: types.GroundingSupport,
    chunks: list[types.GroundingChunk],
) -> str | None:
    """Return the URI of the first referenced chunk carrying a URI and a title."""
    for chunk_index in support.grounding_chunk_indices or []:
        if not 0 <= chunk_index < len(chunks):
            continue
        web = chunks[chunk_index].web
        if web is not None and web.uri and web.title:
            return web.uri
    return None


def generate_footnote_markdown(
    text: str,
    grounding: types.GroundingMetadata | None,
) -> str:
    """Insert a superscript citation link after every grounded span of *text*.

    Supports are merged into the text left to right in order of their start
    offset. Each support contributes at most one marker, for the first of its
    chunks with both a URI and a title. Footnote numbers are assigned per URI
    in order of first appearance, so a source cited twice keeps its number.
    Text outside any support is copied through unchanged, and overlapping or
    out-of-order supports never move the cursor backwards.
    """
    if (
        grounding is None
        or not grounding.grounding_supports
        or not grounding.grounding_chunks
    ):
        return text

    chunks = grounding.grounding_chunks
    supports = sorted(
        (s for s in grounding.grounding_supports if _is_well_formed(s)),
        key=lambda s: s.segment.start_index,  # type: ignore[union-attr]
    )

    footnote_ids: dict[str, int] = {}
    parts: list[str] = []
    cursor = 0

    for support in supports:
        start = support.segment.start_index  # type: ignore[union-attr]
        end = support.segment.end_index  # type: ignore[union-attr]

        if start > cursor:
            parts.append(text[cursor:start])
        parts.append(text[max(start, 0) : min(end, len(text))])

        uri = _first_cited_uri(support, chunks)
        if uri is not None:
            footnote_id = footnote_ids.setdefault(uri, len(footnote_ids) + 1)
            parts.append(_footnote_marker(uri, footnote_id))

        cursor = max(cursor, end)

    if cursor < len(text):
        parts.append(text[cursor:])

    return "".join(parts)
