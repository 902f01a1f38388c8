"""Helpers shared by settings migrations that introduce new defaults."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

ExistingSettingsData = dict[str, Any]


def _existing_entries(data: ExistingSettingsData, key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict) and "id" in entry]


def _merge_with_defaults(
    existing: list[dict[str, Any]],
    defaults: list[dict[str, Any]],
    type_key: str,
) -> list[dict[str, Any]]:
    """Merge *existing* entries into *defaults* by ``id``.

    Defaults come first, in their own order, each overlaid by the existing
    entry with the same id (``id`` and *type_key* stay pinned to the
    default). Existing entries with no default counterpart follow in their
    original order. Ids are never duplicated and never dropped.
    """
    existing_by_id: dict[str, dict[str, Any]] = {}
    for entry in existing:
        existing_by_id.setdefault(entry["id"], entry)

    merged: list[dict[str, Any]] = []
    default_ids: set[str] = set()
    for default in defaults:
        if default["id"] in default_ids:
            continue
        default_ids.add(default["id"])
        current = existing_by_id.get(default["id"])
        if current is None:
            merged.append(dict(default))
            continue
        merged.append(
            {
                **default,
                **current,
                "id": default["id"],
                type_key: default[type_key],
            }
        )

    for entry_id, entry in existing_by_id.items():
        if entry_id not in default_ids:
            merged.append(dict(entry))

    return merged


def get_migrated_providers(
    data: ExistingSettingsData,
    default_providers: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    providers = _merge_with_defaults(
        _existing_entries(data, "providers"), default_providers, "type"
    )
    logger.debug("Migrated providers: %s", [p["id"] for p in providers])
    return providers


def get_migrated_chat_models(
    data: ExistingSettingsData,
    default_chat_models: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    chat_models = _merge_with_defaults(
        _existing_entries(data, "chatModels"), default_chat_models, "providerType"
    )
    logger.debug("Migrated chat models: %s", [m["id"] for m in chat_models])
    return chat_models
