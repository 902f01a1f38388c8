"""Migration from settings version 10 to version 11.

- Add the Sieke LLM provider
- Add the Sieke default chat model
- Repair ``chatModelId`` / ``applyModelId`` references left dangling
"""

from __future__ import annotations

import logging
from typing import Any

from smart_composer.models import LLMProviderType
from smart_composer.settings.constants import (
    DEFAULT_CHAT_MODELS,
    DEFAULT_PROVIDERS,
    SIEKE_DEFAULT_CHAT_MODEL_ID,
    dump_defaults,
)
from smart_composer.settings.migrations.utils import (
    ExistingSettingsData,
    get_migrated_chat_models,
    get_migrated_providers,
)

logger = logging.getLogger(__name__)

VERSION = 11


def _sieke_default_chat_model_id(chat_models: list[dict[str, Any]]) -> str:
    """Sieke's default model id, else the first model's id, else ``""``."""
    for model in chat_models:
        if (
            model.get("providerType") == LLMProviderType.SIEKE.value
            and model.get("id") == SIEKE_DEFAULT_CHAT_MODEL_ID
        ):
            return model["id"]
    return chat_models[0]["id"] if chat_models else ""


def migrate_from_10_to_11(data: ExistingSettingsData) -> dict[str, Any]:
    """Return a version-11 copy of *data*. The input is not modified."""
    new_data: dict[str, Any] = {**data, "version": VERSION}

    new_data["providers"] = get_migrated_providers(
        data, dump_defaults(DEFAULT_PROVIDERS)
    )
    chat_models = get_migrated_chat_models(data, dump_defaults(DEFAULT_CHAT_MODELS))
    new_data["chatModels"] = chat_models

    default_model_id = _sieke_default_chat_model_id(chat_models)
    model_ids = {m["id"] for m in chat_models}

    chat_model_id = new_data.get("chatModelId")
    if not chat_model_id or chat_model_id not in model_ids:
        logger.info(
            "Resetting chatModelId %r to %r", chat_model_id, default_model_id
        )
        new_data["chatModelId"] = default_model_id

    # Checked apart from chatModelId: an unset applyModelId is always set to
    # the default model, a set one only when it no longer resolves.
    apply_model_id = new_data.get("applyModelId")
    if apply_model_id:
        if apply_model_id not in model_ids:
            logger.info(
                "Resetting applyModelId %r to %r", apply_model_id, default_model_id
            )
            new_data["applyModelId"] = default_model_id
    else:
        new_data["applyModelId"] = default_model_id

    return new_data
