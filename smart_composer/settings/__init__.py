from smart_composer.settings.constants import (
    DEFAULT_CHAT_MODELS,
    DEFAULT_PROVIDERS,
    SETTINGS_SCHEMA_VERSION,
    SIEKE_DEFAULT_CHAT_MODEL_ID,
)
from smart_composer.settings.migrations import migrate_from_10_to_11

__all__ = [
    "DEFAULT_CHAT_MODELS",
    "DEFAULT_PROVIDERS",
    "SETTINGS_SCHEMA_VERSION",
    "SIEKE_DEFAULT_CHAT_MODEL_ID",
    "migrate_from_10_to_11",
]
