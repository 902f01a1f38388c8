from smart_composer.settings.migrations.utils import (
    ExistingSettingsData,
    get_migrated_chat_models,
    get_migrated_providers,
)
from smart_composer.settings.migrations.v10_to_v11 import migrate_from_10_to_11

__all__ = [
    "ExistingSettingsData",
    "get_migrated_chat_models",
    "get_migrated_providers",
    "migrate_from_10_to_11",
]
