"""Configuration management for the smart-composer CLI.

Reads/writes a TOML config file and provides a typed Config dataclass.
Default location: ``~/.config/smart-composer/config.toml``.
Override with the ``SMART_COMPOSER_CONFIG`` environment variable.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_CONFIG_DIR = Path("~/.config/smart-composer").expanduser()
_DEFAULT_SETTINGS_PATH = Path("./data/settings.json")


def _config_path() -> Path:
    env = os.environ.get("SMART_COMPOSER_CONFIG")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_CONFIG_DIR / "config.toml"


@dataclass
class Config:
    gemini_api_key: str = ""

    # Plugin settings JSON (providers, chat models, current selections)
    settings_path: str = str(_DEFAULT_SETTINGS_PATH)

    # Overrides the settings file's chatModelId when set
    chat_model_id: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.gemini_api_key)


def load_config() -> Config:
    """Load config from disk, falling back to defaults + env overrides."""
    path = _config_path()
    cfg = Config()

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)
        gemini_section = data.get("gemini", {})
        settings_section = data.get("settings", {})
        chat_section = data.get("chat", {})

        cfg.gemini_api_key = gemini_section.get("api_key", cfg.gemini_api_key)
        cfg.settings_path = settings_section.get("path", cfg.settings_path)
        cfg.chat_model_id = chat_section.get("model_id", cfg.chat_model_id)

    # Environment variables always take precedence
    cfg.gemini_api_key = os.environ.get("GEMINI_API_KEY", cfg.gemini_api_key)
    cfg.settings_path = os.environ.get("SMART_COMPOSER_SETTINGS", cfg.settings_path)

    return cfg


def save_config(cfg: Config) -> Path:
    """Write config to the TOML file. Returns the path written."""
    path = _config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "[gemini]",
        f'api_key = "{cfg.gemini_api_key}"',
        "",
        "[settings]",
        f'path = "{cfg.settings_path}"',
        "",
    ]
    if cfg.chat_model_id:
        lines.extend(["[chat]", f'model_id = "{cfg.chat_model_id}"', ""])

    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def config_exists() -> bool:
    return _config_path().exists()


def config_path_display() -> str:
    return str(_config_path())
