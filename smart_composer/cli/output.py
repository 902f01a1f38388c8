"""Terminal rendering for smart-composer commands.

ANSI styling is applied only when stdout is a TTY and ``NO_COLOR`` is unset.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from smart_composer.models import ResponseUsage

_STYLES = {"dim": "2", "ok": "32", "warn": "33", "fail": "31", "cmd": "36"}


def _style(name: str, text: str) -> str:
    if os.environ.get("NO_COLOR") or not getattr(sys.stdout, "isatty", lambda: False)():
        return text
    return f"\033[{_STYLES[name]}m{text}\033[0m"


def _field(label: str, value: object) -> None:
    print(f"  {_style('dim', label + ':')}  {value}")


def success(msg: str) -> None:
    print(f"  {_style('ok', '✓')} {msg}")


def warn(msg: str) -> None:
    print(f"  {_style('warn', '!')} {msg}")


def error(msg: str, hint: str | None = None) -> None:
    """Print an error, optionally followed by a command that fixes it."""
    print(f"  {_style('fail', '✗')} {msg}")
    if hint:
        print(f"    {_style('cmd', hint)}")


def mask(secret: str) -> str:
    if len(secret) <= 11:
        return "*" * len(secret)
    return secret[:7] + "..." + secret[-4:]


def usage(counts: ResponseUsage) -> None:
    """Render completion usage, labelling character-count estimates."""
    label = "Usage (estimated)" if counts.is_estimate else "Usage"
    _field(
        label,
        f"{counts.prompt_tokens} prompt + {counts.completion_tokens} completion",
    )


def selection(settings: dict[str, Any]) -> None:
    """Show the chat and apply model ids a migration left selected."""
    _field("Chat model", settings.get("chatModelId"))
    _field("Apply model", settings.get("applyModelId"))


def config_summary(
    path: str, api_key: str, settings_path: str, chat_model_id: str
) -> None:
    print(f"\nConfiguration ({path})\n")
    _field("Gemini API key", mask(api_key) if api_key else _style("dim", "not set"))
    _field("Settings file", settings_path)
    _field("Chat model", chat_model_id or _style("dim", "from settings"))
    print()
