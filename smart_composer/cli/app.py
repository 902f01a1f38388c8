from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from smart_composer.cli import output as out
from smart_composer.cli.config import (
    Config,
    config_exists,
    config_path_display,
    load_config,
    save_config,
)
from smart_composer.config import build_provider, resolve_chat_model
from smart_composer.models import (
    LLMProviderType,
    LLMRequestNonStreaming,
    LLMRequestStreaming,
    RequestUserMessage,
)
from smart_composer.settings import (
    DEFAULT_CHAT_MODELS,
    DEFAULT_PROVIDERS,
    SETTINGS_SCHEMA_VERSION,
    SIEKE_DEFAULT_CHAT_MODEL_ID,
    migrate_from_10_to_11,
)
from smart_composer.settings.constants import dump_defaults

logger = logging.getLogger(__name__)

DESCRIPTION = """\
smart-composer: search-grounded chat for your markdown vault

Chat with the Sieke provider from the terminal and upgrade plugin
settings files to the current schema version."""


# ── Settings helpers ────────────────────────────────────────────────


def _default_settings() -> dict[str, Any]:
    return {
        "version": SETTINGS_SCHEMA_VERSION,
        "providers": dump_defaults(DEFAULT_PROVIDERS),
        "chatModels": dump_defaults(DEFAULT_CHAT_MODELS),
        "chatModelId": SIEKE_DEFAULT_CHAT_MODEL_ID,
        "applyModelId": SIEKE_DEFAULT_CHAT_MODEL_ID,
    }


def _read_settings(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a settings object")
    return data


def _upgrade_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Bring *data* to the current schema version, or raise ``ValueError``."""
    version = data.get("version")
    if version == SETTINGS_SCHEMA_VERSION:
        return data
    if version == SETTINGS_SCHEMA_VERSION - 1:
        return migrate_from_10_to_11(data)
    raise ValueError(
        f"Unsupported settings version {version!r}; "
        f"only {SETTINGS_SCHEMA_VERSION - 1} and {SETTINGS_SCHEMA_VERSION} are handled"
    )


def _load_settings(cfg: Config) -> dict[str, Any]:
    path = Path(cfg.settings_path)
    if not path.exists():
        logger.info("No settings at %s, using built-in defaults", path)
        return _default_settings()
    return _upgrade_settings(_read_settings(path))


def _require_api_key(cfg: Config) -> None:
    if not cfg.is_configured:
        out.error(
            "Gemini API key not configured (or set GEMINI_API_KEY).",
            hint="smart-composer config set-key",
        )
        sys.exit(1)


# ── Commands ────────────────────────────────────────────────────────


async def cmd_chat(args: argparse.Namespace) -> None:
    """Send one prompt and print the (optionally streamed) reply."""
    cfg = load_config()

    try:
        settings = _load_settings(cfg)
        provider, model = resolve_chat_model(
            settings, args.model or cfg.chat_model_id or None
        )
    except ValueError as exc:
        out.error(str(exc))
        sys.exit(1)

    if provider.type is not LLMProviderType.SIEKE:
        out.error(
            f"Chat model '{model.id}' uses provider '{provider.type.value}', "
            "which this CLI cannot call",
            hint="smart-composer chat --model sieke-default-chat ...",
        )
        sys.exit(1)

    if not provider.api_key:
        _require_api_key(cfg)
        provider = provider.model_copy(update={"api_key": cfg.gemini_api_key})

    client = build_provider(provider)
    messages = [RequestUserMessage(content=args.prompt)]

    if args.stream:
        stream = await client.stream_response(
            model, LLMRequestStreaming(model=model.model, messages=messages)
        )
        async for chunk in stream:
            content = chunk.choices[0].delta.content
            if content:
                print(content, end="", flush=True)
        print()
        return

    response = await client.generate_response(
        model, LLMRequestNonStreaming(model=model.model, messages=messages)
    )
    print(response.choices[0].message.content or "")

    if args.usage and response.usage is not None:
        out.usage(response.usage)


async def cmd_migrate(args: argparse.Namespace) -> None:
    """Upgrade a settings file to the current schema version."""
    cfg = load_config()
    path = Path(args.path or cfg.settings_path)

    if not path.exists():
        out.error(f"Settings file not found: {path}")
        sys.exit(1)

    try:
        data = _read_settings(path)
        if data.get("version") == SETTINGS_SCHEMA_VERSION:
            out.success(f"{path} is already at version {SETTINGS_SCHEMA_VERSION}")
            return
        migrated = _upgrade_settings(data)
    except ValueError as exc:
        out.error(str(exc))
        sys.exit(1)

    rendered = json.dumps(migrated, indent=2, ensure_ascii=False)
    if args.dry_run:
        print(rendered)
        return

    path.write_text(rendered + "\n", encoding="utf-8")
    out.success(f"Migrated {path} to version {SETTINGS_SCHEMA_VERSION}")
    out.selection(migrated)


async def cmd_config_show(args: argparse.Namespace) -> None:
    """Display current configuration."""
    cfg = load_config()

    out.config_summary(
        config_path_display(),
        cfg.gemini_api_key,
        cfg.settings_path,
        cfg.chat_model_id,
    )


async def cmd_config_set_key(args: argparse.Namespace) -> None:
    """Prompt for and save a new Gemini API key."""
    cfg = load_config() if config_exists() else Config()

    if cfg.gemini_api_key:
        out.warn(f"Replacing key {out.mask(cfg.gemini_api_key)}")

    key = input("  New Gemini API key: ").strip()
    if not key:
        out.warn("No key entered, nothing changed.")
        return

    cfg.gemini_api_key = key
    path = save_config(cfg)
    out.success(f"Saved to {path}")


async def cmd_config_path(args: argparse.Namespace) -> None:
    """Print the config file location."""
    print(config_path_display())


# ── Parser ──────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-composer",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )
    sub = parser.add_subparsers(dest="command", title="commands")

    # chat
    p_chat = sub.add_parser("chat", help="Send a prompt to the configured chat model")
    p_chat.add_argument("prompt", help="Your message")
    p_chat.add_argument("--model", default=None, help="Chat model id to use")
    p_chat.add_argument(
        "--stream", action="store_true", help="Print the reply word by word"
    )
    p_chat.add_argument(
        "--usage", action="store_true", help="Print estimated usage counts"
    )

    # migrate
    p_migrate = sub.add_parser(
        "migrate", help="Upgrade a settings file to the current schema version"
    )
    p_migrate.add_argument(
        "path", nargs="?", default=None, help="Settings JSON (default: from config)"
    )
    p_migrate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the migrated settings instead of writing them",
    )

    # config
    p_cfg = sub.add_parser("config", help="View and change settings")
    cfg_sub = p_cfg.add_subparsers(dest="config_command", title="config commands")

    cfg_sub.add_parser("show", help="Show current settings")
    cfg_sub.add_parser("set-key", help="Change Gemini API key")
    cfg_sub.add_parser("path", help="Print config file location")

    return parser


# ── Dispatch ────────────────────────────────────────────────────────

_CommandHandler = Callable[[argparse.Namespace], Coroutine[Any, Any, None]]

_COMMAND_MAP: dict[str, _CommandHandler] = {
    "chat": cmd_chat,
    "migrate": cmd_migrate,
}

_CONFIG_MAP: dict[str, _CommandHandler] = {
    "show": cmd_config_show,
    "set-key": cmd_config_set_key,
    "path": cmd_config_path,
}


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="  %(name)s: %(message)s",
        )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)

    if not args.command:
        parser.print_help()
        return

    if args.command == "config":
        if not args.config_command:
            parser.parse_args(["config", "--help"])
            return
        handler = _CONFIG_MAP.get(args.config_command)
    else:
        handler = _COMMAND_MAP.get(args.command)

    if handler is None:
        parser.print_help()
        return

    try:
        asyncio.run(handler(args))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
