from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from smart_composer.cli import app
from smart_composer.config import build_provider
from smart_composer.settings import SIEKE_DEFAULT_CHAT_MODEL_ID
from tests.conftest import FakeGenaiClient, make_response


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SMART_COMPOSER_CONFIG", str(tmp_path / "config.toml"))
    monkeypatch.setenv("SMART_COMPOSER_SETTINGS", str(tmp_path / "settings.json"))
    monkeypatch.setenv("GEMINI_API_KEY", "AIza-test")


def _write(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _build_with(provider, client):
    return build_provider(provider, genai_client=client)


# ── migrate ──────────────────────────────────────────────────────────


async def test_migrate_rewrites_v10_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "settings.json", {"version": 10, "chatModelId": "gone"})

    await app.cmd_migrate(argparse.Namespace(path=str(path), dry_run=False))

    migrated = json.loads(path.read_text(encoding="utf-8"))
    assert migrated["version"] == 11
    assert migrated["chatModelId"] == SIEKE_DEFAULT_CHAT_MODEL_ID


async def test_migrate_dry_run_leaves_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write(tmp_path / "settings.json", {"version": 10})

    await app.cmd_migrate(argparse.Namespace(path=str(path), dry_run=True))

    assert json.loads(path.read_text(encoding="utf-8")) == {"version": 10}
    assert json.loads(capsys.readouterr().out)["version"] == 11


async def test_migrate_rejects_unknown_versions(tmp_path: Path) -> None:
    path = _write(tmp_path / "settings.json", {"version": 4})

    with pytest.raises(SystemExit):
        await app.cmd_migrate(argparse.Namespace(path=str(path), dry_run=False))

    assert json.loads(path.read_text(encoding="utf-8")) == {"version": 4}


# ── chat ─────────────────────────────────────────────────────────────


async def test_chat_streams_reply(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    client = FakeGenaiClient()
    client.models.response = make_response("grounded answer here")
    monkeypatch.setattr(
        app,
        "build_provider",
        lambda provider: _build_with(provider, client),
    )

    await app.cmd_chat(
        argparse.Namespace(prompt="question", model=None, stream=True, usage=False)
    )

    assert capsys.readouterr().out == "grounded answer here\n"
    sent = client.models.calls[0]
    assert sent["model"] == "gemini-2.5-flash-preview-04-17"


async def test_chat_injects_configured_key(monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeGenaiClient()
    client.models.response = make_response("ok")
    seen = []

    def _build(provider):
        seen.append(provider)
        return _build_with(provider, client)

    monkeypatch.setattr(app, "build_provider", _build)

    await app.cmd_chat(
        argparse.Namespace(prompt="hi", model=None, stream=False, usage=True)
    )

    assert seen[0].api_key == "AIza-test"


async def test_chat_rejects_models_without_an_adapter(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write(tmp_path / "settings.json", {"version": 10, "chatModelId": "gpt-4.1"})
    built = []
    monkeypatch.setattr(app, "build_provider", built.append)

    with pytest.raises(SystemExit):
        await app.cmd_chat(
            argparse.Namespace(prompt="hi", model=None, stream=False, usage=False)
        )

    assert built == []
    assert "gpt-4.1" in capsys.readouterr().out


async def test_chat_labels_estimated_usage(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    client = FakeGenaiClient()
    client.models.response = make_response("four")
    monkeypatch.setattr(
        app,
        "build_provider",
        lambda provider: _build_with(provider, client),
    )

    await app.cmd_chat(
        argparse.Namespace(prompt="abc", model=None, stream=False, usage=True)
    )

    printed = capsys.readouterr().out
    assert "Usage (estimated):" in printed
    assert "3 prompt + 4 completion" in printed


# ── migrate output ───────────────────────────────────────────────────


async def test_migrate_reports_selected_models(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write(tmp_path / "settings.json", {"version": 10, "chatModelId": "gone"})

    await app.cmd_migrate(argparse.Namespace(path=str(path), dry_run=False))

    printed = capsys.readouterr().out
    assert f"Chat model:  {SIEKE_DEFAULT_CHAT_MODEL_ID}" in printed
    assert f"Apply model:  {SIEKE_DEFAULT_CHAT_MODEL_ID}" in printed


async def test_migrate_rejects_malformed_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit):
        await app.cmd_migrate(argparse.Namespace(path=str(path), dry_run=False))

    assert path.read_text(encoding="utf-8") == "{not json"
    assert "✗" in capsys.readouterr().out
