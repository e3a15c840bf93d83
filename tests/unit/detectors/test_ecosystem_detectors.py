# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the built-in ecosystem detectors against a fake home directory."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from toolguard.detectors.base import is_valid_detector
from toolguard.detectors.ecosystems.claude_code import ClaudeCodeDetector
from toolguard.detectors.ecosystems.codex import CodexDetector
from toolguard.detectors.ecosystems.copilot import CopilotDetector
from toolguard.detectors.ecosystems.gemini import GeminiDetector
from toolguard.detectors.ecosystems.opencode import OpenCodeDetector
from toolguard.detectors.registry import DetectorRegistry


def _executable(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def bin_dir(fake_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = fake_home.parent / "bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def test_builtin_detectors_registered():
    names = DetectorRegistry.names()
    for name in (
        "claude-code-detector",
        "codex-detector",
        "opencode-detector",
        "copilot-detector",
        "gemini-detector",
    ):
        assert name in names


@pytest.mark.parametrize(
    "cls",
    [ClaudeCodeDetector, CodexDetector, OpenCodeDetector, CopilotDetector, GeminiDetector],
)
def test_builtin_detectors_satisfy_contract(cls):
    assert is_valid_detector(cls())


@pytest.mark.parametrize(
    "cls",
    [ClaudeCodeDetector, CodexDetector, OpenCodeDetector, CopilotDetector, GeminiDetector],
)
async def test_empty_home_finds_nothing(cls, fake_home: Path):
    result = await cls().detect()
    assert result.found is False
    assert result.components == {}
    assert result.ecosystem == cls.ecosystem
    assert result.scan_paths


# ---------------------------------------------------------------------------
# Claude Code
# ---------------------------------------------------------------------------


class TestClaudeCode:
    async def test_components(self, fake_home: Path, bin_dir: Path):
        _executable(bin_dir, "claude")
        claude = fake_home / ".claude"
        (claude / "hooks").mkdir(parents=True)
        (claude / "hooks" / "pre.sh").write_text("echo hi\n")
        (claude / "hooks" / ".DS_Store").write_text("")
        (claude / "skills" / "review").mkdir(parents=True)
        (claude / "plugins" / "helper").mkdir(parents=True)
        (claude / "mcp.json").write_text(
            json.dumps({"mcpServers": {"fs": {"command": "npx"}, "web": {"url": "x"}}})
        )

        result = await ClaudeCodeDetector().detect()

        assert result.found is True
        assert result.ecosystem == "claude-code"
        assert sorted(result.components) == [
            "executable:claude",
            "hook:pre.sh",
            "mcp-server:fs",
            "mcp-server:web",
            "plugin:helper",
            "skill:review",
        ]
        hook = result.components["hook:pre.sh"]
        assert hook.type == "hook"
        assert hook.path == str(claude / "hooks" / "pre.sh")
        assert result.components["mcp-server:fs"].path == str(claude / "mcp.json")
        assert result.components["executable:claude"].path == str(bin_dir / "claude")

    async def test_symlinked_executable_resolved(self, fake_home: Path, bin_dir: Path):
        real = _executable(fake_home.parent / "opt", "claude-real")
        (bin_dir / "claude").symlink_to(real)
        (comp,) = await ClaudeCodeDetector().check_path()
        assert comp.name == "claude"
        assert comp.path == str(real.resolve())

    async def test_non_executable_ignored(self, fake_home: Path, bin_dir: Path):
        (bin_dir / "claude").write_text("x")
        (bin_dir / "claude").chmod(0o644)
        assert await ClaudeCodeDetector().check_path() == []

    async def test_malformed_mcp_config(self, fake_home: Path):
        (fake_home / ".claude").mkdir()
        (fake_home / ".claude" / "mcp.json").write_text("{not json")
        result = await ClaudeCodeDetector().detect()
        assert result.found is False


# ---------------------------------------------------------------------------
# Codex / OpenCode
# ---------------------------------------------------------------------------


class TestCodex:
    async def test_all_executables_and_configs(self, fake_home: Path, bin_dir: Path):
        _executable(bin_dir, "codex")
        _executable(bin_dir, "codex-mcp")
        _executable(bin_dir, "notcodex")
        codex = fake_home / ".codex"
        codex.mkdir()
        (codex / "config.toml").write_text("model = 'o3'\n")
        (codex / ".codexrc").write_text("x")
        (codex / "history.log").write_text("x")

        result = await CodexDetector().detect()

        assert sorted(result.components) == [
            "config:.codexrc",
            "config:config.toml",
            "executable:codex",
            "executable:codex-mcp",
        ]
        assert result.components["config:config.toml"].type == "config-file"

    async def test_earliest_path_entry_wins(self, fake_home: Path, monkeypatch):
        first = _executable(fake_home.parent / "a", "codex")
        _executable(fake_home.parent / "b", "codex")
        monkeypatch.setenv(
            "PATH", f"{fake_home.parent / 'a'}:{fake_home.parent / 'b'}"
        )
        comps = await CodexDetector().check_path()
        assert [c.path for c in comps] == [str(first)]


class TestOpenCode:
    async def test_plugins_and_config(self, fake_home: Path, bin_dir: Path):
        _executable(bin_dir, "opencode")
        base = fake_home / ".config" / "opencode"
        (base / "plugins" / "notify").mkdir(parents=True)
        (base / "opencode.json").write_text("{}")
        (base / "README.md").write_text("x")

        result = await OpenCodeDetector().detect()

        assert sorted(result.components) == [
            "config:opencode.json",
            "executable:opencode",
            "plugin:notify",
        ]


# ---------------------------------------------------------------------------
# Editor extensions
# ---------------------------------------------------------------------------


class TestEditorExtensions:
    async def test_copilot(self, fake_home: Path):
        vscode = fake_home / ".vscode" / "extensions"
        ext = vscode / "github.copilot-chat-0.22.4"
        ext.mkdir(parents=True)
        (ext / "package.json").write_text(json.dumps({"version": "0.22.4"}))
        (vscode / "github.copilot-1.250.0").mkdir()
        (vscode / "ms-python.python-2024.1.0").mkdir()
        cursor = fake_home / ".cursor" / "extensions"
        (cursor / "github.copilot-1.249.0").mkdir(parents=True)
        settings = fake_home / ".config" / "Code" / "User"
        settings.mkdir(parents=True)
        (settings / "settings.json").write_text(
            json.dumps({"github.copilot.enable": {"*": True}, "editor.fontSize": 14})
        )

        result = await CopilotDetector().detect()

        assert result.ecosystem == "github-copilot"
        assert sorted(result.components) == [
            "config:github.copilot.enable",
            "extension:cursor:github.copilot",
            "extension:vscode:github.copilot",
            "extension:vscode:github.copilot-chat@0.22.4",
        ]
        assert result.components["config:github.copilot.enable"].type == "config-setting"
        assert str(settings / "settings.json") in result.scan_paths

    async def test_gemini(self, fake_home: Path):
        vscode = fake_home / ".vscode" / "extensions"
        (vscode / "google.geminicodeassist-2.30.0").mkdir(parents=True)
        (vscode / "github.copilot-1.0.0").mkdir()

        result = await GeminiDetector().detect()

        assert result.ecosystem == "google-gemini"
        assert list(result.components) == ["extension:vscode:google.geminicodeassist"]

    async def test_unversioned_directory_ignored(self, fake_home: Path):
        (fake_home / ".vscode" / "extensions" / "github.copilot-nightly").mkdir(parents=True)
        result = await CopilotDetector().detect()
        assert result.found is False
