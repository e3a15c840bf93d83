# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for detector helpers, the detector contract, and the registry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from toolguard.detectors.base import (
    AIToolDetector,
    is_valid_detector,
    missing_detector_properties,
)
from toolguard.detectors.registry import DetectorRegistry
from toolguard.detectors.utils import (
    detect_directory,
    ecosystem_for_detector,
    list_files,
    normalize_ecosystem_name,
    read_extension_metadata,
    read_json,
)
from toolguard.models.detection import DetectionResult
from toolguard.utils.paths import expand_tilde, parse_path_env, resolve_path_sync, safe_path

# ---------------------------------------------------------------------------
# Ecosystem names
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("claude", "claude-code"),
        ("  Copilot ", "github-copilot"),
        ("GEMINI", "google-gemini"),
        ("open-code", "opencode"),
        ("codex", "codex"),
        ("unknown-thing", "unknown-thing"),
    ],
)
def test_normalize_ecosystem_name(raw: str, expected: str):
    assert normalize_ecosystem_name(raw) == expected


class _Named:
    def __init__(self, name: str, ecosystem: str = "") -> None:
        self.name = name
        self.ecosystem = ecosystem


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        (_Named("claudecode-detector"), "claude-code"),
        (_Named("copilot-detector"), "github-copilot"),
        (_Named("gemini-detector"), "google-gemini"),
        (_Named("codex-detector"), "codex"),
        (_Named("whatever", ecosystem="custom"), "custom"),
    ],
)
def test_ecosystem_for_detector(obj, expected: str):
    assert ecosystem_for_detector(obj) == expected


# ---------------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------------


class TestFilesystemHelpers:
    async def test_detect_directory(self, tmp_path: Path):
        (tmp_path / "b-hook.sh").write_text("x")
        (tmp_path / "a-dir").mkdir()
        (tmp_path / ".hidden").write_text("x")
        comps = await detect_directory(str(tmp_path), "hook")
        assert [c.name for c in comps] == ["a-dir", "b-hook.sh"]
        assert all(c.type == "hook" for c in comps)
        assert comps[1].path == str(tmp_path / "b-hook.sh")

    async def test_detect_directory_missing(self, tmp_path: Path):
        assert await detect_directory(str(tmp_path / "nope"), "hook") == []

    async def test_detect_directory_expands_tilde(self, fake_home: Path):
        (fake_home / "skills" / "one").mkdir(parents=True)
        comps = await detect_directory("~/skills", "skill")
        assert [c.path for c in comps] == [str(fake_home / "skills" / "one")]

    async def test_list_files(self, tmp_path: Path):
        for name in ("a.json", "b.YAML", "c.txt", ".d.json", "config"):
            (tmp_path / name).write_text("x")
        (tmp_path / "sub.json").mkdir()

        plain = await list_files(str(tmp_path))
        assert [Path(p).name for p in plain] == ["a.json", "b.YAML"]

        hidden = await list_files(str(tmp_path), prefixes=("config",), include_hidden=True)
        assert [Path(p).name for p in hidden] == [".d.json", "a.json", "b.YAML", "config"]

    async def test_read_json(self, tmp_path: Path):
        good = tmp_path / "good.json"
        good.write_text('{"a": 1}')
        bad = tmp_path / "bad.json"
        bad.write_text("{")
        assert await read_json(str(good)) == {"a": 1}
        assert await read_json(str(bad)) is None
        assert await read_json(str(tmp_path / "missing.json")) is None

    async def test_read_extension_metadata(self, tmp_path: Path):
        (tmp_path / "package.json").write_text(
            json.dumps(
                {
                    "version": "1.2.3",
                    "displayName": "Copilot",
                    "description": "AI pair programmer",
                    "publisher": "GitHub",
                }
            )
        )
        meta = await read_extension_metadata(str(tmp_path))
        assert meta is not None
        assert (meta.version, meta.display_name, meta.publisher) == ("1.2.3", "Copilot", "GitHub")
        assert await read_extension_metadata(str(tmp_path / "none")) is None


class TestPathHelpers:
    def test_expand_tilde(self, fake_home: Path):
        assert expand_tilde("~") == str(fake_home)
        assert expand_tilde("~/x/y") == str(fake_home / "x" / "y")
        assert expand_tilde("~other/x") == "~other/x"
        assert expand_tilde("/abs") == "/abs"

    def test_parse_path_env(self, fake_home: Path):
        assert parse_path_env("/usr/bin::/bin: ") == ["/usr/bin", "/bin"]
        assert parse_path_env("~/bin") == [str(fake_home / "bin")]
        assert parse_path_env() == []

    def test_resolve_path_sync(self, tmp_path: Path):
        target = tmp_path / "real.txt"
        target.write_text("x")
        link = tmp_path / "link.txt"
        link.symlink_to(target)
        assert resolve_path_sync(str(link)) == str(target.resolve())
        missing = tmp_path / "missing"
        assert resolve_path_sync(str(missing)) == str(missing)

    def test_safe_path(self, fake_home: Path):
        assert safe_path() == ""
        assert safe_path("~/.claude", "hooks") == str(fake_home / ".claude" / "hooks")


# ---------------------------------------------------------------------------
# Detector contract and registry
# ---------------------------------------------------------------------------


class _Complete(AIToolDetector):
    name = "complete-detector"
    ecosystem = "complete"

    def get_paths(self) -> list[str]:
        return []

    async def check_path(self):
        return []

    async def detect(self) -> DetectionResult:
        return DetectionResult(ecosystem=self.ecosystem)


class _NoDetect:
    name = "half"

    def get_paths(self):
        return []

    async def check_path(self):
        return []


class TestDetectorContract:
    def test_complete_detector_is_valid(self):
        assert is_valid_detector(_Complete())

    def test_missing_parts_are_reported(self):
        assert missing_detector_properties(_NoDetect()) == ["detect (callable)"]
        unnamed = _Complete()
        unnamed.name = ""
        assert missing_detector_properties(unnamed) == ["name (non-empty string)"]

    @pytest.mark.parametrize("obj", [None, "detector", 3, object()])
    def test_non_detectors(self, obj):
        assert not is_valid_detector(obj)

    def test_abstract_base_not_instantiable(self):
        with pytest.raises(TypeError):
            AIToolDetector()  # type: ignore[abstract]


class TestDetectorRegistry:
    @pytest.fixture(autouse=True)
    def _restore_registry(self):
        saved = dict(DetectorRegistry._factories)
        yield
        DetectorRegistry._factories.clear()
        DetectorRegistry._factories.update(saved)

    def test_register_and_clear(self):
        DetectorRegistry.clear()
        DetectorRegistry.register(_Complete)
        DetectorRegistry.register(lambda: _Complete(), name="lambda-detector")
        assert DetectorRegistry.names() == ["complete-detector", "lambda-detector"]
        assert len(DetectorRegistry.get_all()) == 2
        DetectorRegistry.clear()
        assert DetectorRegistry.get_all() == []

    def test_reregistering_replaces(self):
        DetectorRegistry.clear()
        DetectorRegistry.register(_Complete)
        DetectorRegistry.register(_Complete)
        assert DetectorRegistry.names() == ["complete-detector"]
