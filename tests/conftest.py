# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from toolguard.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty directory and clear ``PATH``."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PATH", "")
    return home


@pytest.fixture(autouse=True)
def _reset_scanner_cache():
    """Reset the shared scanner instances between tests."""
    from toolguard.scanner.selector import reset_scanners

    reset_scanners()
    yield
    reset_scanners()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by ``setup_logging`` during a test."""
    yield
    logger = logging.getLogger("toolguard")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
