# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unix-style path helpers: tilde expansion, symlink resolution, PATH parsing."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path


def home_dir() -> str:
    return str(Path.home())


def expand_tilde(file_path: str) -> str:
    """Expand a leading ``~`` or ``~/`` to the current user's home directory.

    ``~user`` forms are left untouched.
    """
    if file_path == "~":
        return home_dir()
    if file_path.startswith("~/"):
        return os.path.join(home_dir(), file_path[2:])
    return file_path


def resolve_path_sync(file_path: str) -> str:
    """Follow symlinks to the real absolute path.

    Falls back to the expanded absolute path when resolution fails.
    """
    expanded = expand_tilde(file_path)
    try:
        return os.path.realpath(expanded, strict=True)
    except (OSError, RuntimeError):
        return os.path.abspath(expanded)


async def resolve_path(file_path: str) -> str:
    return await asyncio.to_thread(resolve_path_sync, file_path)


async def is_symlink(file_path: str) -> bool:
    try:
        return await asyncio.to_thread(os.path.islink, file_path)
    except OSError:
        return False


def parse_path_env(path_env: str | None = None) -> list[str]:
    """Split ``PATH`` into absolute directories, dropping empty entries."""
    raw = os.environ.get("PATH", "") if path_env is None else path_env
    return [
        os.path.abspath(expand_tilde(p.strip()))
        for p in raw.split(os.pathsep)
        if p.strip()
    ]


def safe_path(*segments: str) -> str:
    if not segments:
        return ""
    first, *rest = segments
    return os.path.join(expand_tilde(first), *rest)
