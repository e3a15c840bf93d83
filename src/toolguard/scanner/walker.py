# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Depth-bounded directory enumeration with symlink-loop protection."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from toolguard.core.constants import EXCLUDED_DIRS, WALK_MAX_DEPTH
from toolguard.utils.paths import expand_tilde

logger = logging.getLogger("toolguard.scanner.walker")

WalkErrorType = Literal["permission", "symlink-loop", "other"]


@dataclass
class WalkError:
    path: str
    type: WalkErrorType
    message: str


@dataclass
class WalkResult:
    files: list[str] = field(default_factory=list)
    errors: list[WalkError] = field(default_factory=list)


def _wants(name: str, extensions: Sequence[str]) -> bool:
    if not extensions or "*" in extensions:
        return True
    return name.endswith(tuple(extensions))


def _is_excluded(name: str) -> bool:
    return name in EXCLUDED_DIRS or name.startswith(".")


def walk_directory_sync(
    root: str,
    extensions: Sequence[str],
    max_depth: int = WALK_MAX_DEPTH,
) -> WalkResult:
    """Collect files under *root* whose names end with one of *extensions*.

    Paths are returned as found under the expanded root (not resolved), in
    sorted order per directory, so symlinked files keep the name the user
    knows them by. Build, VCS and dot-directories below the root are skipped.
    """
    result = WalkResult()
    expanded = os.path.abspath(expand_tilde(root))

    try:
        real_root = os.path.realpath(expanded)
    except OSError as exc:
        result.errors.append(WalkError(expanded, "permission", str(exc)))
        return result

    if os.path.isfile(real_root):
        if _wants(expanded, extensions):
            result.files.append(expanded)
        return result

    if not os.path.isdir(real_root):
        result.errors.append(WalkError(expanded, "other", "No such directory"))
        return result

    if not os.access(real_root, os.R_OK):
        result.errors.append(WalkError(expanded, "permission", "Directory not readable"))
        return result

    visited: set[str] = {real_root}
    stack: list[tuple[str, int]] = [(expanded, 0)]

    while stack:
        directory, depth = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as exc:
            result.errors.append(WalkError(directory, "permission", str(exc)))
            continue
        except OSError as exc:
            result.errors.append(WalkError(directory, "other", str(exc)))
            continue

        subdirs: list[str] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    if _is_excluded(entry.name) or depth + 1 > max_depth:
                        continue
                    real = os.path.realpath(entry.path)
                    if real in visited:
                        result.errors.append(
                            WalkError(entry.path, "symlink-loop", "Symlink loop detected")
                        )
                        continue
                    visited.add(real)
                    subdirs.append(entry.path)
                elif _wants(entry.name, extensions):
                    result.files.append(entry.path)
            except OSError as exc:
                result.errors.append(WalkError(entry.path, "permission", str(exc)))

        # Reverse so the stack pops subdirectories in name order.
        stack.extend((d, depth + 1) for d in reversed(subdirs))

    return result


async def walk_directory_with_errors(
    root: str,
    extensions: Sequence[str],
    max_depth: int = WALK_MAX_DEPTH,
) -> WalkResult:
    return await asyncio.to_thread(walk_directory_sync, root, extensions, max_depth)


async def walk_directory(
    root: str,
    extensions: Sequence[str],
    max_depth: int = WALK_MAX_DEPTH,
) -> list[str]:
    """Return candidate files under *root*, logging walk errors as warnings."""
    result = await walk_directory_with_errors(root, extensions, max_depth)

    for error in result.errors:
        if error.type == "permission":
            logger.warning("Permission denied: %s", error.path)
        elif error.type == "symlink-loop":
            logger.warning("Symlink loop detected: %s", error.path)
        else:
            logger.warning("Error accessing %s: %s", error.path, error.message)

    return result.files
