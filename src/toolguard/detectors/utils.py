# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Helpers shared by ecosystem detectors."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from dataclasses import dataclass

import aiofiles

from toolguard.models.detection import ComponentInfo
from toolguard.utils.paths import expand_tilde, is_symlink, parse_path_env, resolve_path

logger = logging.getLogger("toolguard.detectors.utils")

__all__ = [
    "ECOSYSTEM_ALIASES",
    "ExtensionMetadata",
    "detect_directory",
    "ecosystem_for_detector",
    "expand_tilde",
    "find_executables",
    "is_symlink",
    "list_files",
    "normalize_ecosystem_name",
    "parse_path_env",
    "read_extension_metadata",
    "read_json",
    "resolve_path",
]

ECOSYSTEM_ALIASES: dict[str, str] = {
    "copilot": "github-copilot",
    "claude": "claude-code",
    "gemini": "google-gemini",
    "open-code": "opencode",
}

# Detector name stems whose ecosystem id differs from the stem itself.
_CANONICAL_STEMS: dict[str, str] = {
    "claudecode": "claude-code",
    "copilot": "github-copilot",
    "gemini": "google-gemini",
}

CONFIG_EXTENSIONS: tuple[str, ...] = (".json", ".yaml", ".yml", ".toml", ".ini")


@dataclass(frozen=True)
class ExtensionMetadata:
    version: str | None = None
    display_name: str | None = None
    description: str | None = None
    publisher: str | None = None


def normalize_ecosystem_name(name: str) -> str:
    normalized = name.strip().lower()
    return ECOSYSTEM_ALIASES.get(normalized, normalized)


def ecosystem_for_detector(detector: object) -> str:
    """Return the ecosystem id a detector reports under.

    Uses the detector's ``ecosystem`` attribute when set, otherwise derives
    it from the name (``copilot-detector`` -> ``github-copilot``).
    """
    ecosystem = getattr(detector, "ecosystem", "")
    if isinstance(ecosystem, str) and ecosystem:
        return ecosystem
    stem = str(getattr(detector, "name", "")).removesuffix("-detector")
    return _CANONICAL_STEMS.get(stem, stem)


def _scan_entries(dir_path: str) -> list[os.DirEntry[str]]:
    with os.scandir(dir_path) as it:
        return sorted(it, key=lambda e: e.name)


async def _entries(dir_path: str) -> list[os.DirEntry[str]]:
    try:
        return await asyncio.to_thread(_scan_entries, dir_path)
    except OSError:
        return []


async def detect_directory(dir_path: str, component_type: str) -> list[ComponentInfo]:
    """List the non-hidden entries of *dir_path* as components of one type.

    A missing or unreadable directory yields ``[]``.
    """
    expanded = expand_tilde(dir_path)
    return [
        ComponentInfo(name=entry.name, path=os.path.join(expanded, entry.name), type=component_type)
        for entry in await _entries(expanded)
        if not entry.name.startswith(".")
    ]


async def list_files(
    dir_path: str,
    extensions: tuple[str, ...] = CONFIG_EXTENSIONS,
    prefixes: tuple[str, ...] = (),
    include_hidden: bool = False,
) -> list[str]:
    """Return files directly inside *dir_path* matching an extension or name prefix."""
    matches: list[str] = []
    for entry in await _entries(expand_tilde(dir_path)):
        if not entry.is_file():
            continue
        if entry.name.startswith(".") and not include_hidden:
            continue
        _, ext = os.path.splitext(entry.name)
        if ext.lower() in extensions or (prefixes and entry.name.startswith(prefixes)):
            matches.append(entry.path)
    return matches


async def read_json(path: str) -> object | None:
    """Parse the JSON document at *path*; ``None`` when missing or malformed."""
    try:
        async with aiofiles.open(expand_tilde(path), encoding="utf-8") as fh:
            return json.loads(await fh.read())
    except (OSError, UnicodeDecodeError, ValueError):
        return None


async def read_extension_metadata(extension_path: str) -> ExtensionMetadata | None:
    data = await read_json(os.path.join(extension_path, "package.json"))
    if not isinstance(data, dict):
        return None
    return ExtensionMetadata(
        version=data.get("version"),
        display_name=data.get("displayName"),
        description=data.get("description"),
        publisher=data.get("publisher"),
    )


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


async def find_executables(
    names: tuple[str, ...] = (),
    prefixes: tuple[str, ...] = (),
    first_only: bool = True,
) -> list[ComponentInfo]:
    """Search ``PATH`` for executables named *names* or starting with *prefixes*.

    Symlinks are resolved to their targets. Each executable name is reported
    once, from the earliest ``PATH`` directory holding it.
    """
    components: list[ComponentInfo] = []
    seen: set[str] = set()

    for directory in parse_path_env():
        candidates = [os.path.join(directory, n) for n in names]
        if prefixes:
            candidates += [
                entry.path
                for entry in await _entries(directory)
                if entry.name.startswith(prefixes)
            ]

        for candidate in candidates:
            name = os.path.basename(candidate)
            if name in seen or not await asyncio.to_thread(_is_executable, candidate):
                continue
            seen.add(name)
            path = await resolve_path(candidate) if await is_symlink(candidate) else candidate
            components.append(ComponentInfo(name=name, path=path, type="executable"))
            if first_only:
                return components

    return components
