# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared logic for detectors that look at VS Code / Cursor extensions."""

from __future__ import annotations

import asyncio
import os
import re

from toolguard.detectors.base import AIToolDetector
from toolguard.detectors.utils import expand_tilde, read_extension_metadata, read_json
from toolguard.models.detection import ComponentInfo, DetectionResult

VSCODE_SETTINGS = "~/.config/Code/User/settings.json"
_VERSIONED_DIR = re.compile(r"^(?P<name>[a-z0-9]+\.[a-z0-9-]+?)-(?P<version>\d.*)$", re.IGNORECASE)


def _extension_dirs(extensions_path: str, prefixes: tuple[str, ...]) -> list[tuple[str, str]]:
    try:
        with os.scandir(extensions_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return []
    return [(e.name, e.path) for e in entries if e.is_dir() and e.name.startswith(prefixes)]


class EditorExtensionDetector(AIToolDetector):
    """Detects an assistant shipped as an editor extension.

    Subclasses provide the extension directory prefixes and the settings key
    prefixes that belong to the assistant.
    """

    extension_prefixes: tuple[str, ...] = ()
    setting_prefixes: tuple[str, ...] = ()

    def get_paths(self) -> list[str]:
        return [expand_tilde("~/.vscode/extensions/"), expand_tilde("~/.cursor/extensions/")]

    async def check_path(self) -> list[ComponentInfo]:
        return []

    async def detect(self) -> DetectionResult:
        components: dict[str, ComponentInfo] = {}
        paths = self.get_paths()

        for extensions_path in paths:
            editor = "vscode" if ".vscode" in extensions_path else "cursor"
            for comp in await self._extensions(extensions_path):
                components[f"extension:{editor}:{comp.name}"] = comp

        settings_path = expand_tilde(VSCODE_SETTINGS)
        for comp in await self._settings(settings_path):
            components[f"config:{comp.name}"] = comp

        return DetectionResult.from_components(
            self.ecosystem, components, [*paths, settings_path]
        )

    async def _extensions(self, extensions_path: str) -> list[ComponentInfo]:
        found: list[ComponentInfo] = []
        dirs = await asyncio.to_thread(_extension_dirs, extensions_path, self.extension_prefixes)
        for dir_name, full_path in dirs:
            match = _VERSIONED_DIR.match(dir_name)
            if match is None:
                continue
            name = match.group("name")
            metadata = await read_extension_metadata(full_path)
            if metadata is not None and metadata.version:
                name = f"{name}@{metadata.version}"
            found.append(ComponentInfo(name=name, path=full_path, type="extension"))
        return found

    async def _settings(self, settings_path: str) -> list[ComponentInfo]:
        settings = await read_json(settings_path)
        if not isinstance(settings, dict):
            return []
        return [
            ComponentInfo(name=key, path=settings_path, type="config-setting")
            for key in settings
            if key.startswith(self.setting_prefixes)
        ]
