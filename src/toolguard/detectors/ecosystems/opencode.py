# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""OpenCode: CLI on PATH, plugins, and config files."""

from __future__ import annotations

import os

from toolguard.detectors.base import AIToolDetector
from toolguard.detectors.registry import detector
from toolguard.detectors.utils import (
    detect_directory,
    expand_tilde,
    find_executables,
    list_files,
)
from toolguard.models.detection import ComponentInfo, DetectionResult


@detector
class OpenCodeDetector(AIToolDetector):
    name = "opencode-detector"
    ecosystem = "opencode"

    def get_paths(self) -> list[str]:
        return [expand_tilde("~/.config/opencode/"), expand_tilde("~/.opencode/")]

    async def check_path(self) -> list[ComponentInfo]:
        return await find_executables(names=("opencode",))

    async def detect(self) -> DetectionResult:
        components: dict[str, ComponentInfo] = {}

        for comp in await self.check_path():
            components[f"executable:{comp.name}"] = comp

        for base in self.get_paths():
            for comp in await detect_directory(os.path.join(base, "plugins"), "plugin"):
                components[f"plugin:{comp.name}"] = comp
            for path in await list_files(base):
                name = os.path.basename(path)
                components[f"config:{name}"] = ComponentInfo(
                    name=name, path=path, type="config-file"
                )

        return DetectionResult.from_components(self.ecosystem, components, self.get_paths())
