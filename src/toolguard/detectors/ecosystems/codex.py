# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""OpenAI Codex CLI: ``codex``/``codex-*`` executables and config files."""

from __future__ import annotations

import os

from toolguard.detectors.base import AIToolDetector
from toolguard.detectors.registry import detector
from toolguard.detectors.utils import expand_tilde, find_executables, list_files
from toolguard.models.detection import ComponentInfo, DetectionResult

CONFIG_PREFIXES: tuple[str, ...] = ("config", ".codexrc")


@detector
class CodexDetector(AIToolDetector):
    name = "codex-detector"
    ecosystem = "codex"

    def get_paths(self) -> list[str]:
        return [expand_tilde("~/.codex/"), expand_tilde("~/.config/codex/")]

    async def check_path(self) -> list[ComponentInfo]:
        # Executables are listed, never run.
        return await find_executables(
            names=("codex",), prefixes=("codex-",), first_only=False
        )

    async def detect(self) -> DetectionResult:
        components: dict[str, ComponentInfo] = {}

        for comp in await self.check_path():
            components[f"executable:{comp.name}"] = comp

        for base in self.get_paths():
            for path in await list_files(base, prefixes=CONFIG_PREFIXES, include_hidden=True):
                name = os.path.basename(path)
                components[f"config:{name}"] = ComponentInfo(
                    name=name, path=path, type="config-file"
                )

        return DetectionResult.from_components(self.ecosystem, components, self.get_paths())
