# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Claude Code: CLI on PATH, plugins, skills, hooks, and MCP servers under ~/.claude."""

from __future__ import annotations

from toolguard.detectors.base import AIToolDetector
from toolguard.detectors.registry import detector
from toolguard.detectors.utils import (
    detect_directory,
    expand_tilde,
    find_executables,
    read_json,
)
from toolguard.models.detection import ComponentInfo, DetectionResult

COMPONENT_DIRS: tuple[tuple[str, str], ...] = (
    ("~/.claude/plugins", "plugin"),
    ("~/.claude/skills", "skill"),
    ("~/.claude/hooks", "hook"),
)
MCP_CONFIG = "~/.claude/mcp.json"


@detector
class ClaudeCodeDetector(AIToolDetector):
    name = "claude-code-detector"
    ecosystem = "claude-code"

    def get_paths(self) -> list[str]:
        return [expand_tilde("~/.claude/"), expand_tilde("~/.config/claude/")]

    async def check_path(self) -> list[ComponentInfo]:
        return await find_executables(names=("claude",))

    async def detect(self) -> DetectionResult:
        components: dict[str, ComponentInfo] = {}

        for comp in await self.check_path():
            components[f"executable:{comp.name}"] = comp

        for dir_path, component_type in COMPONENT_DIRS:
            for comp in await detect_directory(dir_path, component_type):
                components[f"{component_type}:{comp.name}"] = comp

        for comp in await self._mcp_servers(expand_tilde(MCP_CONFIG)):
            components[f"mcp-server:{comp.name}"] = comp

        return DetectionResult.from_components(self.ecosystem, components, self.get_paths())

    @staticmethod
    async def _mcp_servers(config_path: str) -> list[ComponentInfo]:
        config = await read_json(config_path)
        if not isinstance(config, dict) or not isinstance(config.get("mcpServers"), dict):
            return []
        return [
            ComponentInfo(name=server, path=config_path, type="mcp-server")
            for server in config["mcpServers"]
        ]
