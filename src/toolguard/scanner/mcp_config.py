# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structural analysis of MCP server configuration files.

Line patterns only see one line of JSON at a time. Parsing the
``{"mcpServers": {...}}`` document lets us check each server as a whole:
injection characters in stdio arguments, raw IP endpoints, and credential
names in the server environment.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Literal

import aiofiles
from pydantic import BaseModel, Field

from toolguard.core.constants import MAX_MATCH_LENGTH
from toolguard.models.finding import ScanMatch, ScanResult
from toolguard.rules.patterns.mcp import SENSITIVE_ENV_KEYS
from toolguard.rules.registry import PatternRegistry
from toolguard.scanner.file_scanner import Scanner
from toolguard.scanner.matcher import split_lines

logger = logging.getLogger("toolguard.scanner.mcp_config")

_INJECTION_CHARS = re.compile(r"\$\{|`|\||;|&&")
_IP_URL = re.compile(r"https?://\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII)
_SENSITIVE_KEY = re.compile(SENSITIVE_ENV_KEYS, re.IGNORECASE)


class MCPServer(BaseModel):
    name: str
    type: Literal["stdio", "http", "sse"] = "stdio"
    command: str | None = None
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    url: str | None = None


def parse_mcp_servers(content: str) -> list[MCPServer]:
    """Parse MCP server entries from JSON text; invalid documents yield ``[]``."""
    try:
        config = json.loads(content)
    except ValueError:
        return []

    entries = config.get("mcpServers") if isinstance(config, dict) else None
    if not isinstance(entries, dict):
        return []

    servers: list[MCPServer] = []
    for name, raw in entries.items():
        if not isinstance(raw, dict):
            continue
        url = raw.get("url")
        server_type = "stdio"
        if url:
            server_type = "sse" if raw.get("transport") == "sse" else "http"
        args = raw.get("args")
        env = raw.get("env")
        servers.append(
            MCPServer(
                name=name,
                type=server_type,
                command=raw.get("command") if isinstance(raw.get("command"), str) else None,
                args=[str(a) for a in args] if isinstance(args, list) else [],
                env={str(k): str(v) for k, v in env.items()} if isinstance(env, dict) else {},
                url=url if isinstance(url, str) else None,
            )
        )
    return servers


async def extract_mcp_servers(path: str) -> list[MCPServer]:
    """Read *path* and return its MCP servers; missing or invalid files yield ``[]``."""
    try:
        async with aiofiles.open(path, encoding="utf-8") as fh:
            content = await fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read MCP config %s: %s", path, exc)
        return []
    return parse_mcp_servers(content)


def _declaration_line(lines: list[str], server_name: str) -> int:
    needle = json.dumps(server_name)
    for index, line in enumerate(lines):
        if needle in line:
            return index + 1
    return 1


def _structural_match(
    pattern_id: str,
    description: str,
    matched_text: str,
    line: int,
    lines: list[str],
) -> ScanMatch:
    definition = PatternRegistry.find(pattern_id)
    if definition is None:
        raise LookupError(f"Pattern {pattern_id} is not registered")
    index = line - 1
    return ScanMatch(
        id=pattern_id,
        category=definition.category,
        severity=definition.severity,
        description=description,
        line=line,
        matched_text=matched_text.strip()[:MAX_MATCH_LENGTH],
        context_before=lines[max(0, index - 2):index],
        context_after=lines[index + 1:index + 3],
    )


def analyze_servers(servers: list[MCPServer], content: str) -> list[ScanMatch]:
    lines = split_lines(content)
    matches: list[ScanMatch] = []

    for server in servers:
        line = _declaration_line(lines, server.name)

        if server.type == "stdio":
            for arg in server.args:
                if _INJECTION_CHARS.search(arg):
                    matches.append(
                        _structural_match(
                            "MCP_COMMAND_INJECTION",
                            f'MCP server "{server.name}" has potentially unsafe '
                            f"command argument: {arg}",
                            f"args: [{', '.join(server.args)}]",
                            line,
                            lines,
                        )
                    )

        if server.url and _IP_URL.search(server.url):
            matches.append(
                _structural_match(
                    "MCP_HTTP_EXFIL",
                    f'MCP server "{server.name}" connects to hardcoded IP: {server.url}',
                    f"url: {server.url}",
                    line,
                    lines,
                )
            )

        sensitive = [key for key in server.env if _SENSITIVE_KEY.search(key)]
        if sensitive:
            matches.append(
                _structural_match(
                    "MCP_ENV_DANGER",
                    f'MCP server "{server.name}" exposes sensitive environment '
                    f"variables: {', '.join(sensitive)}",
                    f"env: {{ {', '.join(sensitive)} }}",
                    line,
                    lines,
                )
            )

    return matches


async def scan_mcp_config(scanner: Scanner, path: str) -> ScanResult:
    """Run *scanner* over an MCP config file and append structural findings.

    Unlike directory scans, read errors propagate to the caller.
    """
    async with aiofiles.open(path, encoding="utf-8") as fh:
        content = await fh.read()

    result = scanner.scan_file(path, content)
    extra = analyze_servers(parse_mcp_servers(content), content)
    if not extra:
        return result
    return ScanResult(file_path=path, matches=[*result.matches, *extra])
