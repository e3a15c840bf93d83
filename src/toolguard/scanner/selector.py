# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Choose the pattern set (and scanner) for a component file."""

from __future__ import annotations

import toolguard.rules.patterns  # noqa: F401  (registers the built-in sets)
from toolguard.core.config import Settings
from toolguard.core.constants import PatternSet, ScannerType
from toolguard.rules.registry import PatternRegistry
from toolguard.scanner.file_scanner import Scanner

_SCANNER_SETS: dict[ScannerType, PatternSet] = {
    ScannerType.MCP_SERVER: PatternSet.MCP,
    ScannerType.HOOK: PatternSet.HOOK,
    ScannerType.SKILL: PatternSet.SKILL,
    ScannerType.CONFIG: PatternSet.CONFIG,
}

_scanners: dict[PatternSet, Scanner] = {}


def get_scanner(pattern_set: PatternSet, settings: Settings | None = None) -> Scanner:
    """Return the shared scanner for *pattern_set*.

    Scanners hold no per-scan state, so one instance per set is reused. Passing
    *settings* builds a fresh, uncached scanner.
    """
    if settings is not None:
        return Scanner(PatternRegistry.resolve(pattern_set), pattern_set, settings=settings)
    scanner = _scanners.get(pattern_set)
    if scanner is None:
        scanner = Scanner(PatternRegistry.resolve(pattern_set), pattern_set)
        _scanners[pattern_set] = scanner
    return scanner


def reset_scanners() -> None:
    """Drop cached scanners (useful for testing)."""
    _scanners.clear()


def map_component_type(type_str: str | None) -> ScannerType:
    """Map a detector's component type string onto a scanner type."""
    if not type_str:
        return ScannerType.UNKNOWN
    lowered = type_str.strip().lower()
    if "mcp" in lowered:
        return ScannerType.MCP_SERVER
    if "hook" in lowered:
        return ScannerType.HOOK
    if "skill" in lowered or "agent" in lowered:
        return ScannerType.SKILL
    if "config" in lowered:
        return ScannerType.CONFIG
    return ScannerType.UNKNOWN


def pattern_set_for(component_type: ScannerType, file_path: str) -> PatternSet:
    """Resolve the pattern set for a component.

    An explicit type wins. For ``unknown`` the lower-cased path decides, in
    order: ``mcp``, a ``hooks`` directory, a ``skills`` directory, then a
    ``.json`` suffix or ``config`` anywhere in the path.
    """
    explicit = _SCANNER_SETS.get(ScannerType(component_type))
    if explicit is not None:
        return explicit

    path = file_path.lower()
    if "mcp" in path:
        return PatternSet.MCP
    if "hooks/" in path or "hooks\\" in path:
        return PatternSet.HOOK
    if "skills/" in path or "skills\\" in path:
        return PatternSet.SKILL
    if path.endswith(".json") or "config" in path:
        return PatternSet.CONFIG
    return PatternSet.BASE


def select_scanner(
    component_type: ScannerType | str,
    file_path: str,
    settings: Settings | None = None,
) -> Scanner:
    return get_scanner(pattern_set_for(ScannerType(component_type), file_path), settings)


def create_scanner_for_file(file_path: str, settings: Settings | None = None) -> Scanner:
    return select_scanner(ScannerType.UNKNOWN, file_path, settings)
