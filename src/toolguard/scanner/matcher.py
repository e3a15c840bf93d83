# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Line-oriented indicator matching."""

from __future__ import annotations

from collections.abc import Sequence

from toolguard.core.constants import CONTEXT_LINES, MAX_MATCH_LENGTH
from toolguard.models.finding import ScanMatch, ScanResult
from toolguard.rules.definition import PatternDefinition


def split_lines(content: str) -> list[str]:
    r"""Split on ``\n`` only, dropping a trailing ``\r`` from each line.

    Form feeds and Unicode line separators stay inside their line, so line
    numbers agree with the Python tokenizer. A final newline does not start
    an extra empty line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def scan_file(
    file_path: str,
    content: str,
    patterns: Sequence[PatternDefinition],
) -> ScanResult:
    """Test every line of *content* against *patterns*.

    Each pattern is tested at most once per line, so a line yields at most one
    match per pattern. Matches come out in line order and, within a line, in
    pattern order.
    """
    lines = split_lines(content)
    matches: list[ScanMatch] = []

    for index, line in enumerate(lines):
        for definition in patterns:
            if not definition.matches(line):
                continue
            matches.append(
                ScanMatch(
                    id=definition.id,
                    category=definition.category,
                    severity=definition.severity,
                    description=definition.description,
                    line=index + 1,
                    matched_text=line.strip()[:MAX_MATCH_LENGTH],
                    context_before=lines[max(0, index - CONTEXT_LINES):index],
                    context_after=lines[index + 1:index + 1 + CONTEXT_LINES],
                )
            )

    return ScanResult(file_path=file_path, matches=matches)
