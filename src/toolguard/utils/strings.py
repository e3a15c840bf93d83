# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Edit-distance helpers for "did you mean" suggestions."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive Levenshtein distance between *a* and *b*."""
    s1, s2 = a.lower(), b.lower()
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def find_closest_matches(
    target: str,
    candidates: Iterable[str],
    max_distance: int = 3,
    max_suggestions: int = 3,
) -> list[str]:
    """Return candidates within *max_distance* of *target*, closest first.

    Ties keep the candidates' original order.
    """
    scored = [(levenshtein_distance(target, c), c) for c in candidates]
    within = [item for item in scored if item[0] <= max_distance]
    within.sort(key=lambda item: item[0])
    return [c for _, c in within[:max_suggestions]]
