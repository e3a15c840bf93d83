# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Indicator pattern definition."""

from __future__ import annotations

import re
from dataclasses import dataclass

from toolguard.core.constants import PatternCategory, Severity


@dataclass(frozen=True)
class PatternDefinition:
    """A named indicator-of-compromise rule tested against single lines."""

    id: str
    category: PatternCategory
    severity: Severity
    pattern: re.Pattern[str]
    description: str

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None
