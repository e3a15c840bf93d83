# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Indicator match models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from toolguard.core.constants import MAX_MATCH_LENGTH, PatternCategory, Severity


class ScanMatch(BaseModel):
    """A single indicator pattern hit on one line of one file."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Pattern that triggered this match, e.g. CURL_BASH")
    category: PatternCategory
    severity: Severity
    description: str
    line: int = Field(ge=1, description="1-based line number")
    matched_text: str = Field(default="", max_length=MAX_MATCH_LENGTH)
    context_before: list[str] = Field(default_factory=list, max_length=2)
    context_after: list[str] = Field(default_factory=list, max_length=2)


class ScanResult(BaseModel):
    """All matches found in one file."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    matches: list[ScanMatch] = Field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.matches)
