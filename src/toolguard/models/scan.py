# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-directory scan summary models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from toolguard.core.constants import FileErrorKind
from toolguard.models.finding import ScanResult


class FileError(BaseModel):
    """A file that could not be scanned, and why."""

    file_path: str
    kind: FileErrorKind
    message: str


class ScanStats(BaseModel):
    files_scanned: int = 0
    files_skipped: int = 0
    binary_files_skipped: int = 0
    large_files_skipped: int = 0
    permission_errors: int = 0

    @property
    def files_considered(self) -> int:
        return self.files_scanned + self.files_skipped


class ScanSummary(BaseModel):
    """Outcome of scanning one directory tree.

    ``results`` only holds files with at least one match; clean files are
    reflected in ``stats.files_scanned`` alone.
    """

    root: str = ""
    results: list[ScanResult] = Field(default_factory=list)
    errors: list[FileError] = Field(default_factory=list)
    stats: ScanStats = Field(default_factory=ScanStats)

    @property
    def total_issues(self) -> int:
        return sum(r.issue_count for r in self.results)

    @property
    def error_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for err in self.errors:
            counts[err.kind] = counts.get(err.kind, 0) + 1
        return counts
