# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Aggregated scan report models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from toolguard.models.finding import ScanResult


class EcosystemReport(BaseModel):
    """Scan results for every component of one ecosystem that produced matches."""

    model_config = ConfigDict(frozen=True)

    ecosystem: str
    component_scans: dict[str, list[ScanResult]] = Field(default_factory=dict)
    total_issues: int = 0


class ScanReport(BaseModel):
    """Terminal artifact of one orchestrated detect-and-scan run."""

    model_config = ConfigDict(frozen=True)

    ecosystem_reports: dict[str, EcosystemReport] = Field(default_factory=dict)
    total_issues: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def severity_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for report in self.ecosystem_reports.values():
            for results in report.component_scans.values():
                for result in results:
                    for match in result.matches:
                        counts[match.severity] = counts.get(match.severity, 0) + 1
        return counts
