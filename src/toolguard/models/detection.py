# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Ecosystem detection models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from toolguard.core.constants import FailureKind


class ComponentInfo(BaseModel):
    """One discovered unit of installed tool surface (plugin, hook, skill, ...)."""

    name: str
    path: str
    type: str | None = None


class DetectionResult(BaseModel):
    """What a single detector found for its ecosystem.

    Component keys are conventionally ``<type>:<name>``.
    """

    ecosystem: str
    found: bool = False
    components: dict[str, ComponentInfo] = Field(default_factory=dict)
    scan_paths: list[str] = Field(default_factory=list)

    @classmethod
    def from_components(
        cls,
        ecosystem: str,
        components: dict[str, ComponentInfo],
        scan_paths: list[str],
    ) -> DetectionResult:
        return cls(
            ecosystem=ecosystem,
            found=len(components) > 0,
            components=components,
            scan_paths=scan_paths,
        )


class DetectorFailure(BaseModel):
    detector_name: str
    error: str
    kind: FailureKind


class DetectionSummary(BaseModel):
    """Results of one ``detect_all`` run together with its failures."""

    results: dict[str, DetectionResult] = Field(default_factory=dict)
    failures: list[DetectorFailure] = Field(default_factory=list)

    @property
    def failure_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for failure in self.failures:
            counts[failure.kind] = counts.get(failure.kind, 0) + 1
        return counts
