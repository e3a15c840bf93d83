# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for toolguard."""

from toolguard.models.detection import (
    ComponentInfo,
    DetectionResult,
    DetectionSummary,
    DetectorFailure,
)
from toolguard.models.finding import ScanMatch, ScanResult
from toolguard.models.report import EcosystemReport, ScanReport
from toolguard.models.scan import FileError, ScanStats, ScanSummary

__all__ = [
    "ComponentInfo",
    "DetectionResult",
    "DetectionSummary",
    "DetectorFailure",
    "EcosystemReport",
    "FileError",
    "ScanMatch",
    "ScanReport",
    "ScanResult",
    "ScanStats",
    "ScanSummary",
]
