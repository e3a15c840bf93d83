# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan every component of every detected ecosystem and roll up the totals."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from toolguard.core.config import Settings
from toolguard.core.constants import PatternSet
from toolguard.models.detection import DetectionResult
from toolguard.models.finding import ScanResult
from toolguard.models.report import EcosystemReport, ScanReport
from toolguard.scanner.file_scanner import Scanner
from toolguard.scanner.selector import get_scanner, map_component_type, pattern_set_for

logger = logging.getLogger("toolguard.autodetect.aggregator")


async def scan_detected(
    detection_results: Mapping[str, DetectionResult],
    settings: Settings | None = None,
) -> ScanReport:
    """Scan the components in *detection_results* and build a :class:`ScanReport`.

    Components are scanned one at a time. A component that produces no
    matches is left out of ``component_scans``; a component whose scan raises
    is logged and skipped without affecting the rest of the run.
    """
    ecosystem_reports: dict[str, EcosystemReport] = {}
    scanners: dict[PatternSet, Scanner] = {}
    total_issues = 0

    for ecosystem, detection in detection_results.items():
        component_scans: dict[str, list[ScanResult]] = {}
        ecosystem_issues = 0

        for key, component in detection.components.items():
            try:
                pattern_set = pattern_set_for(map_component_type(component.type), component.path)
                scanner = scanners.get(pattern_set)
                if scanner is None:
                    scanner = scanners[pattern_set] = get_scanner(pattern_set, settings)
                results = await scanner.scan_directory(component.path)
            except Exception as exc:
                logger.warning("Failed to scan component %s: %s", key, exc)
                continue

            if not results:
                continue
            component_scans[key] = results
            ecosystem_issues += sum(r.issue_count for r in results)

        ecosystem_reports[ecosystem] = EcosystemReport(
            ecosystem=ecosystem,
            component_scans=component_scans,
            total_issues=ecosystem_issues,
        )
        total_issues += ecosystem_issues

    logger.info(
        "Scanned %d ecosystems: %d issues", len(ecosystem_reports), total_issues
    )
    return ScanReport(ecosystem_reports=ecosystem_reports, total_issues=total_issues)
