# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding toolguard in other tools.

Usage::

    from toolguard import audit_sync, scan_path_sync

    # Scan one directory (blocking)
    summary = scan_path_sync("~/.claude/hooks", component_type="hook")
    print(summary.total_issues, summary.stats.files_scanned)

    # Detect installed tools and scan them (async)
    report = await audit(ecosystem="claude")
"""

from __future__ import annotations

import asyncio
import logging

from toolguard.autodetect.orchestrator import AutoDetector
from toolguard.core.config import Settings, get_settings
from toolguard.core.constants import ScannerType
from toolguard.models.report import ScanReport
from toolguard.models.scan import ScanSummary
from toolguard.scanner.selector import create_scanner_for_file, select_scanner

logger = logging.getLogger("toolguard.sdk")


# ---------------------------------------------------------------------------
# Public async API
# ---------------------------------------------------------------------------


async def scan_path(
    path: str,
    *,
    component_type: ScannerType | str | None = None,
    settings: Settings | None = None,
) -> ScanSummary:
    """Scan a file or directory and return a :class:`ScanSummary`.

    Parameters
    ----------
    path:
        File or directory to scan. A leading ``~`` is expanded.
    component_type:
        Scanner type (``mcpServer``, ``hook``, ``skill``, ``config``).
        When omitted, the pattern set is inferred from *path*.
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    """
    settings = settings or get_settings()
    if component_type:
        scanner = select_scanner(ScannerType(component_type), path, settings)
    else:
        scanner = create_scanner_for_file(path, settings)
    return await scanner.scan_directory_with_summary(path)


async def audit(
    *,
    ecosystem: str | None = None,
    component_type: str | None = None,
    settings: Settings | None = None,
) -> ScanReport:
    """Detect installed AI tools and scan every component found.

    Raises :class:`~toolguard.core.exceptions.InvalidEcosystemError` when
    *ecosystem* does not name a known ecosystem. Detector failures are
    logged and do not abort the audit.
    """
    auto = AutoDetector(settings=settings or get_settings())
    summary = await auto.detect_all(ecosystem, component_type)
    for failure in summary.failures:
        logger.warning(
            "Detector %s failed (%s): %s",
            failure.detector_name,
            failure.kind,
            failure.error,
        )
    return await auto.scan_detected(summary.results)


# ---------------------------------------------------------------------------
# Public sync API
# ---------------------------------------------------------------------------


def scan_path_sync(
    path: str,
    *,
    component_type: ScannerType | str | None = None,
    settings: Settings | None = None,
) -> ScanSummary:
    """Synchronous wrapper around :func:`scan_path`."""
    return asyncio.run(scan_path(path, component_type=component_type, settings=settings))


def audit_sync(
    *,
    ecosystem: str | None = None,
    component_type: str | None = None,
    settings: Settings | None = None,
) -> ScanReport:
    """Synchronous wrapper around :func:`audit`."""
    return asyncio.run(
        audit(ecosystem=ecosystem, component_type=component_type, settings=settings)
    )
