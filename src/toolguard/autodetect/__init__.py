# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Ecosystem auto-detection and scanning of detected components."""

from toolguard.autodetect.aggregator import scan_detected
from toolguard.autodetect.orchestrator import AutoDetector, filter_components_by_type

__all__ = ["AutoDetector", "filter_components_by_type", "scan_detected"]
