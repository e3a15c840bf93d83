# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""toolguard - Static security triage for AI-assistant tool installations."""

__version__ = "0.3.0"

from toolguard.sdk import audit, audit_sync, scan_path, scan_path_sync

__all__ = [
    "__version__",
    "audit",
    "audit_sync",
    "scan_path",
    "scan_path_sync",
]
