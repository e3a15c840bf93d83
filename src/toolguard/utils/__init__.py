# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Path and string helpers shared by scanners and detectors."""
