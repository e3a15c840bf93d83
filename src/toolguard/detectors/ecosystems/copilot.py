# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""GitHub Copilot extensions in VS Code and Cursor."""

from __future__ import annotations

from toolguard.detectors.ecosystems._extensions import EditorExtensionDetector
from toolguard.detectors.registry import detector


@detector
class CopilotDetector(EditorExtensionDetector):
    name = "copilot-detector"
    ecosystem = "github-copilot"
    extension_prefixes = ("github.copilot-",)
    setting_prefixes = ("github.copilot",)
