# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Google Gemini Code Assist extensions in VS Code and Cursor."""

from __future__ import annotations

from toolguard.detectors.ecosystems._extensions import EditorExtensionDetector
from toolguard.detectors.registry import detector


@detector
class GeminiDetector(EditorExtensionDetector):
    name = "gemini-detector"
    ecosystem = "google-gemini"
    extension_prefixes = (
        "google.geminicodeassist-",
        "google.cloudcode-",
        "google.gemini-cli-vscode-ide-companion-",
    )
    setting_prefixes = ("geminicodeassist", "cloudcode.gemini")
