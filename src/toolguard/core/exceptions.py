# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for toolguard."""

from __future__ import annotations


class ToolguardError(Exception):
    """Base exception for all toolguard errors."""


class ConfigurationError(ToolguardError):
    """Invalid or missing configuration."""


class RegistryError(ToolguardError):
    """A pattern definition conflicts with one already registered."""


class ScanError(ToolguardError):
    """Error during scan execution."""


class DetectorError(ToolguardError):
    """Error raised by an ecosystem detector."""


class DetectorLoadError(DetectorError):
    """A detector could not be instantiated."""


class InvalidEcosystemError(ToolguardError):
    """The requested ecosystem does not match any loaded detector."""

    def __init__(
        self,
        name: str,
        suggestions: list[str],
        available: list[str],
    ) -> None:
        self.name = name
        self.suggestions = suggestions
        self.available = available

        message = f'Invalid ecosystem name: "{name}"'
        if suggestions:
            message += f"\n\nDid you mean: {', '.join(suggestions)}?"
        message += f"\n\nAvailable ecosystems: {', '.join(available)}"
        super().__init__(message)
