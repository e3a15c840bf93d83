# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract base class for ecosystem detectors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from toolguard.models.detection import ComponentInfo, DetectionResult

_REQUIRED_METHODS = ("detect", "get_paths", "check_path")


class AIToolDetector(ABC):
    """Finds one AI tool's installation and the components worth scanning.

    Subclasses set ``name`` (unique, conventionally ``<tool>-detector``) and
    ``ecosystem`` (the canonical ecosystem id users filter on).
    """

    name: str = ""
    ecosystem: str = ""

    @abstractmethod
    def get_paths(self) -> list[str]:
        """Locations this detector inspects."""
        ...

    @abstractmethod
    async def check_path(self) -> list[ComponentInfo]:
        """Look for the tool's executables on ``PATH``."""
        ...

    @abstractmethod
    async def detect(self) -> DetectionResult:
        ...


def missing_detector_properties(obj: object) -> list[str]:
    """Describe which parts of the detector contract *obj* lacks."""
    if obj is None or isinstance(obj, (str, bytes, int, float, bool)):
        return ["not a detector object"]

    missing: list[str] = []
    name = getattr(obj, "name", None)
    if not isinstance(name, str) or not name:
        missing.append("name (non-empty string)")
    for method in _REQUIRED_METHODS:
        if not callable(getattr(obj, method, None)):
            missing.append(f"{method} (callable)")
    return missing


def is_valid_detector(obj: object) -> bool:
    return not missing_detector_properties(obj)
