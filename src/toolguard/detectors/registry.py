# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Detector registration."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

DetectorFactory = Callable[[], object]


class DetectorRegistry:
    """Central registry of detector factories, in registration order."""

    _factories: dict[str, DetectorFactory] = {}

    @classmethod
    def register(cls, factory: T, name: str | None = None) -> T:
        key = name or getattr(factory, "name", None) or getattr(factory, "__name__", "")
        cls._factories[key] = factory  # type: ignore[assignment]
        return factory

    @classmethod
    def get_all(cls) -> list[DetectorFactory]:
        return list(cls._factories.values())

    @classmethod
    def names(cls) -> list[str]:
        return list(cls._factories)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered detectors (for testing)."""
        cls._factories.clear()


def detector(cls: type[T]) -> type[T]:
    """Decorator to register a detector class."""
    return DetectorRegistry.register(cls)
