# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Detection orchestrator: load detectors, run them concurrently, filter results."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping

import toolguard.detectors.ecosystems.claude_code
import toolguard.detectors.ecosystems.codex
import toolguard.detectors.ecosystems.copilot
import toolguard.detectors.ecosystems.gemini
import toolguard.detectors.ecosystems.opencode  # noqa: F401
from toolguard.autodetect.aggregator import scan_detected
from toolguard.core.config import Settings, get_settings
from toolguard.core.constants import FailureKind
from toolguard.core.exceptions import InvalidEcosystemError
from toolguard.detectors.base import AIToolDetector, is_valid_detector, missing_detector_properties
from toolguard.detectors.registry import DetectorRegistry
from toolguard.detectors.utils import (
    ECOSYSTEM_ALIASES,
    ecosystem_for_detector,
    normalize_ecosystem_name,
)
from toolguard.models.detection import (
    ComponentInfo,
    DetectionResult,
    DetectionSummary,
    DetectorFailure,
)
from toolguard.models.report import ScanReport
from toolguard.utils.strings import find_closest_matches

logger = logging.getLogger("toolguard.autodetect.orchestrator")


def _factory_name(factory: Callable[[], object]) -> str:
    name = getattr(factory, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(factory, "__name__", repr(factory))


def filter_components_by_type(
    components: Mapping[str, ComponentInfo],
    type_filter: str,
) -> dict[str, ComponentInfo]:
    """Keep components whose type contains *type_filter* or whose key starts with ``<filter>:``.

    A trailing ``s`` is folded so ``hooks`` selects ``hook`` components.
    """
    wanted = type_filter.strip().lower()
    forms = [wanted]
    if wanted.endswith("s"):
        forms.append(wanted[:-1])

    filtered: dict[str, ComponentInfo] = {}
    for key, component in components.items():
        component_type = (component.type or "").lower()
        lowered_key = key.lower()
        for form in forms:
            if (component_type and form in component_type) or lowered_key.startswith(f"{form}:"):
                filtered[key] = component
                break
    return filtered


class AutoDetector:
    """Runs every registered ecosystem detector and collects what they find.

    Typical usage::

        auto = AutoDetector()
        summary = await auto.detect_all(ecosystem_filter="claude")
        report = await auto.scan_detected(summary.results)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        factories: Iterable[Callable[[], object]] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._factories = list(factories) if factories is not None else DetectorRegistry.get_all()
        self._detectors: list[AIToolDetector] = []
        self._load_failures: list[DetectorFailure] = []
        self._loaded = False

    # -- loading -----------------------------------------------------------

    def load_detectors(self) -> list[DetectorFailure]:
        """Instantiate every detector factory.

        Factories that raise become ``load-error`` failures; objects that do
        not satisfy the detector contract are logged and skipped.
        """
        detectors: list[AIToolDetector] = []
        failures: list[DetectorFailure] = []

        for factory in self._factories:
            name = _factory_name(factory)
            try:
                candidate = factory()
            except Exception as exc:
                logger.warning("Failed to load detector %s: %s", name, exc)
                failures.append(
                    DetectorFailure(detector_name=name, error=str(exc), kind=FailureKind.LOAD_ERROR)
                )
                continue

            if not is_valid_detector(candidate):
                logger.warning(
                    "Detector %s does not implement the detector interface "
                    "(missing: %s); skipping",
                    name,
                    ", ".join(missing_detector_properties(candidate)),
                )
                continue
            detectors.append(candidate)  # type: ignore[arg-type]

        self._detectors = detectors
        self._load_failures = failures
        self._loaded = True
        logger.info("Loaded %d detectors", len(detectors))
        return list(failures)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load_detectors()

    @property
    def detector_names(self) -> list[str]:
        self._ensure_loaded()
        return [d.name for d in self._detectors]

    @property
    def detector_count(self) -> int:
        self._ensure_loaded()
        return len(self._detectors)

    def ecosystem_detectors(self) -> list[tuple[str, str]]:
        """Return ``(ecosystem, detector name)`` for every loaded detector."""
        self._ensure_loaded()
        return [(ecosystem_for_detector(d), d.name) for d in self._detectors]

    def available_ecosystems(self) -> list[str]:
        self._ensure_loaded()
        ecosystems: list[str] = []
        for det in self._detectors:
            ecosystem = ecosystem_for_detector(det)
            if ecosystem not in ecosystems:
                ecosystems.append(ecosystem)
        return ecosystems

    # -- detection ---------------------------------------------------------

    def _select(self, ecosystem_filter: str | None) -> list[AIToolDetector]:
        if not ecosystem_filter or not ecosystem_filter.strip():
            return list(self._detectors)

        available = self.available_ecosystems()
        normalized = normalize_ecosystem_name(ecosystem_filter)
        if normalized not in available:
            raise InvalidEcosystemError(
                ecosystem_filter, self._suggest(ecosystem_filter.strip(), available), available
            )
        return [d for d in self._detectors if ecosystem_for_detector(d) == normalized]

    def _suggest(self, name: str, available: list[str]) -> list[str]:
        candidates = available + [
            alias for alias, target in ECOSYSTEM_ALIASES.items() if target in available
        ]
        closest = find_closest_matches(
            name,
            candidates,
            max_distance=self._settings.suggestion_max_distance,
            max_suggestions=self._settings.suggestion_limit,
        )
        suggestions: list[str] = []
        for match in closest:
            canonical = ECOSYSTEM_ALIASES.get(match, match)
            if canonical not in suggestions:
                suggestions.append(canonical)
        return suggestions

    async def _run_detector_with_timeout(
        self, det: AIToolDetector
    ) -> DetectionResult | DetectorFailure:
        timeout = self._settings.detector_timeout
        try:
            return await asyncio.wait_for(det.detect(), timeout=timeout)
        except TimeoutError:
            message = f"Detector {det.name} timed out after {timeout:g}s"
            logger.warning(message)
            return DetectorFailure(detector_name=det.name, error=message, kind=FailureKind.TIMEOUT)
        except Exception as exc:
            logger.warning("Detector %s failed: %s", det.name, exc)
            return DetectorFailure(detector_name=det.name, error=str(exc), kind=FailureKind.ERROR)

    async def detect_all(
        self,
        ecosystem_filter: str | None = None,
        component_type_filter: str | None = None,
    ) -> DetectionSummary:
        """Run the selected detectors concurrently.

        Only results that found something are kept, keyed by ecosystem. A
        component-type filter that leaves a result empty drops that result.
        Raises :class:`InvalidEcosystemError` for an unknown ecosystem;
        individual detector errors and timeouts are reported as failures.
        """
        self._ensure_loaded()
        selected = self._select(ecosystem_filter)

        outcomes = await asyncio.gather(
            *(self._run_detector_with_timeout(d) for d in selected)
        )

        results: dict[str, DetectionResult] = {}
        failures: list[DetectorFailure] = list(self._load_failures)

        for outcome in outcomes:
            if isinstance(outcome, DetectorFailure):
                failures.append(outcome)
                continue
            if not outcome.found:
                continue
            if component_type_filter:
                components = filter_components_by_type(outcome.components, component_type_filter)
                if not components:
                    continue
                outcome = outcome.model_copy(update={"components": components})
            results[outcome.ecosystem] = outcome

        return DetectionSummary(results=results, failures=failures)

    async def scan_detected(self, results: Mapping[str, DetectionResult]) -> ScanReport:
        return await scan_detected(results, self._settings)
