# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pattern registration and lookup."""

from __future__ import annotations

from toolguard.core.constants import PatternSet
from toolguard.core.exceptions import RegistryError
from toolguard.rules.definition import PatternDefinition


class PatternRegistry:
    """Central, append-only catalog of indicator patterns grouped by set.

    Registration order is preserved and is the order in which patterns are
    tested against each line.
    """

    _sets: dict[PatternSet, list[PatternDefinition]] = {}

    @classmethod
    def register(
        cls, pattern_set: PatternSet, *definitions: PatternDefinition
    ) -> None:
        existing = {d.id for bucket in cls._sets.values() for d in bucket}
        bucket = cls._sets.setdefault(pattern_set, [])
        for definition in definitions:
            if definition.id in existing:
                raise RegistryError(
                    f"Pattern {definition.id} already registered for {pattern_set}"
                )
            existing.add(definition.id)
            bucket.append(definition)

    @classmethod
    def get(cls, pattern_set: PatternSet) -> tuple[PatternDefinition, ...]:
        """Return only the patterns registered directly on *pattern_set*."""
        return tuple(cls._sets.get(pattern_set, ()))

    @classmethod
    def resolve(cls, pattern_set: PatternSet) -> tuple[PatternDefinition, ...]:
        """Return the active patterns for *pattern_set*: base first, then extensions."""
        base = cls.get(PatternSet.BASE)
        if pattern_set is PatternSet.BASE:
            return base
        return base + cls.get(pattern_set)

    @classmethod
    def all_sets(cls) -> dict[PatternSet, tuple[PatternDefinition, ...]]:
        return {s: cls.get(s) for s in PatternSet}

    @classmethod
    def find(cls, pattern_id: str) -> PatternDefinition | None:
        for definitions in cls._sets.values():
            for definition in definitions:
                if definition.id == pattern_id:
                    return definition
        return None
