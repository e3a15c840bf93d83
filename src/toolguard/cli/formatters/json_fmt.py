# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from pydantic import BaseModel

from toolguard.core.constants import PatternSet
from toolguard.rules.definition import PatternDefinition


def format_json(model: BaseModel) -> str:
    """Return any result model as a formatted JSON string."""
    return model.model_dump_json(indent=2)


def format_patterns_json(sets: dict[PatternSet, tuple[PatternDefinition, ...]]) -> str:
    data = {
        str(pattern_set): [
            {
                "id": d.id,
                "category": str(d.category),
                "severity": str(d.severity),
                "pattern": d.pattern.pattern,
                "description": d.description,
            }
            for d in definitions
        ]
        for pattern_set, definitions in sets.items()
    }
    return json.dumps(data, indent=2)
