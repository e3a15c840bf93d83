# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Skill and agent indicators: unattended actions, hidden behaviour, system changes."""

from __future__ import annotations

import re

from toolguard.core.constants import PatternCategory, PatternSet, Severity
from toolguard.rules.definition import PatternDefinition
from toolguard.rules.registry import PatternRegistry

PatternRegistry.register(
    PatternSet.SKILL,
    PatternDefinition(
        id="SKILL_AUTO_ACTION",
        category=PatternCategory.PROMPT_INJECTION,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"(?:automatically|without\s+(?:asking|consent|permission|approval)"
            r"|autonomously|on\s+your\s+behalf|silently\s+execute|auto-execute"
            r"|self-trigger|trigger\s+without\s+user)",
            re.IGNORECASE,
        ),
        description=(
            "Autonomous action without user consent detected in skill "
            "(unauthorized execution risk)"
        ),
    ),
    PatternDefinition(
        id="SKILL_STEALTH_MODE",
        category=PatternCategory.STEALTH,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"(?:don't\s+(?:tell|show|mention|display|reveal|inform)"
            r"|hide\s+(?:from\s+user|this|output|result)"
            r"|suppress\s+(?:output|notification|message)"
            r"|invisible\s+to\s+user|user\s+should\s+not\s+(?:see|know)"
            r"|conceal\s+from\s+user)",
            re.IGNORECASE,
        ),
        description=(
            "Stealth instruction to hide behavior from users detected "
            "(transparency violation)"
        ),
    ),
    PatternDefinition(
        id="SKILL_SYSTEM_MODIFY",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"(?:modify\s+(?:system|global|root)"
            r"|edit\s+(?:/etc/|~/\.config/|~/\.ssh/|system\s+files)"
            r"|change\s+(?:system\s+settings|configuration\s+files)"
            r"|update\s+(?:PATH|LD_LIBRARY_PATH|system\s+env)"
            r"|alter\s+(?:sudoers|shadow|passwd))",
            re.IGNORECASE,
        ),
        description=(
            "System-level configuration change detected in skill "
            "(privilege escalation risk)"
        ),
    ),
)
