# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Configuration file indicators: inline secrets, secret env reads, loose permissions."""

from __future__ import annotations

import re

from toolguard.core.constants import PatternCategory, PatternSet, Severity
from toolguard.rules.definition import PatternDefinition
from toolguard.rules.registry import PatternRegistry

PatternRegistry.register(
    PatternSet.CONFIG,
    PatternDefinition(
        id="CONFIG_API_KEY",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.CRITICAL,
        # The optional quote after the key name covers JSON ("api_key": "...").
        pattern=re.compile(
            r"""(?:api[_-]?key|secret[_-]?key|password|token|auth[_-]?token"""
            r"""|access[_-]?key|private[_-]?key)["']?\s*[:=]\s*["'][a-zA-Z0-9_\-]{20,}["']""",
            re.IGNORECASE,
        ),
        description="Hardcoded API key or secret detected",
    ),
    PatternDefinition(
        id="CONFIG_ENV_EXFIL",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"process\.env\.(AWS_[A-Z_]+|ANTHROPIC_[A-Z_]+|OPENAI_[A-Z_]+"
            r"|API_KEY|SECRET|TOKEN|PASSWORD)"
        ),
        description="Access to sensitive environment variable",
    ),
    PatternDefinition(
        id="CONFIG_DANGEROUS_PERMS",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"""(?:permissions?|mode|chmod)["']?\s*[:=]\s*["']?(?:777|666|0777|0666)["']?""",
            re.IGNORECASE,
        ),
        description="Overly permissive file permissions (777/666)",
    ),
)
