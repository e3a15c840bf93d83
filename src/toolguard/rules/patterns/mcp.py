# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""MCP server indicators: exfiltration endpoints, command injection, leaked env secrets."""

from __future__ import annotations

import re

from toolguard.core.constants import PatternCategory, PatternSet, Severity
from toolguard.rules.definition import PatternDefinition
from toolguard.rules.registry import PatternRegistry

SENSITIVE_ENV_KEYS = r"AWS_SECRET|ANTHROPIC_API_KEY|OPENAI_API_KEY|API_SECRET|PRIVATE_KEY"

PatternRegistry.register(
    PatternSet.MCP,
    PatternDefinition(
        id="MCP_HTTP_EXFIL",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"""(?:url|endpoint|host)["']\s*:\s*["']https?://\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}""",
            re.IGNORECASE | re.ASCII,
        ),
        description="MCP server configured with hardcoded IP address (potential exfiltration)",
    ),
    PatternDefinition(
        id="MCP_COMMAND_INJECTION",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.CRITICAL,
        pattern=re.compile(
            r"""(?:command|args)["']\s*:\s*["'][^"']*(?:\$\{|`|\||;|&&)"""
        ),
        description="MCP stdio command contains potential command injection vectors",
    ),
    PatternDefinition(
        id="MCP_UNTRUSTED_URL",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.MEDIUM,
        pattern=re.compile(
            r"""(?:url|endpoint)["']\s*:\s*["']https?://(?!localhost|127\.0\.0\.1|0\.0\.0\.0)[^"']+""",
            re.IGNORECASE,
        ),
        description="MCP server URL points to non-localhost endpoint (security risk)",
    ),
    PatternDefinition(
        id="MCP_ENV_DANGER",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"""(?:env|environment)["']\s*:\s*\{[^}]*(?:"""
            + SENSITIVE_ENV_KEYS
            + r""")[^}]*\}""",
            re.IGNORECASE,
        ),
        description="MCP server environment configuration may expose sensitive credentials",
    ),
)
