# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Base indicators applied to every component type."""

from __future__ import annotations

import re

from toolguard.core.constants import PatternCategory, PatternSet, Severity
from toolguard.rules.definition import PatternDefinition
from toolguard.rules.registry import PatternRegistry

# Quantifiers are bounded so a single long line cannot trigger runaway
# backtracking.
PatternRegistry.register(
    PatternSet.BASE,
    # Tool poisoning / prompt injection
    PatternDefinition(
        id="PROMPT_INJECTION",
        category=PatternCategory.PROMPT_INJECTION,
        severity=Severity.CRITICAL,
        pattern=re.compile(r"<IMPORTANT>|<CRITICAL>|<SYSTEM>", re.IGNORECASE),
        description="Hidden prompt injection tags detected",
    ),
    PatternDefinition(
        id="STEALTH_INSTRUCTION",
        category=PatternCategory.STEALTH,
        severity=Severity.HIGH,
        pattern=re.compile(r"do not mention|delete this message", re.IGNORECASE),
        description="Stealth instruction detected",
    ),
    # Python
    PatternDefinition(
        id="PY_EXEC",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.HIGH,
        pattern=re.compile(r"os\.system\(|subprocess\."),
        description="Python shell execution detected",
    ),
    PatternDefinition(
        id="PY_NETWORK",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.MEDIUM,
        pattern=re.compile(r"requests\.post\(|urllib\.request"),
        description="Python network request detected",
    ),
    PatternDefinition(
        id="PY_FILE_ACCESS",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(r"open\(.{0,100}\.ssh|open\(.{0,100}\.env"),
        description="Sensitive file access detected (Python)",
    ),
    # JavaScript / TypeScript
    PatternDefinition(
        id="JS_EXEC",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.HIGH,
        pattern=re.compile(r"exec\(|spawn\(|child_process"),
        description="Node.js shell execution detected",
    ),
    PatternDefinition(
        id="JS_NETWORK",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.MEDIUM,
        pattern=re.compile(r"fetch\(|axios\.|http\.request"),
        description="Node.js network request detected",
    ),
    PatternDefinition(
        id="JS_FILE_ACCESS",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(r"fs\.readFile.{0,100}\.ssh|fs\.readFile.{0,100}\.env"),
        description="Sensitive file access detected (JS)",
    ),
    # Universal
    PatternDefinition(
        id="CURL_BASH",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.CRITICAL,
        pattern=re.compile(r"curl.{0,200}\|.{0,50}bash|wget.{0,200}\|.{0,50}sh"),
        description="Insecure curl-to-bash pipe detected",
    ),
    PatternDefinition(
        id="HARDCODED_IP",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.LOW,
        pattern=re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII),
        description="Hardcoded IP address detected",
    ),
)
