# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Hook indicators: destructive shell commands, uploads, credential reads, persistence."""

from __future__ import annotations

import re

from toolguard.core.constants import PatternCategory, PatternSet, Severity
from toolguard.rules.definition import PatternDefinition
from toolguard.rules.registry import PatternRegistry

PatternRegistry.register(
    PatternSet.HOOK,
    PatternDefinition(
        id="HOOK_SHELL_DANGER",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.CRITICAL,
        pattern=re.compile(
            r"\b(?:rm\s+-rf?|dd\s+if=|mkfs|format\s+[A-Z]:)", re.IGNORECASE
        ),
        description="Dangerous shell command detected in hook (data destruction risk)",
    ),
    PatternDefinition(
        id="HOOK_FILE_UPLOAD",
        category=PatternCategory.EXFILTRATION,
        severity=Severity.HIGH,
        pattern=re.compile(r"\b(?:curl\s+[^|]*-F|scp\s+[^|]*:)", re.IGNORECASE),
        description="File upload command detected in hook (data exfiltration risk)",
    ),
    PatternDefinition(
        id="HOOK_CRED_ACCESS",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=Severity.HIGH,
        pattern=re.compile(
            r"(?:~/\.aws|~/\.ssh|/root/\.ssh|/home/[^/]+/\.aws|/home/[^/]+/\.ssh"
            r"|%USERPROFILE%\\\.aws|%USERPROFILE%\\\.ssh)",
            re.IGNORECASE,
        ),
        description="Credential file access detected in hook (sensitive data exposure)",
    ),
    PatternDefinition(
        id="HOOK_BACKGROUND_SPAWN",
        category=PatternCategory.STEALTH,
        severity=Severity.MEDIUM,
        pattern=re.compile(
            r"(?:&\s*$|nohup\s+|disown\s+|screen\s+-d|tmux\s+new-session\s+-d)"
        ),
        description="Background process spawning detected in hook (persistence mechanism)",
    ),
)
