# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, limits, and file-selection constants."""

from enum import StrEnum


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PatternCategory(StrEnum):
    EXFILTRATION = "EXFILTRATION"
    PROMPT_INJECTION = "PROMPT_INJECTION"
    SENSITIVE_ACCESS = "SENSITIVE_ACCESS"
    STEALTH = "STEALTH"


class PatternSet(StrEnum):
    """Named groups of indicator patterns; every non-base set extends base."""

    BASE = "base"
    MCP = "mcp"
    HOOK = "hook"
    SKILL = "skill"
    CONFIG = "config"


class ScannerType(StrEnum):
    MCP_SERVER = "mcpServer"
    HOOK = "hook"
    SKILL = "skill"
    CONFIG = "config"
    UNKNOWN = "unknown"


class FileErrorKind(StrEnum):
    PERMISSION = "permission"
    BINARY = "binary"
    SIZE = "size"
    READ = "read"
    ENCODING = "encoding"


class FailureKind(StrEnum):
    TIMEOUT = "timeout"
    ERROR = "error"
    LOAD_ERROR = "load-error"


SEVERITY_ORDER: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}

MAX_FILE_SIZE = 10 * 1024 * 1024
MAX_MATCH_LENGTH = 100
CONTEXT_LINES = 2
WALK_MAX_DEPTH = 10
DETECTOR_TIMEOUT_SECONDS = 30.0

SCAN_EXTENSIONS: tuple[str, ...] = (".py", ".js", ".ts", ".md", ".json", ".sh")
EXCLUDED_DIRS: frozenset[str] = frozenset(
    {"node_modules", "dist", "build", ".git", ".idea", ".vscode"}
)
AST_EXTENSIONS: tuple[str, ...] = (".py",)
