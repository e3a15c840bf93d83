# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Python AST analysis used as a secondary signal for script files.

Regex patterns see one line at a time; this pass looks at call structure to
catch dynamic code execution, dynamic imports, unsafe deserialization and
obfuscated payloads that line patterns miss. Sources that fail to parse
produce no warnings.
"""

from __future__ import annotations

import ast
import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from toolguard.core.constants import MAX_MATCH_LENGTH, PatternCategory, Severity
from toolguard.models.finding import ScanMatch
from toolguard.scanner.matcher import split_lines

logger = logging.getLogger("toolguard.scanner.ast_analyzer")


class AnalyzerSeverity(StrEnum):
    CRITICAL = "Critical"
    WARNING = "Warning"
    INFORMATION = "Information"


@dataclass(frozen=True)
class AnalyzerWarning:
    kind: str
    severity: AnalyzerSeverity
    line: int
    value: str | None = None


DESCRIPTIONS: dict[str, str] = {
    "unsafe-eval": "Dynamic code execution with a non-literal argument",
    "obfuscated-code": "Decoded payload passed straight to eval/exec (obfuscated code)",
    "unsafe-import": "Dynamic import of a computed module name",
    "unsafe-deserialize": "Deserialization of untrusted data (pickle/marshal)",
    "shady-link": "URL with a literal IP address",
}

_EXEC_BUILTINS = frozenset({"eval", "exec", "compile"})
_IMPORTERS = frozenset({"__import__", "importlib.import_module", "import_module"})
_DESERIALIZERS = frozenset(
    {"pickle.loads", "pickle.load", "marshal.loads", "marshal.load", "cPickle.loads"}
)
_DECODERS = frozenset(
    {
        "base64.b64decode",
        "base64.b32decode",
        "base64.b16decode",
        "base64.decodebytes",
        "codecs.decode",
        "zlib.decompress",
        "bytes.fromhex",
        "binascii.unhexlify",
        "binascii.a2b_base64",
    }
)
_IP_URL = re.compile(r"https?://\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII)


def translate_severity(severity: AnalyzerSeverity) -> Severity:
    """Map analyzer severities onto toolguard severities.

    Every ``AnalyzerSeverity`` member must be handled here; an unknown value
    raises instead of silently defaulting.
    """
    match severity:
        case AnalyzerSeverity.CRITICAL:
            return Severity.CRITICAL
        case AnalyzerSeverity.WARNING:
            return Severity.MEDIUM
        case AnalyzerSeverity.INFORMATION:
            return Severity.LOW
    raise ValueError(f"Unmapped analyzer severity: {severity!r}")


def _dotted_name(node: ast.AST) -> str:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        parent = _dotted_name(node.value)
        return f"{parent}.{node.attr}" if parent else node.attr
    return ""


def _is_literal(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and isinstance(node.value, (str, bytes))


def _contains_decoder(node: ast.AST) -> bool:
    for child in ast.walk(node):
        if isinstance(child, ast.Call) and _dotted_name(child.func) in _DECODERS:
            return True
    return False


class _Visitor(ast.NodeVisitor):
    def __init__(self, source: str) -> None:
        self._source = source
        self.warnings: list[AnalyzerWarning] = []

    def _add(self, kind: str, severity: AnalyzerSeverity, node: ast.AST) -> None:
        segment = ast.get_source_segment(self._source, node) or ""
        self.warnings.append(
            AnalyzerWarning(
                kind=kind,
                severity=severity,
                line=getattr(node, "lineno", 1),
                value=segment.splitlines()[0] if segment else None,
            )
        )

    def visit_Call(self, node: ast.Call) -> None:
        name = _dotted_name(node.func)
        first = node.args[0] if node.args else None

        if name in _EXEC_BUILTINS and first is not None and not _is_literal(first):
            if _contains_decoder(first):
                self._add("obfuscated-code", AnalyzerSeverity.CRITICAL, node)
            else:
                self._add("unsafe-eval", AnalyzerSeverity.WARNING, node)
        elif name in _IMPORTERS and first is not None and not _is_literal(first):
            self._add("unsafe-import", AnalyzerSeverity.WARNING, node)
        elif name in _DESERIALIZERS:
            self._add("unsafe-deserialize", AnalyzerSeverity.WARNING, node)

        self.generic_visit(node)

    def visit_Constant(self, node: ast.Constant) -> None:
        if isinstance(node.value, str) and _IP_URL.search(node.value):
            self._add("shady-link", AnalyzerSeverity.INFORMATION, node)


def analyze(content: str) -> list[AnalyzerWarning]:
    """Return structural warnings for Python *content*, in source order."""
    try:
        tree = ast.parse(content)
    except (SyntaxError, ValueError) as exc:
        logger.debug("AST parse skipped: %s", exc)
        return []
    except (RecursionError, MemoryError) as exc:
        logger.warning("AST parse aborted, source nested too deeply: %s", type(exc).__name__)
        return []

    visitor = _Visitor(content)
    try:
        visitor.visit(tree)
    except RecursionError:
        logger.warning("AST walk aborted, source nested too deeply")
        return []
    return sorted(visitor.warnings, key=lambda w: w.line)


def to_scan_match(warning: AnalyzerWarning, lines: list[str]) -> ScanMatch:
    """Convert an analyzer warning into a ``ScanMatch`` with context from *lines*."""
    line = max(1, min(warning.line, len(lines) or 1))
    index = line - 1
    return ScanMatch(
        id=f"AST_{warning.kind.upper().replace('-', '_')}",
        category=PatternCategory.SENSITIVE_ACCESS,
        severity=translate_severity(warning.severity),
        description=DESCRIPTIONS.get(warning.kind, f"ast {warning.kind}"),
        line=line,
        matched_text=(warning.value or "").strip()[:MAX_MATCH_LENGTH],
        context_before=lines[max(0, index - 2):index],
        context_after=lines[index + 1:index + 3],
    )


def analyze_to_matches(content: str) -> list[ScanMatch]:
    warnings = analyze(content)
    if not warnings:
        return []
    lines = split_lines(content)
    return [to_scan_match(w, lines) for w in warnings]
