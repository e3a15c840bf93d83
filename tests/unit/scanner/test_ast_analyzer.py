# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the Python AST secondary analysis."""

from __future__ import annotations

import pytest

from toolguard.core.constants import PatternCategory, Severity
from toolguard.scanner.ast_analyzer import (
    AnalyzerSeverity,
    AnalyzerWarning,
    analyze,
    analyze_to_matches,
    to_scan_match,
    translate_severity,
)

# ---------------------------------------------------------------------------
# Warning kinds
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("source", "kind", "severity"),
    [
        ("exec(user_code)\n", "unsafe-eval", AnalyzerSeverity.WARNING),
        ("eval(expr)\n", "unsafe-eval", AnalyzerSeverity.WARNING),
        (
            "import base64\nexec(base64.b64decode(blob))\n",
            "obfuscated-code",
            AnalyzerSeverity.CRITICAL,
        ),
        (
            "import zlib\neval(zlib.decompress(data).decode())\n",
            "obfuscated-code",
            AnalyzerSeverity.CRITICAL,
        ),
        ("__import__(name)\n", "unsafe-import", AnalyzerSeverity.WARNING),
        (
            "import importlib\nimportlib.import_module(mod)\n",
            "unsafe-import",
            AnalyzerSeverity.WARNING,
        ),
        ("import pickle\npickle.loads(raw)\n", "unsafe-deserialize", AnalyzerSeverity.WARNING),
        ('URL = "http://10.0.0.7/collect"\n', "shady-link", AnalyzerSeverity.INFORMATION),
    ],
)
def test_detects_kind(source: str, kind: str, severity: AnalyzerSeverity):
    warnings = analyze(source)
    assert [(w.kind, w.severity) for w in warnings] == [(kind, severity)]


@pytest.mark.parametrize(
    "source",
    [
        "eval('1 + 1')\n",
        "__import__('os')\n",
        "import json\njson.loads(data)\n",
        'URL = "https://example.com/api"\n',
        "def run():\n    return 42\n",
    ],
)
def test_literal_and_benign_code_is_quiet(source: str):
    assert analyze(source) == []


def test_syntax_error_yields_nothing():
    assert analyze("def broken(:\n    pass\n") == []
    assert analyze_to_matches("exec(\n") == []


def test_warnings_sorted_by_line():
    source = "\n".join(
        [
            "import pickle",
            'HOST = "http://192.168.1.1/x"',
            "pickle.load(fh)",
            "exec(payload)",
        ]
    )
    warnings = analyze(source)
    assert [w.line for w in warnings] == [2, 3, 4]
    assert [w.kind for w in warnings] == ["shady-link", "unsafe-deserialize", "unsafe-eval"]


def test_nested_calls_are_visited():
    warnings = analyze("print(eval(compute()))\n")
    assert [w.kind for w in warnings] == ["unsafe-eval"]
    assert warnings[0].value == "eval(compute())"


# ---------------------------------------------------------------------------
# Severity translation
# ---------------------------------------------------------------------------


class TestTranslateSeverity:
    @pytest.mark.parametrize(
        ("analyzer", "expected"),
        [
            (AnalyzerSeverity.CRITICAL, Severity.CRITICAL),
            (AnalyzerSeverity.WARNING, Severity.MEDIUM),
            (AnalyzerSeverity.INFORMATION, Severity.LOW),
        ],
    )
    def test_mapping(self, analyzer: AnalyzerSeverity, expected: Severity):
        assert translate_severity(analyzer) is expected

    def test_every_member_is_mapped(self):
        for member in AnalyzerSeverity:
            assert isinstance(translate_severity(member), Severity)

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError, match="Unmapped"):
            translate_severity("Hint")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# ScanMatch conversion
# ---------------------------------------------------------------------------


class TestToScanMatch:
    def test_match_shape(self):
        lines = ["a = 1", "b = 2", "exec(code)", "c = 3", "d = 4", "e = 5"]
        warning = AnalyzerWarning(
            kind="unsafe-eval",
            severity=AnalyzerSeverity.WARNING,
            line=3,
            value="exec(code)",
        )
        match = to_scan_match(warning, lines)
        assert match.id == "AST_UNSAFE_EVAL"
        assert match.category == PatternCategory.SENSITIVE_ACCESS
        assert match.severity == Severity.MEDIUM
        assert match.line == 3
        assert match.matched_text == "exec(code)"
        assert match.context_before == ["a = 1", "b = 2"]
        assert match.context_after == ["c = 3", "d = 4"]

    def test_long_value_truncated(self):
        warning = AnalyzerWarning(
            kind="shady-link",
            severity=AnalyzerSeverity.INFORMATION,
            line=1,
            value="x" * 300,
        )
        match = to_scan_match(warning, ["x"])
        assert len(match.matched_text) == 100
        assert match.id == "AST_SHADY_LINK"
        assert match.severity == Severity.LOW

    def test_analyze_to_matches(self):
        content = "import base64\n\nexec(base64.b64decode(blob))\n"
        matches = analyze_to_matches(content)
        assert [m.id for m in matches] == ["AST_OBFUSCATED_CODE"]
        assert matches[0].severity == Severity.CRITICAL
        assert matches[0].line == 3
        assert matches[0].context_before == ["import base64", ""]


# ---------------------------------------------------------------------------
# Pathological sources
# ---------------------------------------------------------------------------


def test_deeply_nested_expression_yields_nothing():
    source = "x = " + "+".join(["1"] * 100_000) + "\n"
    assert analyze(source) == []
    assert analyze_to_matches(source) == []


def test_form_feed_does_not_shift_match_lines():
    source = "# header\x0c\nexec(payload)\n"
    [match] = analyze_to_matches(source)
    assert match.line == 2
    assert match.context_before == ["# header\x0c"]
