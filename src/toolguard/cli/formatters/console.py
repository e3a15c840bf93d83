# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for scans, detections, and audit reports."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toolguard import __version__
from toolguard.core.constants import SEVERITY_ORDER, PatternSet, Severity
from toolguard.models.detection import DetectionSummary
from toolguard.models.finding import ScanMatch, ScanResult
from toolguard.models.report import ScanReport
from toolguard.models.scan import ScanSummary
from toolguard.rules.definition import PatternDefinition

console = Console()

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}

_DETAILED = (Severity.CRITICAL, Severity.HIGH)


def _header(subtitle: str) -> None:
    console.print()
    console.print(f"[bold]toolguard v{__version__}[/bold] - {subtitle}")
    console.print()


def _sorted(matches: Iterable[ScanMatch]) -> list[ScanMatch]:
    return sorted(matches, key=lambda m: (SEVERITY_ORDER[m.severity], m.line))


def _severity_summary(counts: dict[str, int]) -> str:
    parts = [f"{counts[sev]} {sev}" for sev in Severity if counts.get(sev)]
    return ", ".join(parts) if parts else "0 issues"


def _print_match(match: ScanMatch, file_path: str) -> None:
    sev_color = SEVERITY_COLORS.get(match.severity, "white")
    console.print(Text(match.severity.upper().ljust(9), style=sev_color), end="")
    console.print(f"  [bold]{match.id}[/bold]  {match.description}")
    console.print(f"          {file_path}:{match.line}", style="dim", markup=False)
    if match.matched_text:
        console.print(f"          Code: {match.matched_text}", style="dim italic", markup=False)


def format_scan_result(result: ScanResult) -> None:
    """Print every match in one file, most severe first."""
    console.print(f"\n[bold]{result.file_path}[/bold]  ({result.issue_count} issues)")
    for match in _sorted(result.matches):
        _print_match(match, result.file_path)


def format_scan_summary(summary: ScanSummary) -> None:
    """Print a directory scan: matches per file, then stats and file errors."""
    _header("AI Tool Security Scanner")
    console.print(f"  Target: {summary.root}")

    if summary.results:
        for result in summary.results:
            format_scan_result(result)
        console.print()
        console.print(
            Panel(
                f"[bold red]{summary.total_issues} potential issues[/bold red] in "
                f"{len(summary.results)} files",
                style="red",
            )
        )
    else:
        console.print()
        console.print("  No suspicious patterns found.", style="bold green")

    stats = summary.stats
    console.print(
        f"  Files: {stats.files_scanned} scanned, {stats.files_skipped} skipped "
        f"({stats.binary_files_skipped} binary, {stats.large_files_skipped} too large, "
        f"{stats.permission_errors} permission denied)"
    )
    format_file_errors(summary)
    console.print()


def format_file_errors(summary: ScanSummary) -> None:
    if not summary.errors:
        return
    counts = ", ".join(f"{count} {kind}" for kind, count in summary.error_counts.items())
    console.print(f"\n  Skipped files ({counts}):", style="yellow")
    for error in summary.errors:
        console.print(f"    - {error.file_path}: {error.message}", style="dim", markup=False)


def format_detection_summary(summary: DetectionSummary) -> None:
    _header("Ecosystem Detection")

    if not summary.results:
        console.print("  No AI tool ecosystems detected.", style="dim")
    for ecosystem, result in summary.results.items():
        table = Table(title=f"{ecosystem} ({len(result.components)} components)")
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Type")
        table.add_column("Path", style="dim")
        for key, component in result.components.items():
            table.add_row(key, component.type or "-", component.path)
        console.print(table)

    format_failures(summary)
    console.print()


def format_failures(summary: DetectionSummary) -> None:
    if not summary.failures:
        return
    counts = ", ".join(
        f"{count} {kind}" for kind, count in summary.failure_counts.items()
    )
    console.print(f"\n  Detector failures ({counts}):", style="yellow")
    for failure in summary.failures:
        console.print(f"    - {failure.detector_name}: {failure.error}", style="dim", markup=False)


def format_scan_report(report: ScanReport) -> None:
    """Print an audit report grouped by ecosystem and component.

    Critical and high matches are listed individually; medium and low
    matches are summarised as a warning count per component.
    """
    _header("AI Tool Security Audit")

    if not report.ecosystem_reports:
        console.print("  No AI tool ecosystems to scan.", style="dim")

    for ecosystem, eco_report in report.ecosystem_reports.items():
        if eco_report.total_issues == 0:
            console.print(f"[bold]{ecosystem}[/bold]: [green]no issues found[/green]")
            continue

        console.print(f"[bold]{ecosystem}[/bold]: [yellow]{eco_report.total_issues} issues[/yellow]")
        for key, results in eco_report.component_scans.items():
            issues = sum(r.issue_count for r in results)
            warnings = sum(
                1 for r in results for m in r.matches if m.severity not in _DETAILED
            )
            console.print(f"  [cyan]{key}[/cyan]: {issues} issues")
            if warnings:
                console.print(f"    {warnings} warnings (medium/low, grouped)", style="yellow")
            for result in results:
                for match in _sorted(result.matches):
                    if match.severity in _DETAILED:
                        _print_match(match, result.file_path)
        console.print()

    console.print(
        f"  Summary: {report.total_issues} issues "
        f"({_severity_summary(report.severity_counts)})"
    )
    console.print(f"  Completed: {report.timestamp.isoformat()}", style="dim")
    console.print()


def format_ecosystems(pairs: list[tuple[str, str]]) -> None:
    table = Table(title="Supported Ecosystems")
    table.add_column("Ecosystem", style="cyan", no_wrap=True)
    table.add_column("Detector")
    for ecosystem, name in pairs:
        table.add_row(ecosystem, name)
    console.print(table)


def format_patterns(sets: dict[PatternSet, tuple[PatternDefinition, ...]]) -> None:
    table = Table(title="Indicator Patterns")
    table.add_column("Set", style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Severity")
    table.add_column("Category")
    table.add_column("Description")
    for pattern_set, definitions in sets.items():
        for definition in definitions:
            sev_color = SEVERITY_COLORS.get(definition.severity, "white")
            table.add_row(
                pattern_set,
                definition.id,
                f"[{sev_color}]{definition.severity}[/{sev_color}]",
                definition.category,
                definition.description,
            )
    console.print(table)
