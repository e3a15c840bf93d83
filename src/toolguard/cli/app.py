# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from toolguard.core.config import get_settings
from toolguard.core.constants import PatternSet, ScannerType
from toolguard.core.exceptions import InvalidEcosystemError
from toolguard.core.logging import setup_logging

app = typer.Typer(
    name="toolguard",
    help="Static security triage for AI-assistant tool installations",
    no_args_is_help=True,
)

# Exit codes: 0 clean, 1 issues found, 2 usage error.
EXIT_ISSUES = 1
EXIT_USAGE = 2


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (overrides TOOLGUARD_LOG_LEVEL)"),
    ] = None,
) -> None:
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


@app.command()
def scan(
    path: Annotated[str, typer.Argument(help="File or directory to scan")] = ".",
    component_type: Annotated[
        ScannerType | None,
        typer.Option("--type", "-t", help="Component type; inferred from the path if omitted"),
    ] = None,
    mcp_config: Annotated[
        bool,
        typer.Option("--mcp-config", help="Treat PATH as an MCP config and analyse its servers"),
    ] = False,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Scan a file or directory for indicator-of-compromise patterns."""
    issues = asyncio.run(_async_scan(path, component_type, mcp_config, fmt, output))
    if issues:
        raise typer.Exit(EXIT_ISSUES)


async def _async_scan(
    path: str,
    component_type: ScannerType | None,
    mcp_config: bool,
    fmt: OutputFormat,
    output: Path | None,
) -> int:
    from toolguard.scanner.selector import create_scanner_for_file, select_scanner

    target = Path(path).expanduser()
    if not target.exists():
        typer.echo(f"Target not found: {path}", err=True)
        raise typer.Exit(EXIT_USAGE)

    settings = get_settings()
    if component_type is not None:
        scanner = select_scanner(component_type, str(target), settings)
    elif mcp_config:
        scanner = select_scanner(ScannerType.MCP_SERVER, str(target), settings)
    else:
        scanner = create_scanner_for_file(str(target), settings)

    if mcp_config:
        if not target.is_file():
            typer.echo("--mcp-config requires a file path", err=True)
            raise typer.Exit(EXIT_USAGE)

        from toolguard.scanner.mcp_config import scan_mcp_config

        result = await scan_mcp_config(scanner, str(target))
        if fmt == OutputFormat.JSON:
            from toolguard.cli.formatters.json_fmt import format_json

            _write_output(format_json(result), output)
        else:
            from toolguard.cli.formatters.console import format_scan_result

            format_scan_result(result)
        return result.issue_count

    summary = await scanner.scan_directory_with_summary(str(target))
    if fmt == OutputFormat.JSON:
        from toolguard.cli.formatters.json_fmt import format_json

        _write_output(format_json(summary), output)
    else:
        from toolguard.cli.formatters.console import format_scan_summary

        format_scan_summary(summary)
    return summary.total_issues


@app.command()
def detect(
    ecosystem: Annotated[
        str | None,
        typer.Option("--ecosystem", "-e", help="Only run this ecosystem's detector"),
    ] = None,
    component_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only keep components of this type (e.g. hooks)"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
) -> None:
    """Detect installed AI tool ecosystems and their components."""
    asyncio.run(_async_detect(ecosystem, component_type, fmt))


async def _async_detect(
    ecosystem: str | None,
    component_type: str | None,
    fmt: OutputFormat,
) -> None:
    from toolguard.autodetect.orchestrator import AutoDetector

    auto = AutoDetector(settings=get_settings())
    try:
        summary = await auto.detect_all(ecosystem, component_type)
    except InvalidEcosystemError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_USAGE) from exc

    if fmt == OutputFormat.JSON:
        from toolguard.cli.formatters.json_fmt import format_json

        _write_output(format_json(summary), None)
    else:
        from toolguard.cli.formatters.console import format_detection_summary

        format_detection_summary(summary)


@app.command()
def audit(
    ecosystem: Annotated[
        str | None,
        typer.Option("--ecosystem", "-e", help="Only audit this ecosystem"),
    ] = None,
    component_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only audit components of this type"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Detect installed AI tools and scan every component found."""
    issues = asyncio.run(_async_audit(ecosystem, component_type, fmt, output))
    if issues:
        raise typer.Exit(EXIT_ISSUES)


async def _async_audit(
    ecosystem: str | None,
    component_type: str | None,
    fmt: OutputFormat,
    output: Path | None,
) -> int:
    from toolguard.autodetect.orchestrator import AutoDetector

    auto = AutoDetector(settings=get_settings())
    try:
        summary = await auto.detect_all(ecosystem, component_type)
    except InvalidEcosystemError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_USAGE) from exc

    report = await auto.scan_detected(summary.results)

    if fmt == OutputFormat.JSON:
        from toolguard.cli.formatters.json_fmt import format_json

        _write_output(format_json(report), output)
    else:
        from toolguard.cli.formatters.console import format_failures, format_scan_report

        format_scan_report(report)
        format_failures(summary)
    return report.total_issues


@app.command()
def ecosystems() -> None:
    """List the ecosystems toolguard can detect."""
    from toolguard.autodetect.orchestrator import AutoDetector
    from toolguard.cli.formatters.console import format_ecosystems

    auto = AutoDetector(settings=get_settings())
    format_ecosystems(auto.ecosystem_detectors())


@app.command()
def patterns(
    pattern_set: Annotated[
        PatternSet | None,
        typer.Option("--set", "-s", help="Only show patterns active for this set"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
) -> None:
    """List the indicator patterns."""
    import toolguard.rules.patterns  # noqa: F401
    from toolguard.rules.registry import PatternRegistry

    if pattern_set is None:
        sets = PatternRegistry.all_sets()
    else:
        sets = {pattern_set: PatternRegistry.resolve(pattern_set)}

    if fmt == OutputFormat.JSON:
        from toolguard.cli.formatters.json_fmt import format_patterns_json

        _write_output(format_patterns_json(sets), None)
    else:
        from toolguard.cli.formatters.console import format_patterns

        format_patterns(sets)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text)
        typer.echo(f"Output written to {output}", err=True)
    else:
        sys.stdout.write(text + "\n")


@app.command()
def version() -> None:
    """Show version information."""
    from toolguard import __version__

    typer.echo(f"toolguard v{__version__}")
