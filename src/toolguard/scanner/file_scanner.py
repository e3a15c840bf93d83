# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Safety-gated file scanner.

Wraps the line matcher with the checks every candidate file goes through
before its content is read: symlink resolution, binary sniffing, a size
limit, and UTF-8 decoding. Every file that fails a gate is counted as
skipped, so ``files_scanned + files_skipped`` always equals the number of
candidates returned by the walker.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import aiofiles
import aiofiles.os

from toolguard.core.config import Settings, get_settings
from toolguard.core.constants import AST_EXTENSIONS, FileErrorKind, PatternSet
from toolguard.models.finding import ScanResult
from toolguard.models.scan import FileError, ScanStats, ScanSummary
from toolguard.rules.definition import PatternDefinition
from toolguard.scanner import ast_analyzer, matcher
from toolguard.scanner.binary import is_binary_file
from toolguard.scanner.walker import walk_directory
from toolguard.utils.paths import resolve_path

logger = logging.getLogger("toolguard.scanner.file_scanner")

_BYTES_PER_MB = 1024 * 1024


def _format_mb(size: int) -> str:
    return f"{size / _BYTES_PER_MB:.2f}"


class _Skip(Exception):
    """A candidate file that will not be scanned.

    ``error`` is ``None`` for skips that are counted but not reported.
    """

    def __init__(self, error: FileError | None = None) -> None:
        super().__init__(error.message if error else "skipped")
        self.error = error


class Scanner:
    """Pattern scanner bound to one resolved pattern set."""

    def __init__(
        self,
        patterns: Sequence[PatternDefinition],
        pattern_set: PatternSet = PatternSet.BASE,
        settings: Settings | None = None,
        ast_analysis: bool | None = None,
    ) -> None:
        self._patterns = tuple(patterns)
        self._settings = settings or get_settings()
        self.pattern_set = pattern_set
        self.ast_analysis = (
            self._settings.ast_analysis if ast_analysis is None else ast_analysis
        )

    @property
    def patterns(self) -> tuple[PatternDefinition, ...]:
        return self._patterns

    def scan_file(self, file_path: str, content: str) -> ScanResult:
        result = matcher.scan_file(file_path, content, self._patterns)
        if not self.ast_analysis or not file_path.lower().endswith(AST_EXTENSIONS):
            return result

        try:
            extra = ast_analyzer.analyze_to_matches(content)
        except Exception as exc:
            logger.warning("AST analysis failed for %s: %s", file_path, exc)
            return result
        if not extra:
            return result
        merged = sorted([*result.matches, *extra], key=lambda m: m.line)
        return ScanResult(file_path=file_path, matches=merged)

    async def scan_directory(self, root: str) -> list[ScanResult]:
        summary = await self.scan_directory_with_summary(root)
        return summary.results

    async def scan_directory_with_summary(self, root: str) -> ScanSummary:
        """Scan every candidate file under *root*.

        Only files with at least one match appear in ``results``; gate
        failures are collected in ``errors`` and counted in ``stats``.
        """
        files = await walk_directory(
            root,
            self._settings.scan_extensions,
            self._settings.walk_max_depth,
        )

        results: list[ScanResult] = []
        errors: list[FileError] = []
        stats = ScanStats()

        for file_path in files:
            try:
                result = await self._scan_candidate(file_path, stats)
            except _Skip as skip:
                stats.files_skipped += 1
                if skip.error is not None:
                    errors.append(skip.error)
                continue

            stats.files_scanned += 1
            if result.matches:
                results.append(result)

        logger.info(
            "Scanned %s: %d files, %d skipped, %d issues",
            root,
            stats.files_scanned,
            stats.files_skipped,
            sum(r.issue_count for r in results),
        )
        return ScanSummary(root=root, results=results, errors=errors, stats=stats)

    async def _scan_candidate(self, file_path: str, stats: ScanStats) -> ScanResult:
        real_path = await resolve_path(file_path)

        try:
            binary = await asyncio.to_thread(is_binary_file, real_path)
        except IsADirectoryError:
            raise _Skip() from None
        except PermissionError as exc:
            stats.permission_errors += 1
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.PERMISSION, message=str(exc))
            ) from exc
        except OSError as exc:
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.READ, message=str(exc))
            ) from exc

        if binary:
            stats.binary_files_skipped += 1
            logger.debug("Skipping binary file: %s", file_path)
            raise _Skip()

        try:
            stat_result = await aiofiles.os.stat(real_path)
        except OSError as exc:
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.READ, message=str(exc))
            ) from exc

        limit = self._settings.max_file_size
        if stat_result.st_size > limit:
            stats.large_files_skipped += 1
            message = (
                f"File size {_format_mb(stat_result.st_size)} MB exceeds limit of "
                f"{limit / _BYTES_PER_MB:g} MB"
            )
            logger.warning("Skipping large file %s: %s", file_path, message)
            raise _Skip(FileError(file_path=file_path, kind=FileErrorKind.SIZE, message=message))

        try:
            async with aiofiles.open(real_path, encoding="utf-8") as fh:
                content = await fh.read()
        except IsADirectoryError:
            raise _Skip() from None
        except PermissionError as exc:
            stats.permission_errors += 1
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.PERMISSION, message=str(exc))
            ) from exc
        except UnicodeDecodeError as exc:
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.ENCODING, message=str(exc))
            ) from exc
        except OSError as exc:
            raise _Skip(
                FileError(file_path=file_path, kind=FileErrorKind.READ, message=str(exc))
            ) from exc

        return self.scan_file(file_path, content)
