# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file literal replacement with optional dry-run."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import ReplaceConfig
from .constants import TEXT_ENCODING, TEXT_ERRORS
from .errors import RewriteError
from .logging import FileEvent, emit_file_event
from .matcher import file_extension, replace_literal


class RewriteOutcome(str, Enum):
    """Verdict reached for a single visited file."""

    EXCLUDED = "excluded"
    SKIPPED = "skipped"
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class RewriteResult:
    """Describe what happened to one file."""

    path: Path
    outcome: RewriteOutcome
    replacements: int = 0
    written: bool = False


def _read_text(path: Path) -> str:
    """Return the decoded contents of ``path`` with line endings and invalid bytes untouched."""

    try:
        return path.read_bytes().decode(TEXT_ENCODING, TEXT_ERRORS)
    except OSError as exc:
        raise RewriteError(path, exc) from exc


def _write_text(path: Path, content: str) -> None:
    """Replace the contents of ``path`` with ``content``."""

    try:
        path.write_bytes(content.encode(TEXT_ENCODING, TEXT_ERRORS))
    except OSError as exc:
        raise RewriteError(path, exc) from exc


class FileRewriter:
    """Apply the configured replacement to eligible files."""

    def __init__(self, config: ReplaceConfig) -> None:
        """Bind the rewriter to ``config``.

        Args:
            config: Replacement pair, extension allow-list and run mode.
        """

        self.config = config

    def is_eligible(self, path: Path) -> bool:
        """Return whether the extension of ``path`` is in the allow-list."""

        return file_extension(path.name) in self.config.included_extensions

    async def rewrite(self, path: Path) -> RewriteResult:
        """Replace every occurrence of the old version in ``path``.

        The file is read only when its extension is eligible, and written
        only when its content changed and the run is not a dry run.

        Args:
            path: Regular file reported by the walker.

        Returns:
            RewriteResult: Outcome for ``path``.

        Raises:
            RewriteError: If the file cannot be read or written.
        """

        config = self.config
        if not self.is_eligible(path):
            self._emit(FileEvent.EXCLUDED, path)
            return RewriteResult(path=path, outcome=RewriteOutcome.EXCLUDED)

        original = await asyncio.to_thread(_read_text, path)
        updated, count = replace_literal(original, config.original, config.replacement)
        if updated == original:
            self._emit(FileEvent.SKIPPED, path)
            return RewriteResult(path=path, outcome=RewriteOutcome.SKIPPED)

        self._emit(FileEvent.CHANGED, path)
        if config.dry_run:
            return RewriteResult(path=path, outcome=RewriteOutcome.CHANGED, replacements=count)

        await asyncio.to_thread(_write_text, path, updated)
        return RewriteResult(path=path, outcome=RewriteOutcome.CHANGED, replacements=count, written=True)

    def _emit(self, event: FileEvent, path: Path) -> None:
        if self.config.verbose:
            emit_file_event(event, path)


async def rewrite_file(path: Path, config: ReplaceConfig) -> RewriteResult:
    """Rewrite ``path`` according to ``config``."""

    return await FileRewriter(config).rewrite(path)


__all__ = ["FileRewriter", "RewriteOutcome", "RewriteResult", "rewrite_file"]
