# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution helpers tying the walker to the rewriter."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from .config import ReplaceConfig
from .discovery import TreeWalker
from .errors import TraversalError
from .rewriter import FileRewriter, RewriteOutcome, RewriteResult


@dataclass(slots=True)
class ReplaceSummary:
    """Capture the outcome of a replacement run."""

    excluded: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    changed: list[Path] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    replacements: int = 0

    def record(self, result: RewriteResult) -> None:
        """Add the outcome for one file to the summary.

        Args:
            result: Result reported by :class:`FileRewriter`.
        """

        if result.outcome is RewriteOutcome.EXCLUDED:
            self.excluded.append(result.path)
        elif result.outcome is RewriteOutcome.SKIPPED:
            self.skipped.append(result.path)
        else:
            self.changed.append(result.path)
            self.replacements += result.replacements
            if result.written:
                self.written.append(result.path)

    @property
    def visited(self) -> int:
        """Return the number of regular files the walker reported."""

        return len(self.excluded) + len(self.skipped) + len(self.changed)

    def __bool__(self) -> bool:
        """Return ``True`` when at least one file changed or would change."""

        return bool(self.changed)


def _abort(error: TraversalError) -> None:
    """Escalate a traversal failure so the whole run stops."""

    raise error


async def replace_recursively(config: ReplaceConfig) -> ReplaceSummary:
    """Replace the old version with the new one under ``config.root``.

    Args:
        config: Run configuration.

    Returns:
        ReplaceSummary: Files grouped by outcome.

    Raises:
        TraversalError: On the first directory listing or status failure.
        RewriteError: On the first read or write failure.
    """

    summary = ReplaceSummary()
    rewriter = FileRewriter(config)

    async def update_file(path: Path) -> None:
        summary.record(await rewriter.rewrite(path))

    await TreeWalker(config.excluded_dirs).walk(config.root, update_file, _abort)
    return summary


def run_replace(config: ReplaceConfig) -> ReplaceSummary:
    """Run :func:`replace_recursively` on a fresh event loop."""

    return asyncio.run(replace_recursively(config))


__all__ = ["ReplaceSummary", "replace_recursively", "run_replace"]
