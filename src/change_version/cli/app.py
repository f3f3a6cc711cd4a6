# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from ..config import ReplaceConfig
from ..constants import PROGRAM_NAME
from ..errors import RewriteError, TraversalError, UsageError
from ..logging import fail, ok
from ..runner import ReplaceSummary, run_replace
from .options import (
    DRY_RUN_OPTION,
    EXTRA_ARGUMENTS,
    NEW_VERSION_ARGUMENT,
    OLD_VERSION_ARGUMENT,
    VERBOSE_OPTION,
    received_arguments,
)

app = typer.Typer(
    name=PROGRAM_NAME,
    help=(
        "Replace a version string in every text file of the project. "
        "Run it from the project root: only files below the working directory are rewritten."
    ),
    add_completion=False,
)


@app.command()
def change_version(
    old_version: OLD_VERSION_ARGUMENT = None,
    new_version: NEW_VERSION_ARGUMENT = None,
    extra: EXTRA_ARGUMENTS = None,
    verbose: VERBOSE_OPTION = False,
    dry_run: DRY_RUN_OPTION = False,
) -> None:
    """Replace OLD_VERSION with NEW_VERSION in files below the working directory.

    Run from the project root. Positional values after NEW_VERSION are ignored.
    """

    try:
        config = ReplaceConfig.from_cli(
            [old_version or "", new_version or ""],
            verbose=verbose,
            dry_run=dry_run,
        )
    except UsageError as exc:
        arguments = received_arguments(old_version, new_version, extra, verbose=verbose, dry_run=dry_run)
        fail(str(exc), use_emoji=False)
        fail(f"Got arguments: {arguments!r}", use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc

    try:
        summary = run_replace(config)
    except TraversalError as exc:
        fail("ERROR while traversing directory!:", use_emoji=False)
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc
    except RewriteError as exc:
        fail("ERROR while rewriting file!:", use_emoji=False)
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc

    _emit_summary(summary, dry_run=dry_run)


def _emit_summary(summary: ReplaceSummary, *, dry_run: bool) -> None:
    if dry_run:
        ok(f"Dry run complete; {len(summary.changed)} file(s) would change", use_emoji=False)
    else:
        ok(f"Updated {len(summary.written)} file(s)", use_emoji=False)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
