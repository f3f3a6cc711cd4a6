# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared argument and option declarations for the CLI."""

from __future__ import annotations

from typing import Annotated

import typer

OLD_VERSION_ARGUMENT = Annotated[
    str | None,
    typer.Argument(help="Version string to replace, e.g. 4.5.0.", show_default=False),
]
NEW_VERSION_ARGUMENT = Annotated[
    str | None,
    typer.Argument(help="Version string to insert, e.g. 4.5.1.", show_default=False),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", help="Print one line per visited file."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry", "--dry-run", help="Report changes without writing files."),
]
EXTRA_ARGUMENTS = Annotated[
    list[str] | None,
    typer.Argument(hidden=True, show_default=False),
]


def received_arguments(
    old_version: str | None,
    new_version: str | None,
    extra: list[str] | None = None,
    *,
    verbose: bool,
    dry_run: bool,
) -> list[str]:
    """Reassemble the arguments a user supplied, for usage diagnostics."""

    arguments = [value for value in (old_version, new_version) if value is not None]
    arguments.extend(extra or ())
    if verbose:
        arguments.append("--verbose")
    if dry_run:
        arguments.append("--dry-run")
    return arguments


__all__ = [
    "DRY_RUN_OPTION",
    "EXTRA_ARGUMENTS",
    "NEW_VERSION_ARGUMENT",
    "OLD_VERSION_ARGUMENT",
    "VERBOSE_OPTION",
    "received_arguments",
]
