# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run configuration for a version change."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import EXCLUDED_DIRS, INCLUDED_EXTENSIONS, USAGE
from .errors import UsageError


def resolve_project_root(start: Path | None = None) -> Path:
    """Return the absolute directory the traversal starts from.

    Args:
        start: Optional explicit directory; defaults to the working directory.

    Returns:
        Path: Absolute, resolved traversal root.
    """

    return (start if start is not None else Path.cwd()).resolve()


class ReplaceConfig(BaseModel):
    """Immutable settings shared by the walker and the rewriter for one run."""

    model_config = ConfigDict(frozen=True)

    root: Path
    original: str = Field(min_length=1)
    replacement: str = Field(min_length=1)
    verbose: bool = False
    dry_run: bool = False
    excluded_dirs: frozenset[str] = Field(default=EXCLUDED_DIRS)
    included_extensions: frozenset[str] = Field(default=INCLUDED_EXTENSIONS)

    @field_validator("root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        """Resolve ``root`` so logged paths are absolute."""

        return value.resolve()

    @classmethod
    def from_cli(
        cls,
        arguments: Sequence[str],
        *,
        verbose: bool = False,
        dry_run: bool = False,
        root: Path | None = None,
    ) -> ReplaceConfig:
        """Build a configuration from the positional CLI values.

        Args:
            arguments: Positional values as received, old version first.
            verbose: Emit one line per visited file.
            dry_run: Detect and report changes without writing.
            root: Optional traversal root overriding the working directory.

        Returns:
            ReplaceConfig: Validated configuration.

        Raises:
            UsageError: If either version string is missing or empty.
        """

        values = list(arguments)
        original = values[0] if values else ""
        replacement = values[1] if len(values) > 1 else ""
        if not original or not replacement:
            raise UsageError(f"USAGE: {USAGE}", arguments=values)
        try:
            return cls(
                root=resolve_project_root(root),
                original=original,
                replacement=replacement,
                verbose=verbose,
                dry_run=dry_run,
            )
        except ValidationError as exc:
            raise UsageError(f"USAGE: {USAGE}", arguments=values) from exc


__all__ = ["ReplaceConfig", "resolve_project_root"]
