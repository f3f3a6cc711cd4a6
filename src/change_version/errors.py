# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while propagating a version change."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ChangeVersionError(RuntimeError):
    """Base error carrying the exit status the CLI should terminate with."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class UsageError(ChangeVersionError):
    """Raised when the required positional arguments are missing."""

    def __init__(self, message: str, *, arguments: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.arguments = tuple(arguments)


class TraversalError(ChangeVersionError):
    """Raised when a directory cannot be listed or an entry cannot be inspected."""

    def __init__(self, path: Path, cause: OSError) -> None:
        """Capture the failing ``path`` and the underlying ``cause``.

        Args:
            path: Directory or entry that could not be inspected.
            cause: Operating system error reported for ``path``.
        """

        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class RewriteError(ChangeVersionError):
    """Raised when an eligible file cannot be read or written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


__all__ = ("ChangeVersionError", "RewriteError", "TraversalError", "UsageError")
