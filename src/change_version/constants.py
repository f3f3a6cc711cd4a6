# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixed traversal filters and CLI literals."""

from __future__ import annotations

from typing import Final

PROGRAM_NAME: Final[str] = "change-version"

USAGE: Final[str] = f"{PROGRAM_NAME} old_version new_version [--verbose] [--dry[-run]]"

EXCLUDED_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        "_gh_pages",
        "dist",
        "node_modules",
        "resources",
    },
)

# Extension allow-list; keeps binary files out of the rewrite.
INCLUDED_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {
        "",
        ".css",
        ".html",
        ".js",
        ".json",
        ".md",
        ".scss",
        ".txt",
        ".yml",
    },
)

TEXT_ENCODING: Final[str] = "utf-8"

# Undecodable bytes survive a decode/encode round trip unchanged.
TEXT_ERRORS: Final[str] = "surrogateescape"

__all__ = ["EXCLUDED_DIRS", "INCLUDED_EXTENSIONS", "PROGRAM_NAME", "TEXT_ENCODING", "TEXT_ERRORS", "USAGE"]
