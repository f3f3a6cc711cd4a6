# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Literal search and replace helpers built on :mod:`re`."""

from __future__ import annotations

import re
from functools import lru_cache


def escape_pattern(text: str) -> str:
    """Return a pattern matching ``text`` literally.

    Args:
        text: Arbitrary literal string.

    Returns:
        str: Pattern source in which no character of ``text`` acts as a
        metacharacter.
    """

    return re.escape(text)


def escape_replacement(text: str) -> str:
    """Return a ``re.sub`` template that inserts ``text`` verbatim.

    Backslashes are the only template metacharacter (``\\1``, ``\\g<name>``)
    so doubling them is sufficient. ``$`` carries no meaning for ``re``.

    Args:
        text: Replacement text supplied by the user.

    Returns:
        str: Template safe to pass as the ``repl`` argument of ``re.sub``.
    """

    return text.replace("\\", "\\\\")


@lru_cache(maxsize=32)
def compile_literal(text: str) -> re.Pattern[str]:
    """Return a compiled pattern matching ``text`` literally."""

    return re.compile(escape_pattern(text))


def replace_literal(content: str, original: str, replacement: str) -> tuple[str, int]:
    """Replace every non-overlapping occurrence of ``original`` in ``content``.

    Args:
        content: Text to rewrite.
        original: Literal string to search for.
        replacement: Literal string inserted for each match.

    Returns:
        tuple[str, int]: Rewritten text and the number of replacements made.
    """

    return compile_literal(original).subn(escape_replacement(replacement), content)


def file_extension(name: str) -> str:
    """Return the extension of the base name ``name``.

    Dot-files such as ``.gitignore`` have no extension; a trailing dot is
    reported as ``"."``.

    Args:
        name: File base name.

    Returns:
        str: Extension including the leading dot, or an empty string.
    """

    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


__all__ = [
    "compile_literal",
    "escape_pattern",
    "escape_replacement",
    "file_extension",
    "replace_literal",
]
