# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.text import Text

_CONSOLES: dict[tuple[bool, bool, bool], Console] = {}


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def get_console(*, color: bool, stderr: bool = False) -> Console:
    """Return a cached Rich console for the requested stream and colour mode.

    The console resolves ``sys.stdout``/``sys.stderr`` at print time, so
    redirected streams (e.g. under a test runner) are honoured.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        stderr: ``True`` to write to standard error instead of stdout.

    Returns:
        Console: Cached or newly constructed console.
    """

    tty = detect_tty()
    key = (color, stderr, tty)
    if key not in _CONSOLES:
        _CONSOLES[key] = Console(
            stderr=stderr,
            color_system="auto" if color and tty else None,
            no_color=not (color and tty),
            highlight=False,
            soft_wrap=True,
        )
    return _CONSOLES[key]


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` without interpreting Rich markup."""

    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    get_console(color=color_enabled, stderr=stderr).print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message to standard error."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_color=use_color, stderr=True)


class FileEvent(str, Enum):
    """Per-file verdicts reported in verbose mode."""

    EXCLUDED = "EXCLUDED"
    SKIPPED = "SKIPPED"
    CHANGED = "FILE"


def emit_file_event(event: FileEvent, path: Path) -> None:
    """Write ``<EVENT>: <path>`` to stdout, unstyled so it stays greppable.

    Args:
        event: Verdict reached for ``path``.
        path: File the verdict applies to.
    """

    _print_line(f"{event.value}: {path}", style=None, use_color=False)


__all__ = [
    "FileEvent",
    "detect_tty",
    "emit_file_event",
    "emoji",
    "fail",
    "get_console",
    "ok",
]
