# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asynchronous recursive directory traversal."""

from __future__ import annotations

import asyncio
import inspect
import os
import stat
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from ..errors import TraversalError

FileCallback = Callable[[Path], Awaitable[None] | None]
ErrorCallback = Callable[[TraversalError], Awaitable[None] | None]

_ArgT = TypeVar("_ArgT")


def _list_directory(directory: Path) -> list[str]:
    """Return the entry names of ``directory`` in a stable order."""

    return sorted(os.listdir(directory))


def _lstat(path: Path) -> os.stat_result:
    """Return the status of ``path`` without following symlinks."""

    return os.lstat(path)


async def _invoke(callback: Callable[[_ArgT], Awaitable[None] | None], argument: _ArgT) -> None:
    """Call ``callback`` and await its result when it is awaitable."""

    result = callback(argument)
    if inspect.isawaitable(result):
        await result


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Callbacks and task group shared by every step of one walk."""

    group: asyncio.TaskGroup
    on_file: FileCallback
    on_error: ErrorCallback


class TreeWalker:
    """Visit every regular file under a directory, skipping excluded subtrees.

    Each directory listing and each entry inspection runs as its own task
    in a single :class:`asyncio.TaskGroup`; blocking filesystem calls are
    pushed to worker threads. The task group is the join for outstanding
    work: :meth:`walk` returns once every scheduled visit has finished.

    Failures are reported through ``on_error`` and only abandon the subtree
    they occurred in. If ``on_error`` (or ``on_file``) raises, the remaining
    work is cancelled and the exception propagates out of :meth:`walk`.
    """

    def __init__(self, excluded_dirs: Iterable[str] = ()) -> None:
        """Create a walker ignoring directories named in ``excluded_dirs``.

        Args:
            excluded_dirs: Directory base names whose subtrees are skipped at
                any depth.
        """

        self.excluded_dirs = frozenset(excluded_dirs)

    def is_excluded(self, directory: Path) -> bool:
        """Return whether the base name of ``directory`` is excluded."""

        return directory.name in self.excluded_dirs

    async def walk(self, directory: Path, on_file: FileCallback, on_error: ErrorCallback) -> None:
        """Traverse ``directory`` invoking ``on_file`` once per regular file.

        Args:
            directory: Directory to traverse.
            on_file: Callback receiving the full path of each regular file.
            on_error: Callback receiving a :class:`TraversalError` for each
                listing or status failure.

        Raises:
            Exception: The first exception raised by a callback.
        """

        try:
            async with asyncio.TaskGroup() as group:
                context = WalkContext(group=group, on_file=on_file, on_error=on_error)
                group.create_task(self._visit_directory(directory, context))
        except ExceptionGroup as errors:
            first = errors.exceptions[0]
            raise first from first.__cause__

    async def _visit_directory(self, directory: Path, context: WalkContext) -> None:
        """List ``directory`` and schedule one task per entry."""

        if self.is_excluded(directory):
            return
        try:
            names = await asyncio.to_thread(_list_directory, directory)
        except OSError as exc:
            await _invoke(context.on_error, TraversalError(directory, exc))
            return
        for name in names:
            context.group.create_task(self._visit_entry(directory / name, context))

    async def _visit_entry(self, path: Path, context: WalkContext) -> None:
        """Classify ``path`` and schedule recursion or the file callback."""

        try:
            status = await asyncio.to_thread(_lstat, path)
        except OSError as exc:
            await _invoke(context.on_error, TraversalError(path, exc))
            return
        if stat.S_ISDIR(status.st_mode):
            context.group.create_task(self._visit_directory(path, context))
        elif stat.S_ISREG(status.st_mode):
            context.group.create_task(_invoke(context.on_file, path))
        # symlinks, sockets, fifos and devices are ignored


async def walk(
    directory: Path,
    excluded_dirs: Iterable[str],
    on_file: FileCallback,
    on_error: ErrorCallback,
) -> None:
    """Traverse ``directory`` with a :class:`TreeWalker` for ``excluded_dirs``."""

    await TreeWalker(excluded_dirs).walk(directory, on_file, on_error)


__all__ = ["ErrorCallback", "FileCallback", "TreeWalker", "WalkContext", "walk"]
