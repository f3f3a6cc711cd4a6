# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Create a small project containing eligible, ineligible and excluded files."""

    (tmp_path / "style.css").write_text('a { content: "v4.5.0"; }\n', encoding="utf-8")
    (tmp_path / "README").write_text("Release v4.5.0\n", encoding="utf-8")
    (tmp_path / "data.bin").write_bytes(b"\x00\x014.5.0\xff")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "index.md").write_text("Install 4.5.0 today.\n", encoding="utf-8")
    (tmp_path / "docs" / "notes.txt").write_text("Nothing to see.\n", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "lib.css").write_text("/* v4.5.0 */\n", encoding="utf-8")
    (tmp_path / "docs" / "dist").mkdir()
    (tmp_path / "docs" / "dist" / "bundle.js").write_text("var v = '4.5.0';\n", encoding="utf-8")
    return tmp_path


def _read_tree(root: Path) -> dict[Path, bytes]:
    return {path: path.read_bytes() for path in sorted(root.rglob("*")) if path.is_file()}


@pytest.fixture
def snapshot() -> Callable[[Path], dict[Path, bytes]]:
    """Return a helper capturing the bytes of every regular file under a root."""

    return _read_tree
