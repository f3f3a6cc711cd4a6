# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers for the change_version package."""

from __future__ import annotations

from .walker import ErrorCallback, FileCallback, TreeWalker, walk

__all__ = ["ErrorCallback", "FileCallback", "TreeWalker", "walk"]
