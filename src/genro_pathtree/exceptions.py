# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree exceptions."""

from __future__ import annotations


class PathTreeError(Exception):
    """Base exception for PathTree errors."""

    pass


class InvalidStoreError(PathTreeError, TypeError):
    """Raised when a store is not a directed, non-compound, non-multi graph."""

    pass


class InvalidNameError(PathTreeError, ValueError):
    """Raised when a local name would corrupt path syntax."""

    def __init__(self, name: object) -> None:
        super().__init__(
            f"Invalid node name {name!r}: names must be non-empty and "
            f"contain neither '/' nor '.'"
        )
        self.name = name


class NoSuchChildError(PathTreeError, KeyError):
    """Raised when a named child does not exist under the current context."""

    def __init__(self, name: str, context: str) -> None:
        super().__init__(f"No child '{name}' under '{context}'")
        self.name = name
        self.context = context

    def __str__(self) -> str:
        return str(self.args[0])


class NotALeafError(PathTreeError):
    """Raised when a leaf-only removal targets a node with children."""

    def __init__(self, path: str) -> None:
        super().__init__(f"'{path}' has children, use remove_subtree=True")
        self.path = path


class PathNotFoundError(PathTreeError, KeyError):
    """Raised when a path expression resolves to a missing node."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path '{path}' not found")
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])
