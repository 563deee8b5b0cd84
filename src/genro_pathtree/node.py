# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree node content."""

from __future__ import annotations

from typing import Any


class PathTreeNode:
    """Content stored for one node of a PathTree.

    Each node has:
    - label: The node's local name (the last segment of its canonical path)
    - value: An opaque payload, or None when absent

    The node is identified in the store by its canonical path, so it keeps
    no reference to parent or children.

    Example:
        >>> node = PathTreeNode('port', 5432)
        >>> node.label
        'port'
        >>> node.value
        5432
    """

    __slots__ = ('label', 'value')

    def __init__(self, label: str, value: Any = None) -> None:
        """Initialize a PathTreeNode.

        Args:
            label: The node's local name.
            value: The node's payload.
        """
        self.label = label
        self.value = value

    def __repr__(self) -> str:
        return f"PathTreeNode({self.label!r}, value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathTreeNode):
            return NotImplemented
        return self.label == other.label and self.value == other.value

    __hash__ = None  # type: ignore[assignment]
