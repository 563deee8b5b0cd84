# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree - a tree of named values navigated through a cursor.

This module provides the PathTree class. A PathTree keeps its nodes in a
GraphStore keyed by canonical path and remembers a single current node,
the context. Accessors read the context, mutators create and remove
children of the context, and path() moves the context.

Path Syntax:
    - Absolute: '/config/database'
    - Relative to the context: 'database/host'
    - Current node: '.'
    - Parent node: '..' (clamped at the root)

Example:
    Building and navigating::

        tree = PathTree()
        tree.set_child('config').path('config')
        tree.set_child('port', 5432).set_child('host', 'localhost')

        tree.path('/config/port').value  # 5432
        tree.path('..').children  # ['port', 'host']

    Removing::

        tree.path('/')
        tree.remove_child('config')  # NotALeafError: it has children
        tree.remove_child('config', remove_subtree=True)
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

import networkx as nx

from ..exceptions import (
    InvalidStoreError,
    NoSuchChildError,
    NotALeafError,
    PathNotFoundError,
)
from ..node import PathTreeNode
from ..paths import ROOT, basename, dirname, is_within, join, normalize, validate_name
from ..store import GraphStore

logger = logging.getLogger(__name__)

_MISSING = object()


class PathTree:
    """A hierarchical data container addressed by POSIX-style paths.

    PathTree provides:
    - set_child(name, value) / remove_child(name): Mutate the context's children
    - path(expression): Move the context
    - value, name, children, index, is_leaf, is_root: Read the context

    Mutators never move the context and every mutator or navigation method
    returns the PathTree itself for chaining.

    The store may be shared between several PathTree instances, each with
    its own context. Mutations through one are visible through the others;
    no coordination is done between them.

    Example:
        >>> tree = PathTree()
        >>> tree.set_child('a').path('a').set_child('b', 42)
        >>> tree.path('/a/b').value
        42
    """

    __slots__ = ('_store', '_context')

    def __init__(self, store: GraphStore | nx.Graph | None = None) -> None:
        """Initialize a PathTree with its context at the root.

        Args:
            store: Optional store to build the tree in. Can be:
                - None: a new directed GraphStore owned by this tree
                - GraphStore: used as is, shared with the caller
                - networkx graph: wrapped with GraphStore.from_graph

        Raises:
            InvalidStoreError: If the store is undirected, compound, a
                multigraph, or not a graph at all.
        """
        if store is None:
            store = GraphStore()
        elif isinstance(store, nx.Graph):
            store = GraphStore.from_graph(store)
        elif not isinstance(store, GraphStore):
            raise InvalidStoreError(
                f"store must be GraphStore or networkx graph, not {type(store).__name__}"
            )

        if not store.is_directed() or store.is_compound() or store.is_multigraph():
            raise InvalidStoreError(
                "Only a directed, non-compound graph (not a multigraph) can be a store"
            )

        self._store = store
        self._context = ROOT

        if not store.has_node(ROOT):
            store.add_node(ROOT, PathTreeNode(ROOT))

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathTree(context={self._context!r}, nodes={len(self._store)})"

    def __contains__(self, expression: str) -> bool:
        """Check if a path expression resolves to an existing node."""
        return self.exists(expression)

    # ==================== Context Accessors ====================

    @property
    def store(self) -> GraphStore:
        """Access the backing GraphStore."""
        return self._store

    @property
    def context(self) -> str:
        """Canonical path of the current node."""
        return self._context

    @property
    def value(self) -> Any:
        """Value of the current node, or None if no value was assigned."""
        return self._content(self._context).value

    @property
    def name(self) -> str:
        """Local name of the current node ('/' for the root)."""
        return self._content(self._context).label

    @property
    def children(self) -> list[str]:
        """Local names of the current node's children, in store order."""
        return [
            self._content(child).label
            for child in self._store.successors(self._context)
        ]

    @property
    def is_leaf(self) -> bool:
        """True if the current node has no children."""
        return not self._store.successors(self._context)

    @property
    def is_root(self) -> bool:
        """True if the current node is the root."""
        return self._context == ROOT

    @property
    def index(self) -> int | None:
        """Position of the current node among its parent's children.

        None for the root.
        """
        if self.is_root:
            return None
        return self._store.successors(dirname(self._context)).index(self._context)

    def _content(self, path: str) -> PathTreeNode:
        content = self._store.node(path)
        if content is None:
            # Node created by a foreign writer without content.
            return PathTreeNode(basename(path))
        return content

    # ==================== Node Lifecycle ====================

    def set_child(self, name: str, value: Any = _MISSING) -> PathTree:
        """Create or update a child of the current node.

        If the child exists and no value is passed, its value is left
        untouched. Passing a value (None included) overwrites it.

        Args:
            name: Local name of the child.
            value: Optional value for the child.

        Returns:
            This PathTree, with the context unchanged.

        Raises:
            InvalidNameError: If the name contains '/' or '.'.
            PathNotFoundError: If the current node no longer exists.

        Example:
            >>> tree.set_child('host', 'localhost').set_child('port', 5432)
        """
        validate_name(name)
        if not self._store.has_node(self._context):
            raise PathNotFoundError(self._context)

        child_path = join(self._context, name)
        exists = self._store.has_node(child_path)

        if value is not _MISSING:
            self._store.add_node(child_path, PathTreeNode(name, value))
            logger.debug("Set value of '%s'", child_path)
        elif not exists:
            self._store.add_node(child_path, PathTreeNode(name))

        if not exists:
            logger.debug("Created node '%s'", child_path)

        self._store.add_edge(self._context, child_path)
        return self

    def remove_child(self, name: str, remove_subtree: bool = False) -> PathTree:
        """Remove a child of the current node.

        Without remove_subtree only leaves can be removed. With it, the
        child and every node below it are removed by filtering the whole
        store, so the cost is proportional to the store size.

        The context is never moved, even when it lies inside the removed
        subtree: in that case it references a missing node until the next
        successful path() call.

        Args:
            name: Local name of the child.
            remove_subtree: Also remove the child's descendants.

        Returns:
            This PathTree, with the context unchanged.

        Raises:
            InvalidNameError: If the name contains '/' or '.'.
            NoSuchChildError: If the current node has no such child.
            NotALeafError: If the child has children and remove_subtree is False.
        """
        validate_name(name)
        child_path = join(self._context, name)

        if not self._store.has_edge(self._context, child_path):
            raise NoSuchChildError(name, self._context)

        if remove_subtree:
            survivors = self._store.filter_nodes(
                lambda path: not is_within(path, child_path)
            )
            removed = [n for n in self._store.nodes() if n not in survivors]
            self._store.remove_nodes(removed)
            logger.debug("Removed subtree '%s' (%d nodes)", child_path, len(removed))
        else:
            if self._store.successors(child_path):
                raise NotALeafError(child_path)
            self._store.remove_edge(self._context, child_path)
            self._store.remove_node(child_path)
            logger.debug("Removed node '%s'", child_path)

        return self

    # ==================== Navigation ====================

    def path(self, expression: str, silent: bool = False) -> PathTree:
        """Move the context along a path expression.

        Args:
            expression: Absolute or relative path, may contain '.' and '..'.
            silent: If True, a missing target leaves the context where it is
                instead of raising.

        Returns:
            This PathTree.

        Raises:
            PathNotFoundError: If the target does not exist and silent is False.

        Example:
            >>> tree.path('/a/b').path('..').path('./b')
        """
        target = normalize(expression, self._context)
        if not self._store.has_node(target):
            if silent:
                logger.debug("Ignored move to missing '%s'", target)
                return self
            raise PathNotFoundError(target)

        self._context = target
        logger.debug("Moved context to '%s'", target)
        return self

    def root(self) -> PathTree:
        """Move the context to the root."""
        return self.path(ROOT)

    def parent(self) -> PathTree:
        """Move the context to its parent. At the root the context stays."""
        return self.path(dirname(self._context))

    # ==================== Lookup ====================

    def exists(self, expression: str) -> bool:
        """Check if a path expression resolves to an existing node.

        The expression is resolved against the context, which is not moved.
        """
        return self._store.has_node(normalize(expression, self._context))

    def get_value(self, expression: str, default: Any = None) -> Any:
        """Get the value at a path expression without moving the context.

        Args:
            expression: Absolute or relative path.
            default: Returned if the path does not exist.

        Returns:
            The node value, or default.
        """
        target = normalize(expression, self._context)
        if not self._store.has_node(target):
            return default
        return self._content(target).value

    def walk(self) -> Iterator[tuple[str, PathTreeNode]]:
        """Yield (path, node) for every node below the context, depth first.

        Parents are yielded before their children; siblings follow store
        order. The context itself is not yielded.

        Example:
            >>> for path, node in tree.walk():
            ...     print(path, node.value)
        """
        def _walk_gen(parent: str) -> Iterator[tuple[str, PathTreeNode]]:
            for child in self._store.successors(parent):
                yield child, self._content(child)
                yield from _walk_gen(child)

        return _walk_gen(self._context)
