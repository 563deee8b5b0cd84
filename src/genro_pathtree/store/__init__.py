# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - graph storage for PathTree.

This package provides the GraphStore class, the node/edge container a
PathTree writes its nodes into. Nodes are keyed by canonical path and
edges always run parent -> child.

Example:
    >>> from genro_pathtree import GraphStore, PathTree
    >>> store = GraphStore()
    >>> tree = PathTree(store)
    >>> store.has_node('/')
    True
"""

from .core import GraphStore

__all__ = ["GraphStore"]
