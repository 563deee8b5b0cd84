# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree package - cursor-based path tree.

This package provides the PathTree class: node lifecycle (set_child,
remove_child) over a GraphStore and navigation of a current-node context
with POSIX-style path expressions.

Example:
    >>> from genro_pathtree import PathTree
    >>> tree = PathTree()
    >>> tree.set_child('etc').path('etc').set_child('hosts', '127.0.0.1')
    >>> tree.path('/etc/hosts').value
    '127.0.0.1'
"""

from .core import PathTree

__all__ = ["PathTree"]
