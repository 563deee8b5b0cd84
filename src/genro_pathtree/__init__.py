# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PathTree - Addressable in-memory trees navigated by path.

A small library providing a tree of named, value-bearing nodes stored in
a graph and navigated through a current-node cursor with POSIX-style
paths ('/a/b', 'a/b', '.', '..').
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidNameError,
    InvalidStoreError,
    NoSuchChildError,
    NotALeafError,
    PathNotFoundError,
    PathTreeError,
)
from .node import PathTreeNode
from .paths import SEPARATOR, normalize, validate_name
from .store import GraphStore
from .tree import PathTree

__all__ = [
    # Core classes
    "PathTree",
    "PathTreeNode",
    "GraphStore",
    # Paths
    "SEPARATOR",
    "normalize",
    "validate_name",
    # Exceptions
    "PathTreeError",
    "InvalidStoreError",
    "InvalidNameError",
    "NoSuchChildError",
    "NotALeafError",
    "PathNotFoundError",
]
