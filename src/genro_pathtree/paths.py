# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path utilities - name validation and path normalization.

Canonical paths are absolute, '/'-joined sequences of local names. The
root is the lone separator '/'. Path expressions accepted by
:func:`normalize` may also be relative and may contain the '.' (current)
and '..' (parent) tokens.

Example:
    >>> normalize('../b/./c', '/a')
    '/b/c'
    >>> normalize('/../..')
    '/'
"""

from __future__ import annotations

from .exceptions import InvalidNameError

SEPARATOR = '/'
CURRENT = '.'
PARENT = '..'
ROOT = SEPARATOR


def validate_name(name: str) -> str:
    """Check that a local name can be stored without breaking path syntax.

    A name is rejected when it is empty, not a string, contains the
    separator, or contains a '.' character anywhere. Rejecting every dot,
    not only the exact '.' and '..' names, keeps each stored name free of
    the current and parent tokens, so names such as 'config.yaml' must be
    stored as 'config_yaml' or carry the extension in the value.

    Args:
        name: Candidate local name.

    Returns:
        The name itself, for inline use.

    Raises:
        InvalidNameError: If the name is not acceptable.
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError(name)
    if SEPARATOR in name or CURRENT in name:
        raise InvalidNameError(name)
    return name


def normalize(expression: str, context: str = ROOT) -> str:
    """Resolve a path expression against a context into a canonical path.

    Pure function: the store is never consulted. Moving above the root
    clamps at the root.

    Args:
        expression: Absolute ('/a/b') or relative ('a/b', '..', '.') path.
        context: Canonical path the relative expression starts from.

    Returns:
        The canonical absolute path.
    """
    if not expression.startswith(SEPARATOR):
        expression = context + SEPARATOR + expression

    stack: list[str] = []
    for segment in expression.split(SEPARATOR):
        if not segment or segment == CURRENT:
            continue
        if segment == PARENT:
            if stack:
                stack.pop()
            continue
        stack.append(segment)

    return SEPARATOR + SEPARATOR.join(stack)


def join(parent: str, name: str) -> str:
    """Return the canonical path of child `name` under canonical `parent`."""
    if parent == ROOT:
        return ROOT + name
    return parent + SEPARATOR + name


def basename(path: str) -> str:
    """Return the local name of a canonical path ('/' for the root)."""
    if path == ROOT:
        return ROOT
    return path.rsplit(SEPARATOR, 1)[1]


def dirname(path: str) -> str:
    """Return the parent canonical path ('/' for the root itself)."""
    return normalize(PARENT, path)


def is_within(path: str, ancestor: str) -> bool:
    """True if `path` is `ancestor` or lies below it."""
    if ancestor == ROOT:
        return True
    return path == ancestor or path.startswith(ancestor + SEPARATOR)
