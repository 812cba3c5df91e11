"""
Exact tag-path matching against the scanner's ancestor stack.
"""

from typing import Sequence


def is_match(stack: Sequence[str], element_name: str, target: Sequence[str]) -> bool:
    """
    Check whether an element sits exactly at the target path.

    The candidate path is the ancestor stack with the element's own name
    appended. It matches only if it has the same length and the same tag
    names, in order, as the target. There is no prefix matching, case
    folding or namespace stripping.

    Args:
        stack: Names of the currently open ancestor elements, root first
               (empty at document root)
        element_name: Name of the element being visited
        target: Required tag path, root first

    Returns:
        True if stack + [element_name] == target

    Example:
        >>> is_match(['rss', 'channel'], 'item', ['rss', 'channel', 'item'])
        True
        >>> is_match(['rss'], 'item', ['rss', 'channel', 'item'])
        False
    """
    if len(stack) + 1 != len(target):
        return False

    if target[-1] != element_name:
        return False

    return all(a == b for a, b in zip(stack, target))
