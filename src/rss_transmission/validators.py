"""
Reusable field validators for Pydantic models.

These validators are shared by the configuration schema and the
ParserRule model and can be used with the Pydantic @field_validator
decorator for automatic input validation.
"""

from typing import Sequence, Tuple


def split_tag_path(path: str) -> Tuple[str, ...]:
    """
    Split a comma-separated tag path into tag names.

    The string is split on ',' only. Whitespace is NOT trimmed, so a
    space after a comma becomes part of the next tag name.

    Args:
        path: Comma-separated tag path (e.g., 'rss,channel,item')

    Returns:
        Tuple of tag names in root-to-leaf order

    Example:
        >>> split_tag_path('rss,channel,item')
        ('rss', 'channel', 'item')
        >>> split_tag_path('rss, channel, item')
        ('rss', ' channel', ' item')
    """
    return tuple(path.split(','))


def validate_tag_path(tags: Sequence[str]) -> Tuple[str, ...]:
    """
    Validate a tag path (root-to-leaf sequence of element names).

    Args:
        tags: Sequence of tag names

    Returns:
        The tag names as a tuple (unchanged otherwise)

    Raises:
        ValueError: If the path is empty or contains an empty tag name

    Example:
        >>> validate_tag_path(['rss', 'channel', 'item'])
        ('rss', 'channel', 'item')
        >>> validate_tag_path([])  # Raises ValueError
    """
    tags = tuple(tags)

    if not tags:
        raise ValueError(
            "Tag path must contain at least one tag name\n"
            "Example: 'rss,channel,item'"
        )

    empty = [i for i, tag in enumerate(tags) if not tag]
    if empty:
        raise ValueError(
            f"Tag path contains empty tag names at positions {empty}: {list(tags)}\n"
            f"Check for doubled or trailing commas in the path"
        )

    return tags


def validate_attribute_name(name: str) -> str:
    """
    Validate the name of the attribute that carries the download link.

    Raises:
        ValueError: If the name is empty
    """
    if not name:
        raise ValueError(
            "Attribute name must not be empty\n"
            "Example: 'url'"
        )

    return name
