"""
Attribute value lookup on matched elements.
"""

from typing import Iterable, List, Tuple, Union
import logging

logger = logging.getLogger(__name__)


def extract(
    attributes: Iterable[Tuple[str, Union[str, bytes]]],
    wanted_key: str
) -> List[str]:
    """
    Collect the values of every attribute named `wanted_key`.

    Attributes are visited in document order and all matches are kept,
    not just the first. A value that cannot be decoded as UTF-8 text is
    skipped; it never aborts the scan.

    Args:
        attributes: (key, value) pairs of one element
        wanted_key: Exact attribute name to look for

    Returns:
        Matching values in document order (empty if none)

    Example:
        >>> extract([('url', 'http://a/1'), ('type', 'x')], 'url')
        ['http://a/1']
    """
    values = []

    for key, value in attributes:
        if key != wanted_key:
            continue

        if isinstance(value, bytes):
            try:
                value = value.decode('utf-8')
            except UnicodeDecodeError as e:
                logger.debug(f"Skipping undecodable '{key}' attribute value: {e}")
                continue

        values.append(value)

    return values
