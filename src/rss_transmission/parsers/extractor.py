"""
Link extraction driver.

Composes the scanner, path matcher and attribute extractor into a single
call: feed content + ParserRule -> download links in document order.
"""

from typing import List, Union
import logging

from rss_transmission.models.rule import ParserRule
from rss_transmission.parsers.scanner import (
    scan,
    ElementOpen,
    ElementClose,
    ElementEmpty,
    EndOfDocument
)
from rss_transmission.parsers.path_matcher import is_match
from rss_transmission.parsers.attribute_extractor import extract

logger = logging.getLogger(__name__)


def extract_urls(xml: Union[str, bytes], rule: ParserRule) -> List[str]:
    """
    Extract attribute values from every element at the rule's tag path.

    Each call owns its own ancestor stack, so concurrent calls on
    different documents are safe.

    Args:
        xml: Raw feed content
        rule: Tag path and attribute name to extract

    Returns:
        Extracted values in document order, duplicates kept

    Raises:
        ParseError: If the content is not well-formed XML. No partial
                    result is returned.

    Example:
        >>> rule = ParserRule.from_config('rss,channel,item', 'url')
        >>> extract_urls('<rss><channel><item url="http://a/1"/></channel></rss>', rule)
        ['http://a/1']
    """
    stack: List[str] = []
    urls: List[str] = []

    for event in scan(xml):
        if isinstance(event, ElementOpen):
            stack.append(event.name)
        elif isinstance(event, ElementClose):
            # Unbalanced close is tolerated as a no-op
            if stack:
                stack.pop()
        elif isinstance(event, ElementEmpty):
            if is_match(stack, event.name, rule.path):
                urls.extend(extract(event.attributes, rule.attribute))
        elif isinstance(event, EndOfDocument):
            break

    logger.debug(
        f"Extracted {len(urls)} value(s) for path '{rule.path_string}' "
        f"attribute '{rule.attribute}'"
    )

    return urls
