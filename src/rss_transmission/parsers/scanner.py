"""
Streaming XML token scanner.

Turns raw feed content into a lazy sequence of structural events using
lxml's pull parser. Only elements matter for link extraction, so text
content, comments and processing instructions are dropped.

Event semantics:
- ElementOpen / ElementClose bracket every element that has child
  elements or non-whitespace text.
- ElementEmpty is emitted for every childless element without text,
  whether it was written as <a/> or <a></a>. It carries the element's
  attributes and has no matching close event.
- EndOfDocument is always the last event of a well-formed document.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union
import logging

from lxml import etree

from rss_transmission.exceptions import ParseError

logger = logging.getLogger(__name__)

# Bytes handed to the parser per feed() call
CHUNK_SIZE = 64 * 1024

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'

Attributes = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class ElementOpen:
    name: str


@dataclass(frozen=True)
class ElementClose:
    name: str


@dataclass(frozen=True)
class ElementEmpty:
    name: str
    attributes: Attributes = ()


@dataclass(frozen=True)
class EndOfDocument:
    pass


Event = Union[ElementOpen, ElementClose, ElementEmpty, EndOfDocument]


def _split_clark(tag: str) -> Tuple[Optional[str], str]:
    """Split lxml's '{uri}local' notation into (uri, local)."""
    if tag.startswith('{'):
        uri, local = tag[1:].split('}', 1)
        return uri, local
    return None, tag


def element_name(element) -> str:
    """
    Literal tag name of an element as written in the document.

    Prefixed elements keep their prefix ('media:content'); elements in a
    default namespace are reported by local name.
    """
    _, local = _split_clark(element.tag)
    if element.prefix:
        return f"{element.prefix}:{local}"
    return local


def _declared_prefixes(node) -> dict:
    """Namespace prefixes declared on this node itself, not inherited."""
    parent = node.getparent()
    inherited = parent.nsmap if parent is not None else {}
    return {
        prefix: uri for prefix, uri in node.nsmap.items()
        if inherited.get(prefix) != uri
    }


def attribute_name(key: str, element) -> str:
    """
    Literal attribute name, restoring the prefix for namespaced keys.

    lxml only keeps the namespace URI of an attribute, not the prefix it
    was written with. When several prefixes are bound to that URI, the
    element's own prefix wins, then the declaration closest to the
    element.
    """
    uri, local = _split_clark(key)
    if uri is None:
        return local
    if uri == XML_NAMESPACE:
        return f"xml:{local}"

    if element.prefix and element.nsmap.get(element.prefix) == uri:
        return f"{element.prefix}:{local}"

    node = element
    while node is not None:
        for prefix, ns in _declared_prefixes(node).items():
            # Attributes never live in the default namespace
            if ns == uri and prefix is not None:
                return f"{prefix}:{local}"
        node = node.getparent()
    return local


def element_attributes(element) -> Attributes:
    """Attributes of an element as (key, value) pairs in document order."""
    return tuple(
        (attribute_name(key, element), value)
        for key, value in element.attrib.items()
    )


def _has_text(element) -> bool:
    return bool(element.text and element.text.strip())


class _EventTranslator:
    """
    Converts lxml start/end notifications into scanner events.

    An element's start is held back until it is known whether the element
    has children: a child start turns it into ElementOpen, an immediate
    end turns it into ElementEmpty.
    """

    def __init__(self):
        self._pending = None

    def translate(self, action: str, element) -> Iterator[Event]:
        if action == 'start':
            if self._pending is not None:
                yield ElementOpen(element_name(self._pending))
            self._pending = element
            return

        # action == 'end'
        if element is self._pending:
            self._pending = None
            if _has_text(element):
                name = element_name(element)
                yield ElementOpen(name)
                yield ElementClose(name)
            else:
                yield ElementEmpty(element_name(element), element_attributes(element))
        else:
            yield ElementClose(element_name(element))

        # Everything needed from this subtree has been emitted
        element.clear(keep_tail=True)


def _make_parser(encoding: Optional[str]) -> etree.XMLPullParser:
    return etree.XMLPullParser(
        events=('start', 'end'),
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def scan(xml: Union[str, bytes]) -> Iterator[Event]:
    """
    Lazily tokenize XML into structural events.

    The returned iterator is forward-only and cannot be restarted.

    Args:
        xml: Feed content. Text is parsed as UTF-8 regardless of any
             encoding declaration it carries; bytes are decoded according
             to the document's own declaration.

    Yields:
        ElementOpen, ElementClose, ElementEmpty and finally EndOfDocument

    Raises:
        ParseError: If the content is not well-formed XML (raised while
                    iterating, no EndOfDocument is produced)

    Example:
        >>> list(scan('<rss><item url="x"/></rss>'))
        [ElementOpen(name='rss'), ElementEmpty(name='item', attributes=(('url', 'x'),)),
         ElementClose(name='rss'), EndOfDocument()]
    """
    if isinstance(xml, str):
        data = xml.encode('utf-8')
        parser = _make_parser('utf-8')
    else:
        data = bytes(xml)
        parser = _make_parser(None)

    translator = _EventTranslator()

    try:
        for offset in range(0, len(data), CHUNK_SIZE):
            parser.feed(data[offset:offset + CHUNK_SIZE])
            for action, element in parser.read_events():
                yield from translator.translate(action, element)

        parser.close()
        for action, element in parser.read_events():
            yield from translator.translate(action, element)
    except etree.XMLSyntaxError as e:
        logger.debug(f"XML tokenization failed after {len(data)} bytes input: {e}")
        raise ParseError(f"Malformed XML: {e}") from e

    yield EndOfDocument()
