"""
Low-level XML parsing utilities for NITF documents.

Key points:
1. Parsing is delegated to lxml with a hardened parser (no entity
   resolution, no network, no DTD loading)
2. NITF files are frequently namespaced, so every lookup matches on the
   local tag name rather than the qualified one
3. The <nitf> element is normally the root but may be nested in a wrapper
"""

import logging
import time
from typing import Iterator, List, Optional, Union

from lxml import etree

from nitf_text.config import get_parser_config
from nitf_text.errors import InvalidDocumentError, ParseError

logger = logging.getLogger(__name__)

NITF_ROOT_TAG = 'nitf'


def build_parser(
    encoding: Optional[str] = None,
    recover: Optional[bool] = None,
    huge_tree: Optional[bool] = None
) -> etree.XMLParser:
    """
    Create the lxml parser used for NITF input.

    Entities declared in the document's internal DTD subset are expanded
    into text; external entities are never resolved and the network is
    never touched.
    libxml2 keeps its entity amplification guard and, unless huge_tree is
    enabled, its depth and text-size limits.

    Args:
        encoding: Force an input encoding (None honours the XML declaration)
        recover: Override ParserConfig.recover
        huge_tree: Override ParserConfig.huge_tree

    Returns:
        Configured etree.XMLParser
    """
    config = get_parser_config()
    return etree.XMLParser(
        encoding=encoding,
        recover=config.recover if recover is None else recover,
        huge_tree=config.huge_tree if huge_tree is None else huge_tree,
        resolve_entities='internal',
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
    )


def load_xml(xml: Union[str, bytes], parser: Optional[etree.XMLParser] = None) -> etree._Element:
    """
    Parse raw XML into an lxml element tree and return its root.

    String input is encoded as UTF-8 and the parser is pinned to UTF-8, so
    an encoding declaration inside the string never conflicts with it.
    Bytes input is decoded according to its own XML declaration.

    Args:
        xml: XML document as text or bytes
        parser: Optional parser (defaults to build_parser())

    Returns:
        Root element of the parsed tree

    Raises:
        InvalidDocumentError: If the input is empty (there is no root element)
        ParseError: If lxml rejects the input
    """
    if xml is None or len(xml) == 0:
        raise InvalidDocumentError(
            "Document does not appear to be valid NITF (missing <nitf> root element)"
        )

    data = xml.encode('utf-8') if isinstance(xml, str) else xml
    if parser is None:
        parser = build_parser(encoding='utf-8' if isinstance(xml, str) else None)

    started = time.perf_counter()
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Failed to parse XML: {e}") from e

    if root is None:
        # recover mode gives up silently on input with no usable element
        raise ParseError("Failed to parse XML: no root element could be recovered")

    logger.debug(
        f"Parsed {len(data):,} bytes of XML in "
        f"{(time.perf_counter() - started) * 1000:.1f} ms"
    )
    return root


def find_nitf_root(root: etree._Element) -> etree._Element:
    """
    Locate the <nitf> element.

    Direct root access covers the common case; a document-order search of
    the tree covers NITF wrapped inside another element.

    Raises:
        InvalidDocumentError: If no <nitf> element exists
    """
    if is_element(root) and local_name(root) == NITF_ROOT_TAG:
        return root

    nested = first_descendant(root, NITF_ROOT_TAG)
    if nested is None:
        raise InvalidDocumentError(
            "Document does not appear to be valid NITF (missing <nitf> root element)"
        )

    logger.debug("Found <nitf> element nested below the document root")
    return nested


# === Node helpers ===

def is_element(node) -> bool:
    """True for element nodes; False for comments and processing instructions."""
    return isinstance(node.tag, str)


def local_name(element: etree._Element) -> str:
    """Tag name without its namespace."""
    return etree.QName(element).localname


def first_child(element: Optional[etree._Element], name: str) -> Optional[etree._Element]:
    """First direct child element with the given local name, or None."""
    if element is None:
        return None
    for child in element:
        if is_element(child) and local_name(child) == name:
            return child
    return None


def children(element: Optional[etree._Element], name: str) -> List[etree._Element]:
    """All direct child elements with the given local name."""
    if element is None:
        return []
    return [c for c in element if is_element(c) and local_name(c) == name]


def descendants(element: Optional[etree._Element], *names: str) -> List[etree._Element]:
    """All descendant elements whose local name is one of names, in document order."""
    if element is None:
        return []
    wanted = set(names)
    return [
        d for d in element.iterdescendants()
        if is_element(d) and local_name(d) in wanted
    ]


def first_descendant(element: Optional[etree._Element], name: str) -> Optional[etree._Element]:
    """First descendant element with the given local name, or None."""
    if element is None:
        return None
    for d in element.iterdescendants():
        if is_element(d) and local_name(d) == name:
            return d
    return None


def direct_text_nodes(element: etree._Element) -> Iterator[str]:
    """
    Yield the element's immediate text nodes in document order.

    lxml stores these as the element's .text plus the .tail of each child
    (comments and processing instructions included, since their tail text
    belongs to this element).
    """
    if element.text is not None:
        yield element.text
    for child in element:
        if child.tail is not None:
            yield child.tail


def first_text(element: Optional[etree._Element]) -> Optional[str]:
    """
    First immediate text node of an element, stripped.

    Returns None when the element is missing or has no direct text.
    """
    if element is None:
        return None
    return next((t.strip() for t in direct_text_nodes(element)), None)


def child_text(element: Optional[etree._Element], name: str) -> Optional[str]:
    """Stripped first text node of the first child with the given name."""
    return first_text(first_child(element, name))


def attr(element: Optional[etree._Element], name: str) -> Optional[str]:
    """Attribute value, or None when the element or attribute is missing."""
    if element is None:
        return None
    return element.get(name)


def compact(data: dict) -> dict:
    """Drop None values from a dict."""
    return {k: v for k, v in data.items() if v is not None}
