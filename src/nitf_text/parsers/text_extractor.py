"""
Mixed-content text extraction for NITF elements.

lxml's itertext() concatenates descendant text but knows nothing about
<br/>, which NITF uses for hard line breaks inside paragraphs and bylines.
extract_all_text() walks the subtree itself so a break becomes "\\n".
"""

from typing import List, Optional, Tuple, Iterator

from lxml import etree

from .xml_parser import direct_text_nodes, is_element, local_name

BREAK_TAG = 'br'


def extract_all_text(element: etree._Element) -> str:
    """
    Extract all text content from an element and its descendants.

    Text is concatenated in document order exactly as authored; nothing is
    trimmed or inserted between runs. Each <br> element contributes a single
    newline and its own children (if any) are ignored. Any other element
    contributes the extraction of its content at its position among its
    siblings.

    The walk uses an explicit stack, so deeply nested input cannot exhaust
    the interpreter's recursion limit.

    Args:
        element: lxml element to extract text from

    Returns:
        Concatenated text content ('' for an empty subtree)

    Example:
        >>> p = etree.fromstring('<p>Line one<br/>Line two</p>')
        >>> extract_all_text(p)
        'Line one\\nLine two'
    """
    parts: List[str] = []
    if element.text:
        parts.append(element.text)

    # Each frame: (iterator over an element's children, that element's tail).
    # The tail is emitted once the element's children are exhausted.
    stack: List[Tuple[Iterator[etree._Element], Optional[str]]] = [(iter(element), None)]

    while stack:
        children, _ = stack[-1]
        child = next(children, None)

        if child is None:
            _, tail = stack.pop()
            if tail:
                parts.append(tail)
            continue

        if not is_element(child):
            # Comment or processing instruction: only its tail is content
            if child.tail:
                parts.append(child.tail)
        elif local_name(child) == BREAK_TAG:
            parts.append('\n')
            if child.tail:
                parts.append(child.tail)
        else:
            if child.text:
                parts.append(child.text)
            stack.append((iter(child), child.tail))

    return ''.join(parts)


def direct_text(element: etree._Element) -> str:
    """
    Text of the element's immediate text nodes only (not recursive).

    Example:
        >>> person = etree.fromstring('<person><em>John</em> Doe</person>')
        >>> direct_text(person)
        ' Doe'
    """
    return ''.join(direct_text_nodes(element))
