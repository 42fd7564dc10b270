"""
Footnote model.

Footnotes (<fn>) appear in body.content or body.end and carry a label
(<fn-label>, the reference marker) and a value (<fn-value>).
"""

from functools import cached_property
from typing import Optional

from lxml import etree

from nitf_text.parsers.xml_parser import child_text, compact


class Footnote:
    """An <fn> element."""

    def __init__(self, node: etree._Element):
        self.node = node

    @property
    def id(self) -> Optional[str]:
        return self.node.get('id')

    @cached_property
    def label(self) -> Optional[str]:
        """Reference marker, e.g. "1", "*" or "a"."""
        return child_text(self.node, 'fn-label')

    @cached_property
    def value(self) -> Optional[str]:
        """Footnote text."""
        return child_text(self.node, 'fn-value')

    @property
    def text(self) -> Optional[str]:
        return self.value

    @property
    def content(self) -> Optional[str]:
        return self.value

    @property
    def is_present(self) -> bool:
        return bool(self.value)

    def to_dict(self) -> dict:
        return compact({
            "id": self.id,
            "label": self.label,
            "value": self.value,
        })
