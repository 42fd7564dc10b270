"""
Byline model for NITF body.head.
"""

from functools import cached_property
from typing import Optional

from lxml import etree

from nitf_text.parsers.text_extractor import extract_all_text
from nitf_text.parsers.xml_parser import child_text, compact


class Byline:
    """
    A <byline> element: author name, title/role, location and affiliation.

    Example:
        >>> doc.byline.text
        'By Jane Smith, Senior Technology Reporter'
        >>> doc.byline.person
        'Jane Smith'
    """

    def __init__(self, node: etree._Element):
        self.node = node

    @cached_property
    def text(self) -> str:
        """Full byline text including nested elements."""
        return extract_all_text(self.node).strip()

    def __str__(self) -> str:
        return self.text

    @cached_property
    def person(self) -> Optional[str]:
        """Author name from <person>."""
        return child_text(self.node, 'person')

    @cached_property
    def title(self) -> Optional[str]:
        """Author title or role from <byttl>."""
        return child_text(self.node, 'byttl')

    @cached_property
    def location(self) -> Optional[str]:
        return child_text(self.node, 'location')

    @cached_property
    def org(self) -> Optional[str]:
        """Organization or affiliation from <org>."""
        return child_text(self.node, 'org')

    @property
    def is_present(self) -> bool:
        return bool(self.text)

    def to_dict(self) -> dict:
        return compact({
            "text": self.text,
            "person": self.person,
            "title": self.title,
            "location": self.location,
            "org": self.org,
        })
