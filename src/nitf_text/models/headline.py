"""
Headline model for NITF body.head.

NITF headlines have a primary level (<hl1>) and an optional secondary
level (<hl2>).
"""

from functools import cached_property
from typing import List, Optional

from lxml import etree

from nitf_text.parsers.xml_parser import child_text, compact

HEADLINE_SEPARATOR = " - "


class Headline:
    """A <headline> element with its hl1/hl2 levels."""

    def __init__(self, node: etree._Element):
        self.node = node

    @cached_property
    def primary(self) -> Optional[str]:
        """Main headline (<hl1>)."""
        return child_text(self.node, 'hl1')

    @cached_property
    def secondary(self) -> Optional[str]:
        """Secondary headline (<hl2>)."""
        return child_text(self.node, 'hl2')

    @property
    def hl1(self) -> Optional[str]:
        return self.primary

    @property
    def hl2(self) -> Optional[str]:
        return self.secondary

    @property
    def all(self) -> List[str]:
        """Present headline levels in order."""
        return [h for h in (self.primary, self.secondary) if h is not None]

    def __str__(self) -> str:
        return HEADLINE_SEPARATOR.join(self.all)

    @property
    def is_present(self) -> bool:
        return self.primary is not None or self.secondary is not None

    def to_dict(self) -> dict:
        return compact({
            "primary": self.primary,
            "secondary": self.secondary,
        })
