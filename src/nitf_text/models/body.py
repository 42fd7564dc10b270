"""
Body model: body.head (headline, byline, dateline...), body.content
(paragraphs, media, quotes, lists, tables) and body.end (tagline, notes).
"""

import logging
from functools import cached_property
from typing import Dict, List, Optional

from lxml import etree

from nitf_text.parsers.xml_parser import (
    child_text,
    children,
    compact,
    descendants,
    first_child,
    first_text,
    local_name,
)
from .byline import Byline
from .footnote import Footnote
from .headline import Headline
from .media import Media
from .paragraph import Paragraph

logger = logging.getLogger(__name__)

LIST_TAGS = ('ul', 'ol', 'dl')
LIST_ITEM_TAGS = ('li', 'dt', 'dd')


def _texts(elements: List[etree._Element]) -> List[str]:
    return [t for t in (first_text(e) for e in elements) if t is not None]


class Body:
    """A <body> element."""

    def __init__(self, node: etree._Element):
        self.node = node

    # === Sections ===

    @cached_property
    def body_head(self) -> Optional[etree._Element]:
        return first_child(self.node, 'body.head')

    @cached_property
    def body_content(self) -> Optional[etree._Element]:
        return first_child(self.node, 'body.content')

    @cached_property
    def body_end(self) -> Optional[etree._Element]:
        return first_child(self.node, 'body.end')

    # === body.head ===

    @cached_property
    def headline(self) -> Optional[Headline]:
        node = first_child(self.body_head, 'headline')
        return Headline(node) if node is not None else None

    @cached_property
    def byline(self) -> Optional[Byline]:
        node = first_child(self.body_head, 'byline')
        return Byline(node) if node is not None else None

    @cached_property
    def dateline(self) -> Optional[str]:
        return child_text(self.body_head, 'dateline')

    @cached_property
    def abstract(self) -> Optional[str]:
        return child_text(self.body_head, 'abstract')

    @cached_property
    def distributor(self) -> Optional[str]:
        return child_text(self.body_head, 'distributor')

    @cached_property
    def series(self) -> Optional[Dict[str, str]]:
        node = first_child(self.body_head, 'series')
        if node is None:
            return None
        return compact({
            "name": node.get('series.name'),
            "part": node.get('series.part'),
            "totalpart": node.get('series.totalpart'),
        })

    # === body.content ===

    @cached_property
    def paragraphs(self) -> List[Paragraph]:
        """Every <p> in body.content, in document order."""
        paragraphs = [Paragraph(p) for p in descendants(self.body_content, 'p')]
        logger.debug(f"Found {len(paragraphs)} paragraphs in body.content")
        return paragraphs

    @cached_property
    def media(self) -> List[Media]:
        return [Media(m) for m in descendants(self.body_content, 'media')]

    @cached_property
    def block_quotes(self) -> List[str]:
        """Text of each <block> inside a <bq>."""
        blocks = [
            block
            for bq in descendants(self.body_content, 'bq')
            for block in children(bq, 'block')
        ]
        return _texts(blocks)

    @cached_property
    def lists(self) -> List[dict]:
        """Lists with their type (ul/ol/dl) and item texts."""
        return [
            {
                "type": local_name(lst),
                "items": _texts(descendants(lst, *LIST_ITEM_TAGS)),
            }
            for lst in descendants(self.body_content, *LIST_TAGS)
        ]

    @cached_property
    def tables(self) -> List[etree._Element]:
        """Raw <table> elements."""
        return descendants(self.body_content, 'table')

    @cached_property
    def footnotes(self) -> List[Footnote]:
        """Footnotes from body.content followed by those in body.end."""
        nodes = descendants(self.body_content, 'fn') + descendants(self.body_end, 'fn')
        return [Footnote(fn) for fn in nodes]

    # === body.end ===

    @cached_property
    def body_end_content(self) -> dict:
        if self.body_end is None:
            return {}
        return {
            "tagline": child_text(self.body_end, 'tagline'),
            "notes": _texts(descendants(self.body_end, 'note')),
            "bibliography": _texts(descendants(self.body_end, 'biblio')),
        }

    @property
    def tagline(self) -> Optional[str]:
        return self.body_end_content.get("tagline")

    @property
    def notes(self) -> List[str]:
        return self.body_end_content.get("notes", [])

    @property
    def bibliography(self) -> List[str]:
        return self.body_end_content.get("bibliography", [])

    def to_dict(self) -> dict:
        return compact({
            "headline": self.headline.to_dict() if self.headline else None,
            "byline": self.byline.to_dict() if self.byline else None,
            "dateline": self.dateline,
            "abstract": self.abstract,
            "distributor": self.distributor,
            "series": self.series,
            "paragraphs": [p.to_dict() for p in self.paragraphs],
            "media": [m.to_dict() for m in self.media] or None,
            "block_quotes": self.block_quotes or None,
            "lists": self.lists or None,
            "footnotes": [f.to_dict() for f in self.footnotes] or None,
            "tagline": self.tagline,
            "notes": self.notes or None,
        })
