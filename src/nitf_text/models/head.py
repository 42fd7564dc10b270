"""
Head model: title, docdata, publication data, revision history and meta tags.
"""

from functools import cached_property
from typing import Dict, List, Optional

from lxml import etree

from nitf_text.parsers.xml_parser import child_text, children, compact, first_child
from .docdata import Docdata

# pubdata attribute -> output key
PUBDATA_FIELDS = {
    'type': 'type',
    'date.publication': 'date_publication',
    'name': 'name',
    'issn': 'issn',
    'volume': 'volume',
    'number': 'number',
    'edition.name': 'edition',
    'position.section': 'position_section',
    'position.sequence': 'position_sequence',
}

REVISION_FIELDS = ('comment', 'name', 'function', 'norm')


class Head:
    """A <head> element."""

    def __init__(self, node: etree._Element):
        self.node = node

    @cached_property
    def title(self) -> Optional[str]:
        return child_text(self.node, 'title')

    @cached_property
    def docdata(self) -> Optional[Docdata]:
        node = first_child(self.node, 'docdata')
        return Docdata(node) if node is not None else None

    @cached_property
    def pubdata(self) -> Dict[str, str]:
        """Publication metadata from <pubdata> attributes."""
        node = first_child(self.node, 'pubdata')
        if node is None:
            return {}
        return compact({key: node.get(name) for name, key in PUBDATA_FIELDS.items()})

    @cached_property
    def revision_history(self) -> List[Dict[str, str]]:
        return [
            compact({name: rev.get(name) for name in REVISION_FIELDS})
            for rev in children(self.node, 'revision-history')
        ]

    @cached_property
    def keywords(self) -> List[str]:
        """content of every <meta name="keywords">."""
        return [
            m.get('content')
            for m in children(self.node, 'meta')
            if m.get('name') == 'keywords' and m.get('content') is not None
        ]

    @cached_property
    def meta(self) -> Dict[str, Optional[str]]:
        """Meta tags as name -> content (later tags win)."""
        result = {}
        for m in children(self.node, 'meta'):
            name = m.get('name')
            if name:
                result[name] = m.get('content')
        return result

    def to_dict(self) -> dict:
        return compact({
            "title": self.title,
            "docdata": self.docdata.to_dict() if self.docdata else None,
            "pubdata": self.pubdata or None,
            "revision_history": self.revision_history or None,
            "keywords": self.keywords or None,
            "meta": self.meta or None,
        })
