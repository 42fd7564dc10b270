"""
Docdata model for the NITF head.

Docdata carries document management metadata: ids, dates, urgency,
copyright, series, editorial status and identified content (the people,
organizations, locations and subjects the article is about).
"""

import logging
import re
from datetime import date
from functools import cached_property
from typing import Dict, List, Optional

from lxml import etree

from nitf_text.parsers.xml_parser import attr, children, compact, first_child, first_text

logger = logging.getLogger(__name__)

_NORM_DATE = re.compile(r'^\s*(\d{4})-?(\d{2})-?(\d{2})')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_norm_date(norm: Optional[str]) -> Optional[date]:
    """
    Parse the date part of an NITF norm attribute.

    Accepts the ISO 8601 basic (20240115T090000Z) and extended
    (2024-01-15) forms; anything after the date is ignored.

    Returns:
        date, or None if norm is missing or not a real calendar date
    """
    if not norm:
        return None
    m = _NORM_DATE.match(norm)
    if m is None:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def leading_int(value: Optional[str]) -> Optional[int]:
    """Integer prefix of an attribute value; 0 when there is none, None when missing."""
    if value is None:
        return None
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else 0


class Docdata:
    """A <docdata> element."""

    def __init__(self, node: etree._Element):
        self.node = node

    @cached_property
    def doc_id(self) -> Optional[str]:
        """id-string attribute of <doc-id>."""
        return attr(first_child(self.node, 'doc-id'), 'id-string')

    def _date(self, name: str) -> Optional[date]:
        norm = attr(first_child(self.node, name), 'norm')
        parsed = parse_norm_date(norm)
        if norm and parsed is None:
            logger.debug(f"Unparseable <{name}> norm value: {norm!r}")
        return parsed

    @cached_property
    def issue_date(self) -> Optional[date]:
        return self._date('date.issue')

    @cached_property
    def release_date(self) -> Optional[date]:
        return self._date('date.release')

    @cached_property
    def expire_date(self) -> Optional[date]:
        return self._date('date.expire')

    @cached_property
    def urgency(self) -> Optional[int]:
        """ed-urg of <urgency>, 1 (most urgent) to 8; 0 if not numeric."""
        return leading_int(attr(first_child(self.node, 'urgency'), 'ed-urg'))

    @cached_property
    def copyright(self) -> Dict[str, str]:
        """Holder and year from <doc.copyright>."""
        node = first_child(self.node, 'doc.copyright')
        if node is None:
            return {}
        return compact({
            "holder": node.get('holder'),
            "year": node.get('year'),
        })

    @property
    def copyright_holder(self) -> Optional[str]:
        return self.copyright.get("holder")

    @property
    def copyright_year(self) -> Optional[str]:
        return self.copyright.get("year")

    @cached_property
    def doc_scope(self) -> Optional[str]:
        return attr(first_child(self.node, 'doc-scope'), 'scope')

    @cached_property
    def series(self) -> dict:
        """Series name, part and total part count."""
        node = first_child(self.node, 'series')
        if node is None:
            return {}
        return compact({
            "name": node.get('series.name'),
            "part": leading_int(node.get('series.part')),
            "total": leading_int(node.get('series.totalpart')),
        })

    @cached_property
    def management_status(self) -> Dict[str, str]:
        """Editorial message (<ed-msg>) info and type."""
        node = first_child(self.node, 'ed-msg')
        if node is None:
            return {}
        return compact({
            "info": node.get('info'),
            "message_type": node.get('msg-type'),
        })

    @cached_property
    def fixture(self) -> Optional[str]:
        return attr(first_child(self.node, 'fixture'), 'fix-id')

    @cached_property
    def identified_content(self) -> Dict[str, List[str]]:
        """Subjects, locations, organizations and people from <identified-content>."""
        node = first_child(self.node, 'identified-content')
        if node is None:
            return {}

        def texts(elements: List[etree._Element]) -> List[str]:
            return [t for t in (first_text(e) for e in elements) if t is not None]

        return {
            "subjects": texts([
                c for c in children(node, 'classifier') if c.get('type') == 'subject'
            ]),
            "locations": texts(children(node, 'location')),
            "organizations": texts(children(node, 'org')),
            "people": texts(children(node, 'person')),
        }

    @property
    def subjects(self) -> List[str]:
        return self.identified_content.get("subjects", [])

    @property
    def locations(self) -> List[str]:
        return self.identified_content.get("locations", [])

    @property
    def organizations(self) -> List[str]:
        return self.identified_content.get("organizations", [])

    @property
    def people(self) -> List[str]:
        return self.identified_content.get("people", [])

    def to_dict(self) -> dict:
        return compact({
            "doc_id": self.doc_id,
            "issue_date": self.issue_date.isoformat() if self.issue_date else None,
            "release_date": self.release_date.isoformat() if self.release_date else None,
            "expire_date": self.expire_date.isoformat() if self.expire_date else None,
            "urgency": self.urgency,
            "copyright": self.copyright or None,
            "doc_scope": self.doc_scope,
            "fixture": self.fixture,
            "series": self.series or None,
            "management_status": self.management_status or None,
            "subjects": self.subjects or None,
            "locations": self.locations or None,
            "organizations": self.organizations or None,
            "people": self.people or None,
        })
