"""
Paragraph model for NITF body content.

Paragraphs can contain inline markup (emphasis, links, entity tags).
Entity collections use lazy batch extraction: one traversal fills all of
them on first access to any entity property.
"""

from functools import cached_property
from typing import Optional

from lxml import etree

from nitf_text.config import get_types_config
from nitf_text.parsers.entity_extractor import EntityExtractionMixin, entity_match
from nitf_text.parsers.text_extractor import extract_all_text
from nitf_text.parsers.xml_parser import compact
from nitf_text.search.pattern import Query, build_search_pattern


class Paragraph(EntityExtractionMixin):
    """
    A <p> element from body.content.

    Example:
        >>> para = doc.paragraphs[0]
        >>> para.text
        'TechCorp Inc, led by John Doe.'
        >>> para.people
        ('John Doe',)
        >>> para.mentions_person("john")
        True
    """

    def __init__(self, node: etree._Element):
        self.node = node
        self._init_entities()

    @cached_property
    def text(self) -> str:
        """Plain text with inline markup removed and <br/> as newlines."""
        return extract_all_text(self.node).strip()

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        preview = self.text[:60] + "..." if len(self.text) > 60 else self.text
        return f"Paragraph(id={self.id!r}, text={preview!r})"

    @property
    def id(self) -> Optional[str]:
        """Paragraph id attribute."""
        return self.node.get('id')

    @property
    def lede(self) -> Optional[str]:
        """Raw lede attribute."""
        return self.node.get('lede')

    @property
    def is_lead(self) -> bool:
        """True if the lede attribute marks this as a lead paragraph."""
        return get_types_config().is_lede_value(self.lede)

    @property
    def inner_html(self) -> str:
        """Serialized inner XML of the paragraph."""
        parts = [self.node.text or ""]
        parts.extend(
            etree.tostring(child, encoding='unicode', with_tail=True)
            for child in self.node
        )
        return "".join(parts)

    @property
    def is_present(self) -> bool:
        """True if the paragraph has any text."""
        return bool(self.text)

    @property
    def word_count(self) -> int:
        """Approximate number of whitespace-separated words."""
        return len(self.text.split())

    # === Search helpers ===

    def contains(self, query: Query, case_sensitive: bool = False) -> bool:
        """Check if the paragraph text matches a literal or compiled pattern."""
        pattern = build_search_pattern(query, case_sensitive)
        return pattern.search(self.text) is not None

    def mentions_person(self, name: str, exact: bool = False) -> bool:
        """Check for a person (partial and case-insensitive unless exact)."""
        return entity_match(self.people, name, exact)

    def mentions_org(self, name: str, exact: bool = False) -> bool:
        """Check for an organization (partial and case-insensitive unless exact)."""
        return entity_match(self.organizations, name, exact)

    def mentions_location(self, name: str, exact: bool = False) -> bool:
        """Check for a location (partial and case-insensitive unless exact)."""
        return entity_match(self.locations, name, exact)

    def mentions(
        self,
        person: Optional[str] = None,
        org: Optional[str] = None,
        location: Optional[str] = None
    ) -> bool:
        """
        Check if any of the given entities is mentioned.

        Returns False when no entity is given.
        """
        if person is None and org is None and location is None:
            return False

        return (
            (person is not None and self.mentions_person(person))
            or (org is not None and self.mentions_org(org))
            or (location is not None and self.mentions_location(location))
        )

    @property
    def has_links(self) -> bool:
        return bool(self.links)

    @property
    def has_emphasis(self) -> bool:
        return bool(self.emphasis)

    @property
    def has_strong(self) -> bool:
        return bool(self.strong)

    @property
    def has_entities(self) -> bool:
        """True if the paragraph mentions any person, organization or location."""
        return bool(self.people or self.organizations or self.locations)

    def to_dict(self) -> dict:
        """
        Convert to dictionary, omitting missing values and empty collections.
        """
        data = {
            "id": self.id,
            "text": self.text,
            "lead": True if self.is_lead else None,
            "word_count": self.word_count,
            "people": list(self.people) or None,
            "organizations": list(self.organizations) or None,
            "locations": list(self.locations) or None,
            "emphasis": list(self.emphasis) or None,
            "strong": list(self.strong) or None,
            "links": [link.model_dump() for link in self.links] or None,
        }
        return compact(data)
