"""
Inline entity extraction for NITF paragraphs.

A single depth-first pass over an element's descendants sorts the inline
markup NITF uses for named entities (<person>, <org>, <location>) and
presentation (<em>, <strong>, <a>) into typed collections.

Owners use EntityExtractionMixin for lazy batch extraction: the first read
of any collection populates all of them, later reads are lookups.
"""

import logging
import re
import threading
from typing import Dict, Iterable, Optional, Tuple

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from .text_extractor import direct_text
from .xml_parser import direct_text_nodes, is_element, local_name

logger = logging.getLogger(__name__)

LINK_TAG = 'a'

# Tag name -> EntitySet field for text-valued entities
ENTITY_TAGS: Dict[str, str] = {
    'person': 'people',
    'org': 'organizations',
    'location': 'locations',
    'em': 'emphasis',
    'strong': 'strong',
}


class LinkRecord(BaseModel):
    """An <a> element: its direct text and href, either possibly missing."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = Field(default=None, description="Stripped direct text of the link")
    href: Optional[str] = Field(default=None, description="href attribute")


class EntitySet(BaseModel):
    """
    Entities found in one subtree, each collection in discovery order.

    Duplicates are kept; deduplication happens at document level.
    """

    model_config = ConfigDict(frozen=True)

    people: Tuple[str, ...] = ()
    organizations: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()
    emphasis: Tuple[str, ...] = ()
    strong: Tuple[str, ...] = ()
    links: Tuple[LinkRecord, ...] = ()


def extract_entities(element: etree._Element) -> EntitySet:
    """
    Extract all entities below an element in a single traversal.

    Classification uses each element's direct text only. For
    <person><em>John</em> Doe</person> the person is "Doe" and "John" is
    recorded as emphasis. Traversal continues into classified elements, so
    nested entities are still collected in their own buckets.

    Links are recorded unconditionally, even with no text and no href.

    Args:
        element: Subtree root (not itself classified)

    Returns:
        Frozen EntitySet
    """
    buckets = {field: [] for field in ENTITY_TAGS.values()}
    links = []

    # iterdescendants() is a pre-order walk implemented in C
    for child in element.iterdescendants():
        if not is_element(child):
            continue

        name = local_name(child)
        field = ENTITY_TAGS.get(name)
        if field is not None:
            text = direct_text(child).strip()
            if text:
                buckets[field].append(text)
        elif name == LINK_TAG:
            nodes = list(direct_text_nodes(child))
            text = ''.join(nodes).strip() if nodes else None
            links.append(LinkRecord(text=text, href=child.get('href')))

    entities = EntitySet(
        links=tuple(links),
        **{field: tuple(values) for field, values in buckets.items()}
    )
    logger.debug(
        f"Extracted entities from <{local_name(element)}>: "
        f"{len(entities.people)} people, {len(entities.organizations)} orgs, "
        f"{len(entities.locations)} locations, {len(entities.links)} links"
    )
    return entities


def entity_match(entities: Iterable[str], name: str, exact: bool = False) -> bool:
    """
    Check if any entity matches the given name.

    Args:
        entities: Entity names to test
        name: Name to look for
        exact: Require case-sensitive equality; otherwise the name is a
            case-insensitive literal substring ("John" matches "John Doe")

    Returns:
        True if a match is found
    """
    if exact:
        return any(e == name for e in entities)

    pattern = re.compile(re.escape(name), re.IGNORECASE)
    return any(pattern.search(e) for e in entities)


class EntityExtractionMixin:
    """
    Lazy batch extraction of entities for an object wrapping an element.

    Subclasses provide ``node`` and call ``_init_entities()`` from
    ``__init__``. The six collections are populated together, once, under
    a per-object lock; reading text never triggers extraction.
    """

    node: etree._Element
    _entities: Optional[EntitySet]

    def _init_entities(self) -> None:
        self._entities = None
        self._entities_lock = threading.Lock()

    @property
    def entities_extracted(self) -> bool:
        """True once the entity collections have been populated."""
        return self._entities is not None

    def ensure_entities_extracted(self) -> EntitySet:
        """Run extraction on first call; later calls return the cached set."""
        entities = self._entities
        if entities is None:
            with self._entities_lock:
                if self._entities is None:
                    self._entities = extract_entities(self.node)
                entities = self._entities
        return entities

    @property
    def people(self) -> Tuple[str, ...]:
        """Person names (<person>) in document order."""
        return self.ensure_entities_extracted().people

    @property
    def organizations(self) -> Tuple[str, ...]:
        """Organization names (<org>) in document order."""
        return self.ensure_entities_extracted().organizations

    @property
    def locations(self) -> Tuple[str, ...]:
        """Location names (<location>) in document order."""
        return self.ensure_entities_extracted().locations

    @property
    def emphasis(self) -> Tuple[str, ...]:
        """Emphasized text (<em>) in document order."""
        return self.ensure_entities_extracted().emphasis

    @property
    def strong(self) -> Tuple[str, ...]:
        """Strong/bold text (<strong>) in document order."""
        return self.ensure_entities_extracted().strong

    @property
    def links(self) -> Tuple[LinkRecord, ...]:
        """Links (<a>) in document order."""
        return self.ensure_entities_extracted().links
