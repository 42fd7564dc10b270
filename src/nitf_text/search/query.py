"""
Query layer over extracted paragraph text and entities.

The functions here operate on an ordered list of paragraph-like objects,
each exposing ``text``, ``people``, ``organizations``, ``locations`` and
the ``mentions_person/org/location`` predicates. Document wraps them as
methods; they can equally be used on any paragraph subset.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .pattern import Query, build_search_pattern

if TYPE_CHECKING:
    from nitf_text.models.docdata import Docdata
    from nitf_text.models.media import Media
    from nitf_text.models.paragraph import Paragraph

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
ELLIPSIS = "..."


class SearchMatch(BaseModel):
    """
    One occurrence of a query in a paragraph.

    Attributes:
        paragraph_index: 0-based position of the paragraph in the document
        paragraph: The paragraph object itself
        match: Matched substring
        position: 0-based offset of the match in the paragraph text
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    paragraph_index: int = Field(..., ge=0)
    paragraph: Any = Field(..., repr=False)
    match: str
    position: int = Field(..., ge=0)


class EntitySummary(BaseModel):
    """Document-wide unique people, organizations and locations."""

    model_config = ConfigDict(frozen=True)

    people: List[str] = Field(default_factory=list)
    organizations: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)


def join_paragraph_text(paragraphs: Sequence["Paragraph"]) -> str:
    """Whole-document text: paragraph texts joined by a blank line."""
    return PARAGRAPH_SEPARATOR.join(p.text for p in paragraphs)


def search(
    paragraphs: Sequence["Paragraph"],
    query: Query,
    case_sensitive: bool = False
) -> List[SearchMatch]:
    """
    Find every non-overlapping occurrence of a query, paragraph by paragraph.

    An empty query matches at every position (including the end of each
    paragraph), mirroring re.finditer.

    Args:
        paragraphs: Paragraphs in document order
        query: Literal text or compiled pattern
        case_sensitive: Whether matching is case-sensitive (default: False)

    Returns:
        Matches in paragraph order, then left to right
    """
    pattern = build_search_pattern(query, case_sensitive)
    results = []

    for index, para in enumerate(paragraphs):
        for m in pattern.finditer(para.text):
            results.append(SearchMatch(
                paragraph_index=index,
                paragraph=para,
                match=m.group(0),
                position=m.start()
            ))

    logger.debug(f"search({pattern.pattern!r}) found {len(results)} matches")
    return results


def contains(text: str, query: Query, case_sensitive: bool = False) -> bool:
    """Check whether the query matches anywhere in text."""
    pattern = build_search_pattern(query, case_sensitive)
    return pattern.search(text) is not None


def paragraphs_containing(
    paragraphs: Sequence["Paragraph"],
    query: Query,
    case_sensitive: bool = False
) -> List["Paragraph"]:
    """Paragraphs whose text matches the query at least once."""
    pattern = build_search_pattern(query, case_sensitive)
    return [p for p in paragraphs if pattern.search(p.text)]


def paragraphs_mentioning(
    paragraphs: Sequence["Paragraph"],
    person: Optional[str] = None,
    org: Optional[str] = None,
    location: Optional[str] = None,
    match_all: bool = False
) -> List["Paragraph"]:
    """
    Paragraphs mentioning the given entities (partial, case-insensitive).

    Args:
        paragraphs: Paragraphs in document order
        person: Person name to look for
        org: Organization name to look for
        location: Location name to look for
        match_all: Require every given entity instead of any of them

    Returns:
        Matching paragraphs; all paragraphs when no entity is given
    """
    if person is None and org is None and location is None:
        return list(paragraphs)

    combine = all if match_all else any
    results = []

    for para in paragraphs:
        checks = []
        if person is not None:
            checks.append(para.mentions_person(person))
        if org is not None:
            checks.append(para.mentions_org(org))
        if location is not None:
            checks.append(para.mentions_location(location))

        if combine(checks):
            results.append(para)

    return results


def count_occurrences(text: str, query: Query, case_sensitive: bool = False) -> int:
    """Number of non-overlapping matches of the query in text."""
    pattern = build_search_pattern(query, case_sensitive)
    return sum(1 for _ in pattern.finditer(text))


def excerpt(
    text: str,
    query: Query,
    context_chars: int = 50,
    case_sensitive: bool = False
) -> Optional[str]:
    """
    Text window around the first match of the query.

    The window spans context_chars on each side of the match, clamped to
    the text. "..." is prepended when the window does not reach the start
    of the text and appended when it does not reach the end.

    Args:
        text: Text to search
        query: Literal text or compiled pattern
        context_chars: Characters of context on each side (default: 50)
        case_sensitive: Whether matching is case-sensitive (default: False)

    Returns:
        Excerpt with ellipses, or None if there is no match

    Raises:
        ValueError: If context_chars is negative

    Example:
        >>> excerpt("The quick brown fox jumps", "brown", context_chars=4)
        '...ick brown fox...'
    """
    if context_chars < 0:
        raise ValueError(f"context_chars must be >= 0, got {context_chars}")

    pattern = build_search_pattern(query, case_sensitive)
    m = pattern.search(text)
    if m is None:
        return None

    start = max(m.start() - context_chars, 0)
    end = min(m.end() + context_chars, len(text))

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(text) else ""
    return f"{prefix}{text[start:end]}{suffix}"


def paragraphs_where(
    paragraphs: Sequence["Paragraph"],
    predicate: Optional[Callable[["Paragraph"], bool]] = None
) -> List["Paragraph"]:
    """
    Paragraphs for which predicate returns true; all when no predicate.

    Example:
        >>> paragraphs_where(doc.paragraphs, lambda p: p.word_count > 50)
    """
    if predicate is None:
        return list(paragraphs)
    return [p for p in paragraphs if predicate(p)]


def find_paragraph(
    paragraphs: Sequence["Paragraph"],
    predicate: Optional[Callable[["Paragraph"], bool]] = None
) -> Optional["Paragraph"]:
    """First paragraph satisfying predicate; None when none does or no predicate is given."""
    if predicate is None:
        return None
    return next((p for p in paragraphs if predicate(p)), None)


def find_media(media: Sequence["Media"], media_type: Optional[Any] = None) -> List["Media"]:
    """
    Media filtered by type.

    Args:
        media: Media objects in document order
        media_type: MediaType member or type string; None returns all media
    """
    if media_type is None:
        return list(media)

    type_str = media_type.value if isinstance(media_type, Enum) else str(media_type)
    return [m for m in media if m.type == type_str]


def _unique(values: List[str]) -> List[str]:
    return list(dict.fromkeys(values))


def aggregate_entities(
    paragraphs: Sequence["Paragraph"],
    docdata: Optional["Docdata"] = None
) -> EntitySummary:
    """
    Collect unique people, organizations and locations in a single pass.

    Paragraph entities come first in paragraph order, followed by the
    docdata identified-content entries; each list is then deduplicated
    keeping the first occurrence.
    """
    people: List[str] = []
    organizations: List[str] = []
    locations: List[str] = []

    for para in paragraphs:
        people.extend(para.people)
        organizations.extend(para.organizations)
        locations.extend(para.locations)

    if docdata is not None:
        people.extend(docdata.people)
        organizations.extend(docdata.organizations)
        locations.extend(docdata.locations)

    return EntitySummary(
        people=_unique(people),
        organizations=_unique(organizations),
        locations=_unique(locations)
    )
