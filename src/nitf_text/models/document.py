"""
Document: the entry point for a parsed NITF article.

A Document owns the lxml tree and every object and cache derived from it.
Search methods delegate to nitf_text.search.query over the document's
paragraphs; export methods delegate to nitf_text.exporter.
"""

import json
import logging
import math
from datetime import date
from functools import cached_property
from typing import Any, Callable, List, Optional, Union

from lxml import etree

from nitf_text import exporter
from nitf_text.config import get_parser_config
from nitf_text.parsers.xml_parser import compact, find_nitf_root, first_child, load_xml
from nitf_text.search import query as q
from nitf_text.search.pattern import Query
from nitf_text.search.query import EntitySummary, SearchMatch
from .body import Body
from .byline import Byline
from .docdata import Docdata
from .footnote import Footnote
from .head import Head
from .headline import Headline
from .media import Media
from .paragraph import Paragraph

logger = logging.getLogger(__name__)


class Document:
    """
    A parsed NITF document.

    Attributes:
        root: Root element of the parsed XML tree
        nitf: The <nitf> element (usually the root)
        head: Head, or None when the document has no <head>
        body: Body, or None when the document has no <body>

    Example:
        >>> doc = Document(xml)
        >>> doc.headline
        'Revolutionary Technology Changes Industry'
        >>> doc.paragraphs_mentioning(person="john")[0].people
        ('John Doe',)
    """

    def __init__(self, xml: Union[str, bytes]):
        """
        Parse an NITF document.

        Raises:
            ParseError: If the XML is malformed
            InvalidDocumentError: If there is no <nitf> element
        """
        self.root = load_xml(xml)
        self.nitf = find_nitf_root(self.root)

        head_node = first_child(self.nitf, 'head')
        body_node = first_child(self.nitf, 'body')
        self.head: Optional[Head] = Head(head_node) if head_node is not None else None
        self.body: Optional[Body] = Body(body_node) if body_node is not None else None

        if self.head is None and self.body is None:
            logger.warning("NITF document has neither <head> nor <body>")

    def __repr__(self) -> str:
        return (
            f"Document(doc_id={self.doc_id!r}, headline={self.headline!r}, "
            f"paragraphs={len(self.paragraphs)})"
        )

    # === Accessors ===

    @property
    def title(self) -> Optional[str]:
        return self.head.title if self.head else None

    @property
    def headlines(self) -> Optional[Headline]:
        return self.body.headline if self.body else None

    @property
    def headline(self) -> Optional[str]:
        """Primary headline text."""
        return self.headlines.primary if self.headlines else None

    @property
    def byline(self) -> Optional[Byline]:
        return self.body.byline if self.body else None

    @property
    def paragraphs(self) -> List[Paragraph]:
        return self.body.paragraphs if self.body else []

    @cached_property
    def text(self) -> str:
        """Paragraph texts joined by a blank line."""
        return q.join_paragraph_text(self.paragraphs)

    @cached_property
    def word_count(self) -> int:
        return sum(p.word_count for p in self.paragraphs)

    def reading_time(self, words_per_minute: Optional[int] = None) -> str:
        """
        Human-readable reading time estimate.

        Args:
            words_per_minute: Reading speed (default: ParserConfig.words_per_minute)

        Returns:
            "Less than 1 min read", "1 min read" or "N min read"

        Raises:
            ValueError: If words_per_minute is zero or negative
        """
        if words_per_minute is None:
            wpm = get_parser_config().words_per_minute
        elif words_per_minute <= 0:
            raise ValueError(f"words_per_minute must be > 0, got {words_per_minute}")
        else:
            wpm = words_per_minute
        minutes = math.ceil(self.word_count / wpm)
        if minutes < 1:
            return "Less than 1 min read"
        if minutes == 1:
            return "1 min read"
        return f"{minutes} min read"

    @property
    def media(self) -> List[Media]:
        return self.body.media if self.body else []

    @property
    def images(self) -> List[Media]:
        return [m for m in self.media if m.is_image]

    @property
    def videos(self) -> List[Media]:
        return [m for m in self.media if m.is_video]

    @property
    def audio(self) -> List[Media]:
        return [m for m in self.media if m.is_audio]

    @property
    def footnotes(self) -> List[Footnote]:
        return self.body.footnotes if self.body else []

    @property
    def docdata(self) -> Optional[Docdata]:
        return self.head.docdata if self.head else None

    @property
    def doc_id(self) -> Optional[str]:
        return self.docdata.doc_id if self.docdata else None

    @property
    def issue_date(self) -> Optional[date]:
        return self.docdata.issue_date if self.docdata else None

    @property
    def version(self) -> Optional[str]:
        return self.nitf.get('version')

    @property
    def change_date(self) -> Optional[str]:
        return self.nitf.get('change.date')

    @property
    def change_time(self) -> Optional[str]:
        return self.nitf.get('change.time')

    @property
    def is_valid(self) -> bool:
        return self.nitf is not None

    # === Serialization ===

    def to_xml(self) -> str:
        """Serialize the parsed tree back to XML."""
        return etree.tostring(self.root.getroottree(), encoding='unicode')

    def to_dict(self) -> dict:
        return compact({
            "version": self.version,
            "change_date": self.change_date,
            "change_time": self.change_time,
            "title": self.title,
            "doc_id": self.doc_id,
            "issue_date": self.issue_date.isoformat() if self.issue_date else None,
            "head": self.head.to_dict() if self.head else None,
            "body": self.body.to_dict() if self.body else None,
        })

    def to_json(self, **kwargs: Any) -> str:
        """JSON representation of to_dict(); kwargs go to json.dumps."""
        kwargs.setdefault('ensure_ascii', False)
        return json.dumps(self.to_dict(), **kwargs)

    # === Search ===

    def search(self, query: Query, case_sensitive: bool = False) -> List[SearchMatch]:
        """Every match of query, paragraph by paragraph (see search.query.search)."""
        return q.search(self.paragraphs, query, case_sensitive)

    def contains(self, query: Query, case_sensitive: bool = False) -> bool:
        return q.contains(self.text, query, case_sensitive)

    def paragraphs_containing(self, query: Query, case_sensitive: bool = False) -> List[Paragraph]:
        return q.paragraphs_containing(self.paragraphs, query, case_sensitive)

    def paragraphs_mentioning(
        self,
        person: Optional[str] = None,
        org: Optional[str] = None,
        location: Optional[str] = None,
        match_all: bool = False
    ) -> List[Paragraph]:
        """Paragraphs mentioning any (or, with match_all, every) given entity."""
        return q.paragraphs_mentioning(self.paragraphs, person, org, location, match_all)

    def paragraphs_where(
        self,
        predicate: Optional[Callable[[Paragraph], bool]] = None
    ) -> List[Paragraph]:
        return q.paragraphs_where(self.paragraphs, predicate)

    def find_paragraph(
        self,
        predicate: Optional[Callable[[Paragraph], bool]] = None
    ) -> Optional[Paragraph]:
        return q.find_paragraph(self.paragraphs, predicate)

    def find_media(self, media_type: Optional[Any] = None) -> List[Media]:
        return q.find_media(self.media, media_type)

    def count_occurrences(self, query: Query, case_sensitive: bool = False) -> int:
        return q.count_occurrences(self.text, query, case_sensitive)

    def excerpt(
        self,
        query: Query,
        context_chars: Optional[int] = None,
        case_sensitive: bool = False
    ) -> Optional[str]:
        """
        Text around the first match, with "..." where truncated.

        Args:
            query: Literal text or compiled pattern
            context_chars: Context on each side (default: ParserConfig.excerpt_context_chars)
            case_sensitive: Whether matching is case-sensitive
        """
        if context_chars is None:
            context_chars = get_parser_config().excerpt_context_chars
        return q.excerpt(self.text, query, context_chars, case_sensitive)

    # === Entity aggregation ===

    @cached_property
    def all_entities(self) -> EntitySummary:
        """Unique people, organizations and locations (computed once)."""
        return q.aggregate_entities(self.paragraphs, self.docdata)

    @property
    def all_people(self) -> List[str]:
        return self.all_entities.people

    @property
    def all_organizations(self) -> List[str]:
        return self.all_entities.organizations

    @property
    def all_locations(self) -> List[str]:
        return self.all_entities.locations

    # === Export ===

    def to_markdown(self) -> str:
        return exporter.to_markdown(self)

    def to_text(self) -> str:
        return exporter.to_text(self)

    def to_html(self, include_wrapper: bool = False) -> str:
        return exporter.to_html(self, include_wrapper=include_wrapper)
