"""
Search and query helpers built on extracted paragraph text and entities.
"""

from .pattern import Query, build_search_pattern
from .query import (
    SearchMatch,
    EntitySummary,
    join_paragraph_text,
    search,
    contains,
    paragraphs_containing,
    paragraphs_mentioning,
    count_occurrences,
    excerpt,
    paragraphs_where,
    find_paragraph,
    find_media,
    aggregate_entities,
)

__all__ = [
    'Query',
    'build_search_pattern',
    'SearchMatch',
    'EntitySummary',
    'join_paragraph_text',
    'search',
    'contains',
    'paragraphs_containing',
    'paragraphs_mentioning',
    'count_occurrences',
    'excerpt',
    'paragraphs_where',
    'find_paragraph',
    'find_media',
    'aggregate_entities',
]
