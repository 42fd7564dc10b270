"""
XML parsing modules for NITF articles.

- lxml does the tokenizing, with entity resolution and network access off
- Lookups match local tag names so namespaced NITF works unchanged
- Text extraction turns <br/> into newlines
- Entity extraction classifies inline markup in one traversal
"""

from .xml_parser import build_parser, load_xml, find_nitf_root
from .text_extractor import extract_all_text, direct_text
from .entity_extractor import (
    EntitySet,
    LinkRecord,
    EntityExtractionMixin,
    extract_entities,
    entity_match,
)

__all__ = [
    # XML Parsing
    'build_parser',
    'load_xml',
    'find_nitf_root',
    # Text Extraction
    'extract_all_text',
    'direct_text',
    # Entity Extraction
    'EntitySet',
    'LinkRecord',
    'EntityExtractionMixin',
    'extract_entities',
    'entity_match',
]
