"""
nitf-text: text, entity and search extraction for NITF news articles.

Main package exports for user-facing API.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from nitf_text.config import get_parser_config
from nitf_text.errors import NITFError, ParseError, InvalidDocumentError, SearchPatternError
from nitf_text.models import Document, Paragraph
from nitf_text.types import MediaType

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

__all__ = [
    'Document',
    'Paragraph',
    'MediaType',
    'NITFError',
    'ParseError',
    'InvalidDocumentError',
    'SearchPatternError',
    'parse',
    'parse_file',
]


def parse(xml: Union[str, bytes]) -> Document:
    """
    Parse an NITF document from a string or bytes.

    Raises:
        InvalidDocumentError: If the input is empty or has no <nitf> element
        ParseError: If the XML is malformed

    Example:
        >>> import nitf_text
        >>> doc = nitf_text.parse(xml)
        >>> doc.headline
        'Revolutionary Technology Changes Industry'
    """
    return Document(xml)


def parse_file(path: Union[str, Path], encoding: Optional[str] = None) -> Document:
    """
    Read and parse an NITF file.

    Args:
        path: Path to the XML file
        encoding: Text encoding (default: ParserConfig.default_encoding)

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidDocumentError: If the file is empty or has no <nitf> element
        ParseError: If the XML is malformed
    """
    encoding = encoding or get_parser_config().default_encoding
    with open(path, encoding=encoding) as f:
        content = f.read()

    logger.debug(f"Read {len(content)} characters from {path}")
    return Document(content)
