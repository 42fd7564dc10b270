"""
Object model for parsed NITF documents.

Each class wraps one lxml element and derives its values lazily from it.
"""

from nitf_text.models.paragraph import Paragraph
from nitf_text.models.byline import Byline
from nitf_text.models.headline import Headline
from nitf_text.models.media import Media, MediaReference
from nitf_text.models.footnote import Footnote
from nitf_text.models.docdata import Docdata
from nitf_text.models.head import Head
from nitf_text.models.body import Body
from nitf_text.models.document import Document

__all__ = [
    'Paragraph',
    'Byline',
    'Headline',
    'Media',
    'MediaReference',
    'Footnote',
    'Docdata',
    'Head',
    'Body',
    'Document',
]
