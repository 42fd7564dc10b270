"""
Media model for NITF body.content.

Media elements describe images, audio, video or other multimedia, each
with one or more <media-reference> renditions.
"""

import logging
from functools import cached_property
from typing import List, Optional

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from nitf_text.parsers.xml_parser import child_text, children, compact
from nitf_text.types import MediaType

logger = logging.getLogger(__name__)


class MediaReference(BaseModel):
    """One <media-reference> rendition (format or size) of a media object."""

    model_config = ConfigDict(frozen=True)

    source: Optional[str] = Field(default=None, description="source attribute (URL or path)")
    mime_type: Optional[str] = Field(default=None, description="mime-type attribute")
    coding: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    alternate_text: Optional[str] = None
    name: Optional[str] = None


def _dimension(ref: etree._Element, name: str) -> Optional[int]:
    value = ref.get(name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric media-reference {name}={value!r}")
        return None


class Media:
    """
    A <media> element.

    Example:
        >>> media = doc.images[0]
        >>> media.source
        'https://example.com/images/device.jpg'
        >>> media.width
        800
    """

    def __init__(self, node: etree._Element):
        self.node = node

    @property
    def type(self) -> Optional[str]:
        """media-type attribute (image, audio, video, ...)."""
        return self.node.get('media-type')

    @property
    def is_image(self) -> bool:
        return self.type == MediaType.IMAGE.value

    @property
    def is_audio(self) -> bool:
        return self.type == MediaType.AUDIO.value

    @property
    def is_video(self) -> bool:
        return self.type == MediaType.VIDEO.value

    @cached_property
    def caption(self) -> Optional[str]:
        return child_text(self.node, 'media-caption')

    @cached_property
    def producer(self) -> Optional[str]:
        """Producer or credit line (<media-producer>)."""
        return child_text(self.node, 'media-producer')

    @property
    def credit(self) -> Optional[str]:
        return self.producer

    @cached_property
    def references(self) -> List[MediaReference]:
        """All renditions in document order."""
        return [
            MediaReference(
                source=ref.get('source'),
                mime_type=ref.get('mime-type'),
                coding=ref.get('coding'),
                width=_dimension(ref, 'width'),
                height=_dimension(ref, 'height'),
                alternate_text=ref.get('alternate-text'),
                name=ref.get('name'),
            )
            for ref in children(self.node, 'media-reference')
        ]

    @property
    def primary_reference(self) -> Optional[MediaReference]:
        """First rendition, or None."""
        return self.references[0] if self.references else None

    @property
    def source(self) -> Optional[str]:
        ref = self.primary_reference
        return ref.source if ref else None

    @property
    def url(self) -> Optional[str]:
        return self.source

    @property
    def mime_type(self) -> Optional[str]:
        ref = self.primary_reference
        return ref.mime_type if ref else None

    @property
    def alt_text(self) -> Optional[str]:
        ref = self.primary_reference
        return ref.alternate_text if ref else None

    @property
    def width(self) -> Optional[int]:
        ref = self.primary_reference
        return ref.width if ref else None

    @property
    def height(self) -> Optional[int]:
        ref = self.primary_reference
        return ref.height if ref else None

    @cached_property
    def metadata(self) -> dict:
        """id and class attributes of the media element."""
        return compact({
            "id": self.node.get('id'),
            "class": self.node.get('class'),
        })

    def to_dict(self) -> dict:
        """
        Convert to dictionary.

        The full reference list is only included when there is more than
        one rendition; the primary one is flattened into the top level.
        """
        return compact({
            "type": self.type,
            "source": self.source,
            "mime_type": self.mime_type,
            "width": self.width,
            "height": self.height,
            "alt_text": self.alt_text,
            "caption": self.caption,
            "credit": self.credit,
            "metadata": self.metadata or None,
            "references": (
                [r.model_dump(exclude_none=True) for r in self.references]
                if len(self.references) > 1 else None
            ),
        })
