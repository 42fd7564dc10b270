"""
Discovery helpers for the NITF vocabulary.

Provides user-facing APIs to discover known media types from
nitf_types.yaml.
"""

from enum import Enum
from typing import Dict
from nitf_text.config import get_types_config


class MediaType(str, Enum):
    """Common values of the media/@media-type attribute."""

    IMAGE = 'image'
    AUDIO = 'audio'
    VIDEO = 'video'


class MediaTypes:
    """
    Helper class for discovering known NITF media types.

    Example:
        >>> MediaTypes.list_available()['image']
        'Still image (photo, graphic, illustration)'
        >>> MediaTypes.is_valid('video')
        True
    """

    @staticmethod
    def list_available() -> Dict[str, str]:
        """List all known media types with descriptions (a copy)."""
        return get_types_config().media_types.copy()

    @staticmethod
    def get_description(code: str) -> str:
        """
        Get the description for a media type.

        Raises:
            ValueError: If code is not found
        """
        try:
            return get_types_config().get_media_description(code)
        except KeyError as e:
            raise ValueError(f"Unknown media type: {code}") from e

    @staticmethod
    def is_valid(code: str) -> bool:
        """Check if a media type is known."""
        return get_types_config().is_valid_media_type(code)
