"""
Configuration management using Pydantic Settings.

Provides type-safe access to:
- NITF vocabulary (media types, lede markers) loaded from nitf_types.yaml
- Parser and query defaults overridable through NITF_* environment variables
"""

from pathlib import Path
from typing import Dict, List, Optional
import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


TYPES_FILE = Path(__file__).parent / 'nitf_types.yaml'


class NITFTypesConfig(BaseSettings):
    """
    NITF vocabulary automatically loaded from the packaged nitf_types.yaml.

    Attributes:
        media_types: Known media/@media-type values with descriptions
        lede_values: p/@lede values that mark a lead paragraph

    Example:
        >>> config = NITFTypesConfig()
        >>> config.is_valid_media_type('image')
        True
        >>> config.is_lede_value('yes')
        True
    """

    media_types: Dict[str, str] = Field(
        default_factory=dict,
        description="Known media types with descriptions"
    )
    lede_values: List[str] = Field(
        default_factory=list,
        description="Attribute values marking a lead paragraph"
    )

    model_config = SettingsConfigDict(
        env_prefix='NITF_TYPES_',
        extra='ignore'
    )

    @model_validator(mode='before')
    @classmethod
    def load_yaml_config(cls, data: dict) -> dict:
        """
        Load the vocabulary from nitf_types.yaml if not already provided.

        Values passed explicitly (e.g. from tests) are left untouched.
        """
        if data:
            return data

        if not TYPES_FILE.exists():
            raise FileNotFoundError(
                f"Types file not found at {TYPES_FILE}. "
                f"The nitf_text package data appears to be incomplete."
            )

        with open(TYPES_FILE, 'r', encoding='utf-8') as f:
            yaml_data = yaml.safe_load(f) or {}

        return {
            'media_types': yaml_data.get('media_types', {}),
            'lede_values': [str(v) for v in yaml_data.get('lede_values', [])]
        }

    def is_valid_media_type(self, code: Optional[str]) -> bool:
        """Check whether a media type is part of the known vocabulary."""
        if code is None:
            return False
        return code in self.media_types

    def get_media_description(self, code: str) -> str:
        """
        Get the description of a media type.

        Raises:
            KeyError: If the media type is unknown
        """
        if code not in self.media_types:
            raise KeyError(f"Unknown media type: {code}")
        return self.media_types[code]

    def is_lede_value(self, value: Optional[str]) -> bool:
        """Check whether a p/@lede value marks a lead paragraph."""
        if value is None:
            return False
        return value in self.lede_values


# Singleton pattern - loaded once, cached forever
_types_config: Optional[NITFTypesConfig] = None


def get_types_config() -> NITFTypesConfig:
    """
    Get global vocabulary config instance (lazy-loaded singleton).

    Example:
        >>> config = get_types_config()
        >>> config is get_types_config()
        True
    """
    global _types_config
    if _types_config is None:
        _types_config = NITFTypesConfig()
    return _types_config


class ParserConfig(BaseSettings):
    """
    Parser and query defaults loaded from environment variables.

    Environment Variables (from .env):
        NITF_DEFAULT_ENCODING: Encoding used by parse_file (default "utf-8")
        NITF_WORDS_PER_MINUTE: Reading speed for reading_time (default 200)
        NITF_EXCERPT_CONTEXT_CHARS: Default excerpt context (default 50)
        NITF_RECOVER: Let lxml recover from malformed XML (default False)
        NITF_HUGE_TREE: Lift libxml2 depth and size limits (default False)

    Example:
        >>> config = get_parser_config()
        >>> config.words_per_minute
        200
    """

    default_encoding: str = Field(
        default="utf-8",
        description="Encoding used when reading NITF files"
    )

    words_per_minute: int = Field(
        default=200,
        gt=0,
        description="Reading speed used to estimate reading time"
    )

    excerpt_context_chars: int = Field(
        default=50,
        ge=0,
        description="Characters of context on each side of an excerpt"
    )

    recover: bool = Field(
        default=False,
        description="Ask lxml to recover from malformed XML instead of failing"
    )

    huge_tree: bool = Field(
        default=False,
        description="Disable libxml2 security limits on tree depth and text size"
    )

    model_config = SettingsConfigDict(
        env_prefix='NITF_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


_parser_config: Optional[ParserConfig] = None


def get_parser_config() -> ParserConfig:
    """
    Get global parser config instance (lazy-loaded singleton).

    Returns:
        Singleton ParserConfig instance
    """
    global _parser_config
    if _parser_config is None:
        _parser_config = ParserConfig()
    return _parser_config


def reset_config() -> None:
    """Drop cached config singletons so the next access reloads them."""
    global _types_config, _parser_config
    _types_config = None
    _parser_config = None
