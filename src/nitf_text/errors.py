"""
Exception hierarchy for nitf-text.

All errors raised by the library derive from NITFError so callers can
catch a single type at the boundary.
"""

from typing import Optional


class NITFError(Exception):
    """Base error for nitf-text."""


class ParseError(NITFError):
    """Raised when the XML input cannot be parsed."""


class InvalidDocumentError(NITFError):
    """Raised when well-formed XML is not an NITF document."""


class SearchPatternError(NITFError):
    """
    Raised when a caller-supplied pattern cannot be recompiled.

    Attributes:
        pattern: Source of the pattern that failed
        flags: Flags the recompilation was attempted with
    """

    def __init__(self, message: str, pattern: Optional[str] = None, flags: int = 0):
        super().__init__(message)
        self.pattern = pattern
        self.flags = flags
