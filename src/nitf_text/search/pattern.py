"""
Search pattern building shared by document and paragraph queries.

Every search, contains, excerpt and count operation goes through
build_search_pattern(), so literal strings are always escaped and
compiled patterns keep the caller's flags.
"""

import re
from typing import Pattern, Union

from nitf_text.errors import SearchPatternError

Query = Union[str, Pattern[str]]


def build_search_pattern(query: Query, case_sensitive: bool = False) -> Pattern[str]:
    """
    Build a compiled pattern from a query.

    Args:
        query: Literal text, or a compiled pattern
        case_sensitive: Whether matching is case-sensitive

    Returns:
        Compiled pattern. Literal text is escaped; a compiled pattern is
        returned unchanged when case_sensitive, otherwise recompiled with
        re.IGNORECASE added to its existing flags.

    Raises:
        SearchPatternError: If a compiled pattern cannot be recompiled with
            the extra flag

    Example:
        >>> build_search_pattern("tech.").pattern
        'tech\\\\.'
        >>> bool(build_search_pattern(re.compile("^x", re.M)).flags & re.M)
        True
    """
    if isinstance(query, re.Pattern):
        if case_sensitive:
            return query
        flags = query.flags | re.IGNORECASE
        try:
            return re.compile(query.pattern, flags)
        except (re.error, ValueError, TypeError) as e:
            raise SearchPatternError(
                f"Cannot add case-insensitive matching to pattern "
                f"{query.pattern!r} (flags={flags}): {e}",
                pattern=query.pattern,
                flags=flags,
            ) from e

    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(re.escape(str(query)), flags)
