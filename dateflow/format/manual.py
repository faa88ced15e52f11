"""Manual token substitution for DateFlow patterns.

Manual formatting is used when a pattern is resolved but no locale is. The
pattern's tokens are replaced with zero-padded local time fields:

    YYYY - 4-digit year
    MM   - 2-digit month (01-12)
    DD   - 2-digit day (01-31)
    HH   - 2-digit hour, 24-hour (00-23)
    mm   - 2-digit minute (00-59)
    ss   - 2-digit second (00-59)

Tokens are replaced in that order and only their first occurrence is
replaced: "MM/MM" renders as "12/MM". Any other character passes through
unchanged.

Examples:
    >>> from datetime import datetime
    >>> substitute_tokens("DD/MM/YYYY", datetime(2024, 12, 25))
    '25/12/2024'
"""

from __future__ import annotations

from datetime import datetime

# (token, datetime attribute, width), in replacement order
_TOKENS: tuple[tuple[str, str, int], ...] = (
    ("YYYY", "year", 4),
    ("MM", "month", 2),
    ("DD", "day", 2),
    ("HH", "hour", 2),
    ("mm", "minute", 2),
    ("ss", "second", 2),
)


def substitute_tokens(pattern: str, wall: datetime) -> str:
    """Replace the first occurrence of each token with the matching field.

    Args:
        pattern: The pattern string.
        wall: Local wall clock supplying the field values.

    Returns:
        The formatted string.

    Examples:
        >>> from datetime import datetime
        >>> substitute_tokens("YYYY-MM-DD HH:mm:ss", datetime(2024, 1, 5, 9, 3, 7))
        '2024-01-05 09:03:07'
        >>> substitute_tokens("MM MM", datetime(2024, 1, 5))
        '01 MM'
    """
    result = pattern
    for token, field, width in _TOKENS:
        result = result.replace(token, f"{getattr(wall, field):0{width}d}", 1)
    return result


__all__ = ["substitute_tokens"]
