"""Format patterns accepted by DateFlow.

Four date layouts, each optionally followed by a 24-hour time of
``HH:mm:ss``, ``HH:mm`` or ``HH``, for 16 patterns in total.
"""

from __future__ import annotations

from enum import Enum


class FormatPattern(Enum):
    """Enumerated date/time patterns.

    Examples:
        >>> FormatPattern("DD/MM/YYYY HH:mm").date_separator
        '/'
        >>> FormatPattern.YMD_DASH_HM.time_part
        'HH:mm'
        >>> FormatPattern.DMY_SLASH.time_part
        ''
    """

    YMD_DASH_HMS = "YYYY-MM-DD HH:mm:ss"
    YMD_DASH_HM = "YYYY-MM-DD HH:mm"
    YMD_DASH_H = "YYYY-MM-DD HH"
    YMD_DASH = "YYYY-MM-DD"
    YMD_SLASH_HMS = "YYYY/MM/DD HH:mm:ss"
    YMD_SLASH_HM = "YYYY/MM/DD HH:mm"
    YMD_SLASH_H = "YYYY/MM/DD HH"
    YMD_SLASH = "YYYY/MM/DD"
    DMY_SLASH_HMS = "DD/MM/YYYY HH:mm:ss"
    DMY_SLASH_HM = "DD/MM/YYYY HH:mm"
    DMY_SLASH_H = "DD/MM/YYYY HH"
    DMY_SLASH = "DD/MM/YYYY"
    DMY_DASH_HMS = "DD-MM-YYYY HH:mm:ss"
    DMY_DASH_HM = "DD-MM-YYYY HH:mm"
    DMY_DASH_H = "DD-MM-YYYY HH"
    DMY_DASH = "DD-MM-YYYY"

    @property
    def date_part(self) -> str:
        return self.value.split(" ", 1)[0]

    @property
    def time_part(self) -> str:
        """Return the time suffix ("HH:mm:ss", "HH:mm", "HH") or ""."""
        _, _, time_part = self.value.partition(" ")
        return time_part

    @property
    def date_separator(self) -> str:
        return "/" if "/" in self.date_part else "-"


__all__ = ["FormatPattern"]
