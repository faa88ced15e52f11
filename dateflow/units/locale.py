"""Locale tags supported by DateFlow and their mapped timezones.

Each locale tag maps to one IANA timezone, used when rendering a DateFlow in
locale-aware mode, and to the Babel locale identifier that renders it.

Locale -> timezone:
    it-IT  Europe/Rome
    fr-FR  Europe/Paris
    es-ES  Europe/Madrid
    de-DE  Europe/Berlin
    pt-BR  America/Sao_Paulo
    ja-JP  Asia/Tokyo
    zh-CN  Asia/Shanghai
    ru-RU  Europe/Moscow
    en-EN  Europe/London
    en-US  America/New_York (also the fallback for unknown tags)
"""

from __future__ import annotations

from enum import Enum


class Locale(Enum):
    """Locale tags accepted as a DateFlow default or format option.

    Examples:
        >>> Locale("ja-JP").timezone
        'Asia/Tokyo'

        >>> Locale.EN_EN.babel_identifier
        'en_GB'
    """

    IT_IT = "it-IT"
    FR_FR = "fr-FR"
    ES_ES = "es-ES"
    DE_DE = "de-DE"
    PT_BR = "pt-BR"
    JA_JP = "ja-JP"
    ZH_CN = "zh-CN"
    RU_RU = "ru-RU"
    EN_EN = "en-EN"
    EN_US = "en-US"

    @property
    def timezone(self) -> str:
        """Return the IANA timezone name mapped from this locale."""
        return LOCALE_TIMEZONES[self.value]

    @property
    def babel_identifier(self) -> str:
        """Return the Babel/CLDR identifier used to render this locale."""
        return _BABEL_IDENTIFIERS[self.value]


DEFAULT_TIMEZONE: str = "America/New_York"

LOCALE_TIMEZONES: dict[str, str] = {
    "it-IT": "Europe/Rome",
    "fr-FR": "Europe/Paris",
    "es-ES": "Europe/Madrid",
    "de-DE": "Europe/Berlin",
    "pt-BR": "America/Sao_Paulo",
    "ja-JP": "Asia/Tokyo",
    "zh-CN": "Asia/Shanghai",
    "ru-RU": "Europe/Moscow",
    "en-EN": "Europe/London",
    "en-US": DEFAULT_TIMEZONE,
}

# CLDR has no en_EN; the London-mapped English locale renders as British English.
_BABEL_IDENTIFIERS: dict[str, str] = {
    "it-IT": "it_IT",
    "fr-FR": "fr_FR",
    "es-ES": "es_ES",
    "de-DE": "de_DE",
    "pt-BR": "pt_BR",
    "ja-JP": "ja_JP",
    "zh-CN": "zh_CN",
    "ru-RU": "ru_RU",
    "en-EN": "en_GB",
    "en-US": "en_US",
}


def timezone_for_locale(locale: Locale | str) -> str:
    """Return the IANA timezone for a locale tag.

    Unknown tags fall back to America/New_York.

    Examples:
        >>> timezone_for_locale("it-IT")
        'Europe/Rome'
        >>> timezone_for_locale("xx-XX")
        'America/New_York'
    """
    tag = locale.value if isinstance(locale, Locale) else locale
    return LOCALE_TIMEZONES.get(tag, DEFAULT_TIMEZONE)


__all__ = [
    "Locale",
    "LOCALE_TIMEZONES",
    "DEFAULT_TIMEZONE",
    "timezone_for_locale",
]
