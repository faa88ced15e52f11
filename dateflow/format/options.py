"""Resolution of DateFlow.format() arguments.

DateFlow.format() accepts nothing, a pattern, a FormatOptions record or a
mapping with "date_format" / "locale" keys. All of them are resolved here
into one FormatOptions record before any rendering decision is made.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from dateflow._internal.validation import coerce_locale, coerce_pattern
from dateflow.errors import InvalidConfigError
from dateflow.units.locale import Locale
from dateflow.units.pattern import FormatPattern

FormatArgument = Union[None, str, FormatPattern, "FormatOptions", Mapping[str, Any]]

_OPTION_KEYS: frozenset[str] = frozenset({"date_format", "locale"})


@dataclass(frozen=True)
class FormatOptions:
    """An optional pattern and an optional locale.

    String values are validated and converted to their enum members.

    Examples:
        >>> FormatOptions(date_format="DD/MM/YYYY").date_format
        <FormatPattern.DMY_SLASH: 'DD/MM/YYYY'>
    """

    date_format: FormatPattern | None = None
    locale: Locale | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_format", coerce_pattern(self.date_format))
        object.__setattr__(self, "locale", coerce_locale(self.locale))

    @classmethod
    def from_argument(cls, argument: FormatArgument) -> FormatOptions:
        """Resolve any accepted format() argument into FormatOptions.

        Raises:
            InvalidConfigError: For unknown patterns, locales or mapping keys.
            TypeError: For unsupported argument types.
        """
        if argument is None:
            return cls()
        if isinstance(argument, FormatOptions):
            return argument
        if isinstance(argument, (str, FormatPattern)):
            return cls(date_format=argument)
        if isinstance(argument, Mapping):
            unknown = set(argument) - _OPTION_KEYS
            if unknown:
                raise InvalidConfigError(
                    f"unknown format option(s): {', '.join(sorted(unknown))}"
                )
            return cls(**argument)
        raise TypeError(
            f"format() expects a pattern, FormatOptions or mapping, "
            f"got {type(argument).__name__}"
        )

    def with_defaults(
        self,
        date_format: FormatPattern | None,
        locale: Locale | None,
    ) -> FormatOptions:
        """Fill unset fields from instance defaults."""
        return FormatOptions(
            date_format=self.date_format if self.date_format is not None else date_format,
            locale=self.locale if self.locale is not None else locale,
        )


__all__ = ["FormatArgument", "FormatOptions"]
