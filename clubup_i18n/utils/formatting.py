"""
Locale-aware number and date formatting built on Babel.
"""

import re
from datetime import date, datetime
from functools import lru_cache
from typing import Union

from babel import Locale, UnknownLocaleError
from babel.dates import (
    format_date,
    format_datetime,
    format_time,
    get_date_format,
    get_datetime_format,
    get_time_format,
)
from babel.numbers import format_decimal

DateLike = Union[date, datetime]

_HOUR_FIELD = re.compile(r"(?<![hHkK])([hHkK])(?![hHkK])")


@lru_cache(maxsize=64)
def to_babel_locale(code: str) -> Locale:
    """
    Resolve a BCP 47 code to a Babel locale.

    Codes Babel has no data for (``en-EU``) fall back to the bare language,
    then to English.

    Args:
        code: Locale code such as ``en-GB``

    Returns:
        Babel Locale
    """
    for candidate in (code, code.split("-")[0]):
        try:
            return Locale.parse(candidate, sep="-")
        except (UnknownLocaleError, ValueError):
            continue

    return Locale("en")


def format_amount(amount: float, locale_code: str) -> str:
    """
    Format a number with locale grouping.

    Whole numbers show no decimals; anything with a fractional part shows
    exactly two.
    """
    pattern = "#,##0" if float(amount).is_integer() else "#,##0.00"
    return format_decimal(amount, format=pattern, locale=to_babel_locale(locale_code))


def _two_digit_hours(pattern: str) -> str:
    """Widen single-letter hour fields outside quoted literals, e.g. ``h:mm a`` -> ``hh:mm a``."""
    parts = pattern.split("'")
    # Even-indexed parts sit outside quotes
    for i in range(0, len(parts), 2):
        parts[i] = _HOUR_FIELD.sub(r"\1\1", parts[i])
    return "'".join(parts)


def short_time_pattern(locale: Locale) -> str:
    """The locale's short time pattern with a two-digit hour."""
    return _two_digit_hours(get_time_format("short", locale=locale).pattern)


def medium_datetime_pattern(locale: Locale) -> str:
    """Medium date and two-digit-hour time joined by the locale's own glue pattern."""
    return (
        get_datetime_format("medium", locale=locale)
        .replace("{1}", get_date_format("medium", locale=locale).pattern)
        .replace("{0}", short_time_pattern(locale))
    )


def format_long_date(value: DateLike, locale_code: str) -> str:
    """Year, full month name and day, e.g. ``19 October 2026``."""
    return format_date(value, format="long", locale=to_babel_locale(locale_code))


def format_short_time(value: datetime, locale_code: str) -> str:
    """Two-digit hour and minutes in the locale's clock convention, e.g. ``02:05 PM``."""
    locale = to_babel_locale(locale_code)
    return format_time(value, format=short_time_pattern(locale), locale=locale)


def format_medium_datetime(value: datetime, locale_code: str) -> str:
    """Abbreviated month date plus hours and minutes, e.g. ``Oct 19, 2026, 02:05 PM``."""
    locale = to_babel_locale(locale_code)
    return format_datetime(value, format=medium_datetime_pattern(locale), locale=locale)
