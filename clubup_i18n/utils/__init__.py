"""
Utility modules for ClubUp localization.
"""

from .formatting import (
    to_babel_locale,
    format_amount,
    format_long_date,
    format_short_time,
    format_medium_datetime,
)
from .logging_config import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Formatting
    "to_babel_locale",
    "format_amount",
    "format_long_date",
    "format_short_time",
    "format_medium_datetime",
    # Logging
    "configure_logging",
    "get_logger",
]
