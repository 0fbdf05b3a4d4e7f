"""
Coarse first-run country detection from the runtime timezone.

This is a deliberately small substring heuristic, not geolocation. It only
picks a sensible default; the user's explicit choice always wins.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from ..errors import TimezoneDetectionError

logger = logging.getLogger(__name__)

LOCALTIME_PATH = Path("/etc/localtime")

# Checked in order; the first matching rule wins
_TIMEZONE_RULES = (
    (('America/New_York', 'America/Los_Angeles'), (), 'US'),
    (('Australia',), (), 'AU'),
    (('Europe',), ('London',), 'EU'),
    (('America/Toronto',), (), 'CA'),
)


def resolve_timezone_name(override: Optional[str] = None) -> str:
    """
    Resolve the IANA name of the runtime timezone.

    Args:
        override: Explicit timezone name (e.g. from settings)

    Returns:
        Timezone name such as ``Europe/Paris``

    Raises:
        TimezoneDetectionError: If no source yields a name
    """
    if override:
        return override

    tz_env = os.environ.get("TZ", "").lstrip(":")
    if tz_env:
        return tz_env

    try:
        target = str(LOCALTIME_PATH.resolve(strict=True))
    except (OSError, RuntimeError) as e:
        raise TimezoneDetectionError(f"Cannot read {LOCALTIME_PATH}: {e}") from e

    marker = "zoneinfo/"
    if marker not in target:
        raise TimezoneDetectionError(f"{LOCALTIME_PATH} does not point into a zoneinfo tree: {target}")

    return target.split(marker, 1)[1]


def detect_country_code(timezone_name: str) -> Optional[str]:
    """
    Map a timezone name to a catalog country code.

    Args:
        timezone_name: IANA timezone name

    Returns:
        Country code, or None when no rule matches
    """
    for includes, excludes, code in _TIMEZONE_RULES:
        if any(part in timezone_name for part in includes) and not any(
            part in timezone_name for part in excludes
        ):
            return code

    return None
