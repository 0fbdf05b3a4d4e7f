"""
Exceptions raised by the localization layer.

Selection and lookup failures never raise: unknown codes are ignored and
missing translations resolve through the fallback chain. These types cover
the infrastructure underneath (preference storage, timezone introspection,
custom catalog files).
"""


class LocalizationError(Exception):
    """Base class for all ClubUp localization errors."""
    pass


class PreferenceStoreError(LocalizationError):
    """Preferences could not be written to durable storage."""
    pass


class TimezoneDetectionError(LocalizationError):
    """The runtime timezone name could not be resolved."""
    pass


class CatalogError(LocalizationError):
    """A custom catalog file is malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid catalog file {path}: {reason}")
