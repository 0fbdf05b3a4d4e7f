"""
Durable key-value storage for user preferences.
"""

import json
import fcntl
from pathlib import Path
from typing import Dict, Optional
import logging

from ..errors import PreferenceStoreError

logger = logging.getLogger(__name__)

COUNTRY_KEY = "clubup-country"
LOCALE_KEY = "clubup-locale"


class PreferenceStore:
    """
    String-only key-value storage.

    Values are plain strings with no schema versioning; callers validate
    what they read and treat unknown values as absent.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryPreferenceStore(PreferenceStore):
    """Dict-backed store that lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __repr__(self) -> str:
        return f"MemoryPreferenceStore({self._data!r})"


class JsonFilePreferenceStore(PreferenceStore):
    """
    Store backed by a single JSON object on disk.

    Provides:
    - Read-through access (every get reads the file)
    - Shared/exclusive file locking for safe concurrent access
    - Empty-state fallback for a missing or corrupt file
    """

    def __init__(self, path: str = "data/preferences.json"):
        """
        Initialize the store.

        Args:
            path: JSON file to persist preferences in
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> Dict[str, str]:
        """
        Load all preferences from disk.

        Returns:
            Mapping of key to value, empty if the file is missing or unreadable
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                # Acquire shared lock for reading
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    data = json.load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)

        except (ValueError, OSError) as e:
            logger.warning(f"Failed to read preferences, treating as empty: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file with unexpected shape: {self.path}")
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        """
        Persist all preferences to disk.

        Raises:
            PreferenceStoreError: If the file cannot be written
        """
        try:
            with open(self.path, 'a+', encoding='utf-8') as f:
                # Acquire exclusive lock before truncating
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    f.seek(0)
                    f.truncate()
                    json.dump(data, f, indent=2, sort_keys=True)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)

            logger.debug(f"Preferences saved: {self.path}")

        except IOError as e:
            logger.error(f"Failed to save preferences: {e}")
            raise PreferenceStoreError(f"Could not write {self.path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        """Delete the preferences file."""
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Cleared preferences: {self.path}")

    def __repr__(self) -> str:
        return f"JsonFilePreferenceStore({str(self.path)!r})"
