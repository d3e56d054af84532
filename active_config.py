"""
Process-wide selection of the active profile and the prefix toggle.

The pair is held as one immutable snapshot and only ever replaced whole, under
a lock, so no reader sees a profile from one update and a toggle from another.
"""
import logging
import threading
from typing import NamedTuple

from profiles import Profile

logger = logging.getLogger(__name__)


class ConfigSnapshot(NamedTuple):
    profile: Profile
    prefix_enabled: bool


class ActiveConfig:

    def __init__(self, profile: Profile, prefix_enabled: bool = True):
        self._initial = ConfigSnapshot(profile, prefix_enabled)
        self._current = self._initial
        self._lock = threading.Lock()

    def snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return self._current

    def get_profile(self) -> Profile:
        return self.snapshot().profile

    def set_profile(self, profile: Profile) -> None:
        with self._lock:
            self._current = self._current._replace(profile=profile)
        logger.info(f"Active profile switched to '{profile.name}'")

    def get_prefix_enabled(self) -> bool:
        return self.snapshot().prefix_enabled

    def set_prefix_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._current = self._current._replace(prefix_enabled=bool(enabled))
        logger.info(f"Prefix emission {'enabled' if enabled else 'disabled'}")

    def reset(self) -> None:
        with self._lock:
            self._current = self._initial
