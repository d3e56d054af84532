"""
The operations exposed to the hosting shell.

Each call reads the active configuration exactly once. Batch operations take
that single snapshot for every item, so a profile switch during a batch never
mixes profiles within one result.
"""
import logging
from typing import Optional

import config
from active_config import ActiveConfig, ConfigSnapshot
from batch import apply
from profiles import ProfileRegistry

logger = logging.getLogger(__name__)

registry = ProfileRegistry()
active_config = ActiveConfig(registry.default_profile, prefix_enabled=True)


def init_state(profile_name: Optional[str] = None, prefix_enabled: Optional[bool] = None) -> None:
    """Seeds the registry and active configuration; called once at startup."""
    global registry, active_config
    registry = ProfileRegistry()
    profile = registry.get(profile_name or config.DEFAULT_PROFILE)
    enabled = config.PREFIX_ENABLED if prefix_enabled is None else prefix_enabled
    active_config = ActiveConfig(profile, prefix_enabled=enabled)
    logger.info(f"Obfuscation state initialised: profile='{profile.name}', prefix_enabled={enabled}")


# --- Single item ---

def encrypt_with(snapshot: ConfigSnapshot, text: str) -> str:
    return registry.codec(snapshot.profile).encode(text, snapshot.prefix_enabled)


def decrypt_with(snapshot: ConfigSnapshot, text: str) -> str:
    return registry.codec(snapshot.profile).decode(text)


def encrypt(text: str) -> str:
    return encrypt_with(active_config.snapshot(), text)


def decrypt(text: str) -> str:
    return decrypt_with(active_config.snapshot(), text)


# --- Batch ---

def batch_encrypt(text: str) -> str:
    snapshot = active_config.snapshot()
    return apply(text, lambda item: encrypt_with(snapshot, item))


def batch_decrypt(text: str) -> str:
    snapshot = active_config.snapshot()
    return apply(text, lambda item: decrypt_with(snapshot, item))


# --- Configuration ---

def get_profile() -> str:
    return active_config.get_profile().name


def set_profile(name: str) -> None:
    active_config.set_profile(registry.get(name))


def get_prefix_enabled() -> bool:
    return active_config.get_prefix_enabled()


def set_prefix_enabled(enabled: bool) -> None:
    active_config.set_prefix_enabled(enabled)
