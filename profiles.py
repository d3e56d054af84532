"""
The static table of obfuscation profiles and the registry that owns one codec
per profile.

A profile is immutable once defined, so a codec built for it never needs to be
invalidated. The registry builds each codec lazily, at most once, under a lock.
"""
import logging
import threading
from typing import Dict, Optional, Tuple, Union

from hashids import Hashids
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core_logic import ConfigurationError
from encoding import ObfuscationCodec

logger = logging.getLogger(__name__)

GENERAL = "general"
HUAWEI = "huawei"
PROFILE_NAMES: Tuple[str, ...] = (GENERAL, HUAWEI)


class Profile(BaseModel):
    """A named set of obfuscation parameters."""
    model_config = ConfigDict(frozen=True)

    name: str
    salt: str
    min_length: int = Field(..., ge=1)
    # None means the hashids default alphabet
    alphabet: Optional[str] = None
    reserved_prefix: Optional[str] = None

    @field_validator('alphabet')
    def validate_alphabet(cls, value):
        if value is None:
            return value
        if len(set(value)) != len(value):
            raise ValueError("Alphabet must not contain duplicate characters.")
        if len(value) < 16:
            raise ValueError("Alphabet must contain at least 16 characters.")
        return value

    @field_validator('reserved_prefix')
    def validate_reserved_prefix(cls, value):
        if value is not None and (not value or value.isdigit()):
            raise ValueError("Reserved prefix must be a non-empty, non-numeric string.")
        return value

    def build_hashids(self) -> Hashids:
        if self.alphabet is None:
            return Hashids(salt=self.salt, min_length=self.min_length)
        return Hashids(salt=self.salt, min_length=self.min_length, alphabet=self.alphabet)


DEFAULT_PROFILES: Tuple[Profile, ...] = (
    Profile(name=GENERAL, salt="Tongyong", min_length=12),
    Profile(
        name=HUAWEI,
        salt="Huawei",
        min_length=16,
        alphabet="abcdefghijklmnopqrstuvwxyz1234567890",
        reserved_prefix="haot",
    ),
)


class ProfileRegistry:
    """Lookup of profiles by name plus a lazily populated codec cache."""

    def __init__(self, profiles=DEFAULT_PROFILES, default: str = GENERAL):
        self._profiles: Dict[str, Profile] = {p.name: p for p in profiles}
        if default not in self._profiles:
            raise ConfigurationError(f"Default profile {default!r} is not defined")
        self.default_name = default
        self._codecs = {}
        self._lock = threading.Lock()

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._profiles)

    @property
    def default_profile(self) -> Profile:
        return self._profiles[self.default_name]

    def get(self, name: str) -> Profile:
        try:
            return self._profiles[name]
        except KeyError:
            raise ConfigurationError(
                f"Invalid profile name {name!r}, must be one of: {', '.join(self._profiles)}"
            ) from None

    def codec(self, profile: Union[Profile, str]):
        """Returns the cached codec for a profile, building it on first use."""
        if isinstance(profile, str):
            profile = self.get(profile)

        codec = self._codecs.get(profile.name)
        if codec is not None:
            return codec

        with self._lock:
            codec = self._codecs.get(profile.name)
            if codec is None:
                codec = ObfuscationCodec(profile)
                self._codecs[profile.name] = codec
                logger.debug(f"Built codec for profile '{profile.name}'")
            return codec
