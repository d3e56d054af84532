"""
Handles the encoding and decoding of numeric IDs into opaque, reversible
strings using the hashids library, one codec per profile.

Numerals beyond the unsigned 64-bit range are not fed to hashids. They pass
through verbatim behind a marker (the profile's reserved prefix when prefix
emission is on, otherwise "x") so they still round-trip.
"""
import logging

from hashids import Hashids

from core_logic import EmptyInput, InvalidNumericInput, InvalidCiphertext
from validation import MAX_NATIVE_ID, SENTINEL, Route, decide, is_numeral, is_oversized

logger = logging.getLogger(__name__)


class ObfuscationCodec:
    """Encodes and decodes numerals for a single, immutable profile."""

    def __init__(self, profile):
        self.profile = profile
        self._hashids: Hashids = profile.build_hashids()

    def __repr__(self):
        return f"ObfuscationCodec(profile={self.profile.name!r})"

    def _use_prefix(self, prefix_enabled: bool) -> bool:
        return bool(self.profile.reserved_prefix) and prefix_enabled

    def encode_id(self, n: int) -> str:
        """Encodes a single integer ID into a non-sequential string."""
        return self._hashids.encode(n)

    def decode_id(self, s: str) -> int:
        """Decodes a string back into an integer ID, raising InvalidCiphertext on failure."""
        try:
            decoded_tuple = self._hashids.decode(s)
        except Exception as e:
            logger.warning(f"hashids raised while decoding under profile '{self.profile.name}': {e!r}")
            raise InvalidCiphertext("Decoding failed, invalid obfuscated string") from e
        if not decoded_tuple or decoded_tuple[0] > MAX_NATIVE_ID:
            raise InvalidCiphertext()
        return decoded_tuple[0]  # hashids.decode returns a tuple, e.g., (123,)

    def encode(self, text: str, prefix_enabled: bool = True) -> str:
        """Turns a numeral string into a token."""
        if not text:
            raise EmptyInput()
        if not is_numeral(text):
            raise InvalidNumericInput(text)

        if is_oversized(text):
            marker = self.profile.reserved_prefix if self._use_prefix(prefix_enabled) else SENTINEL
            logger.debug(f"Numeral of {len(text)} digits is oversized, using '{marker}' fallback")
            return f"{marker}{text}"

        token = self.encode_id(int(text.lstrip("0") or "0"))
        if self._use_prefix(prefix_enabled):
            return f"{self.profile.reserved_prefix}{token}"
        return token

    def decode(self, token: str) -> str:
        """Turns a token back into its numeral string."""
        if not token:
            raise EmptyInput()

        decision = decide(token, self.profile)
        if decision.route is Route.PASSTHROUGH:
            return decision.body
        return str(self.decode_id(decision.body))
