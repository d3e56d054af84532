"""
Pre-decode rules that decide what happens to a token before the hashids
primitive ever sees it.

Rules are checked top to bottom, the first match wins:

    all digits                          -> reject (InvalidCiphertext)
    profile prefix + nothing            -> reject (LengthTooShort)
    profile prefix + digits             -> passthrough, oversized numeral
    profile prefix + body < min_length  -> reject (LengthTooShort)
    profile prefix + body               -> decode body
    "x" + digits                        -> passthrough, oversized numeral
                                           (prefixed profiles: only beyond 64 bits)
    prefixed profile, no "x", too short -> reject (LengthTooShort)
    anything else                       -> decode token

Only profiles that carry a reserved prefix enforce min_length up front. The
general profile leaves short tokens to the primitive, which rejects them
because it never produces them.
"""
from enum import Enum
from typing import NamedTuple

from core_logic import InvalidCiphertext, LengthTooShort

SENTINEL = "x"

MAX_NATIVE_ID = 2**64 - 1
_MAX_NATIVE_DIGITS = len(str(MAX_NATIVE_ID))


def is_numeral(text: str) -> bool:
    """True for a non-empty run of ASCII decimal digits."""
    return bool(text) and text.isascii() and text.isdigit()


def is_oversized(numeral: str) -> bool:
    """True when a numeral is beyond the unsigned 64-bit range; never calls int() on long input."""
    significant = numeral.lstrip("0")
    if len(significant) != _MAX_NATIVE_DIGITS:
        return len(significant) > _MAX_NATIVE_DIGITS
    return int(significant) > MAX_NATIVE_ID


class Route(Enum):
    PASSTHROUGH = "passthrough"
    DECODE = "decode"


class Decision(NamedTuple):
    route: Route
    body: str


def decide(token: str, profile) -> Decision:
    """Classifies a non-empty token for the given profile, or raises."""
    if is_numeral(token):
        raise InvalidCiphertext("Invalid obfuscated string: a bare number is never a valid token")

    prefix = profile.reserved_prefix
    if prefix and token.startswith(prefix):
        body = token[len(prefix):]
        if not body:
            raise LengthTooShort(profile.min_length, after_prefix=True)
        if is_numeral(body):
            return Decision(Route.PASSTHROUGH, body)
        if len(body) < profile.min_length:
            raise LengthTooShort(profile.min_length, after_prefix=True)
        return Decision(Route.DECODE, body)

    if token.startswith(SENTINEL):
        rest = token[len(SENTINEL):]
        # Prefixed profiles only emit the sentinel for oversized numerals
        if is_numeral(rest) and (not prefix or is_oversized(rest)):
            return Decision(Route.PASSTHROUGH, rest)
    elif prefix and len(token) < profile.min_length:
        raise LengthTooShort(profile.min_length)

    return Decision(Route.DECODE, token)
