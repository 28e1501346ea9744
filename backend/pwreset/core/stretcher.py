"""Keyed Stretcher — salted, iterated application of the 160-bit digest.

Invariants:
    - iterations > 0: exactly `iterations` digest calls, each over the previous
      result (or the message) followed by the code-unit-reversed salt
    - iterations == 0: one digest call, then the scramble transform; salt unused
    - Output is 40 uppercase hex chars in both branches
    - iterations < 0 or non-int -> InvalidIterationsError

Design Decisions:
    - The scramble branch is never reached by the derivation path (always 7
      iterations). It is kept exactly as the legacy scheme defines it, with no
      assumed purpose
"""

from pwreset.core.byte_encoder import reverse_units
from pwreset.core.digest import digest
from pwreset.core.domain_types import HexDigest160
from pwreset.core.errors import InvalidIterationsError


def scramble(hex_digest: str) -> str:
    """Reverse the first 4, the middle, and the last 4 chars independently."""
    head, middle, tail = hex_digest[:4], hex_digest[4:-4], hex_digest[-4:]
    return head[::-1] + middle[::-1] + tail[::-1]


def stretch(message: str, salt: str, iterations: int) -> HexDigest160:
    """Stretch message with salt over the given number of digest iterations."""
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidIterationsError(iterations)

    if iterations == 0:
        return HexDigest160(scramble(digest(message)))

    reversed_salt = reverse_units(salt)
    running = digest(message + reversed_salt)
    for _ in range(iterations - 1):
        running = digest(running + reversed_salt)
    return running
