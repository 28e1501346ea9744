"""Digest Primitive — hand-rolled 160-bit Merkle–Damgård digest (SHA-1 structure).

Invariants:
    - digest("") == DA39A3EE5E6B4B0D3255BFEF95601890AFD80709
    - digest("abc") == A9993E364706816ABA3E25717850C26C9CD0D89D
    - For BMP-only text the result equals SHA-1 over the UTF-8 bytes
    - Output is always 40 hex chars; case follows CaseMode (UPPER by default)
    - All state is local to one call

Design Decisions:
    - Not hashlib.sha1: the message is a sequence of legacy units (see byte_encoder),
      and with apply_utf8=False a unit may exceed 0xFF and spill into the
      neighbouring bit lane of its word. Only a hand-rolled packer reproduces that
    - Block count uses N = ceil((len/4 + 2) / 16) over the terminated message,
      the same sizing the legacy packer used
"""

from pwreset.core.byte_encoder import encode_utf8, utf16_units
from pwreset.core.domain_types import CaseMode, HexDigest160

_MASK = 0xFFFFFFFF

_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f(stage: int, b: int, c: int, d: int) -> int:
    if stage == 0:
        return (b & c) ^ (~b & d)
    if stage == 2:
        return (b & c) ^ (b & d) ^ (c & d)
    return b ^ c ^ d


def _pack_blocks(units: list[int]) -> list[list[int]]:
    """Terminate, pad and split the message into 16-word big-endian blocks."""
    padded = list(units)
    padded.append(0x80)
    length = len(padded)
    block_count = (length + 8 + 63) // 64
    padded.extend([0] * (block_count * 64 - length))

    words = [
        ((padded[i] << 24) | (padded[i + 1] << 16)
         | (padded[i + 2] << 8) | padded[i + 3]) & _MASK
        for i in range(0, len(padded), 4)
    ]
    bit_length = (length - 1) * 8
    words[-2] = (bit_length >> 32) & _MASK
    words[-1] = bit_length & _MASK
    return [words[i:i + 16] for i in range(0, len(words), 16)]


def _compress(state: list[int], block: list[int]) -> None:
    w = block + [0] * 64
    for t in range(16, 80):
        w[t] = _rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1)

    a, b, c, d, e = state
    for t in range(80):
        stage = t // 20
        temp = (_rotl(a, 5) + _f(stage, b, c, d) + e + _K[stage] + w[t]) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d

    for i, v in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + v) & _MASK


def digest(
    message: str, apply_utf8: bool = True, case: CaseMode = CaseMode.UPPER,
) -> HexDigest160:
    """Compute the 160-bit legacy digest of message as a hex string.

    apply_utf8=False hashes the raw UTF-16 code units instead of the encoded bytes.
    """
    units = encode_utf8(message) if apply_utf8 else utf16_units(message)
    state = list(_INITIAL_STATE)
    for block in _pack_blocks(units):
        _compress(state, block)

    hex_digest = "".join(f"{word:08x}" for word in state)
    if case == CaseMode.UPPER:
        hex_digest = hex_digest.upper()
    return HexDigest160(hex_digest)
