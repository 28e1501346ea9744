"""Byte Encoder — legacy text-to-byte conversions the hash chain depends on.

Invariants:
    - Text is processed as UTF-16 code units, never as code points
    - encode_utf8: unit < 0x80 -> 1 byte, < 0x800 -> 2 bytes, otherwise 3 bytes
    - A non-BMP character (surrogate pair) becomes two independent 3-byte
      sequences, not one 4-byte sequence
    - reverse_units reverses code units, so a reversed surrogate pair becomes two
      lone surrogates carried inside an ordinary str
    - encode_runtime_utf8 joins well-formed pairs and maps lone surrogates to U+FFFD

Design Decisions:
    - The non-BMP behaviour of encode_utf8 is a known defect of the legacy scheme.
      Stored hashes depend on it, so it is reproduced, not corrected
      (ADR: any fix is a versioned, compatibility-breaking change)
    - Code units come from the utf-16-be codec with surrogatepass: lone surrogates
      survive both directions without a hand-written surrogate splitter
"""

import struct


def utf16_units(text: str) -> list[int]:
    """Split text into UTF-16 code units."""
    raw = text.encode("utf-16-be", "surrogatepass")
    return list(struct.unpack(f">{len(raw) // 2}H", raw))


def from_units(units: list[int]) -> str:
    """Rebuild a str from UTF-16 code units, keeping any lone surrogates."""
    return "".join(map(chr, units))


def reverse_units(text: str) -> str:
    """Reverse text code unit by code unit."""
    return from_units(utf16_units(text)[::-1])


def encode_utf8(text: str) -> list[int]:
    """Encode text to the legacy UTF-8 byte stream, one int per byte."""
    out: list[int] = []
    for unit in utf16_units(text):
        if unit < 0x80:
            out.append(unit)
        elif unit < 0x800:
            out.append(0xC0 | (unit >> 6))
            out.append(0x80 | (unit & 0x3F))
        else:
            out.append(0xE0 | (unit >> 12))
            out.append(0x80 | ((unit >> 6) & 0x3F))
            out.append(0x80 | (unit & 0x3F))
    return out


def encode_runtime_utf8(text: str) -> bytes:
    """Encode text the way the legacy runtime fed strings to its library digests."""
    raw = text.encode("utf-16-be", "surrogatepass")
    # utf-16 decoder pairs surrogates and replaces each unpaired unit with U+FFFD
    return raw.decode("utf-16-be", "replace").encode("utf-8")
