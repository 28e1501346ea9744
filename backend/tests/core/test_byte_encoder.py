"""Byte Encoder tests — legacy UTF-8, code-unit reversal, runtime encoding.

Tests cover:
    - 1/2/3-byte encodings for BMP text (matches str.encode)
    - Surrogate pairs encoded as two 3-byte sequences (legacy defect kept)
    - Reversal by UTF-16 code unit
    - Runtime UTF-8: pairs joined, lone surrogates -> U+FFFD
"""

from pwreset.core.byte_encoder import (
    encode_runtime_utf8,
    encode_utf8,
    from_units,
    reverse_units,
    utf16_units,
)


# --- encode_utf8 --------------------------------------------------------------

def test_ascii_passes_through():
    assert encode_utf8("abc") == [0x61, 0x62, 0x63]


def test_empty_string_encodes_to_nothing():
    assert encode_utf8("") == []


def test_two_byte_range():
    assert encode_utf8("é") == [0xC3, 0xA9]
    assert encode_utf8("\u07ff") == [0xDF, 0xBF]


def test_three_byte_range():
    assert encode_utf8("€") == [0xE2, 0x82, 0xAC]
    assert encode_utf8("\uffff") == [0xEF, 0xBF, 0xBF]


def test_bmp_text_matches_standard_utf8():
    text = "Grüße, 東京! ½ ∑"
    assert bytes(encode_utf8(text)) == text.encode("utf-8")


def test_non_bmp_encodes_each_surrogate_separately():
    # U+1F600 -> surrogates D83D DE00 -> two 3-byte sequences
    assert bytes(encode_utf8("😀")) == b"\xed\xa0\xbd\xed\xb8\x80"
    assert bytes(encode_utf8("😀")) != "😀".encode("utf-8")


# --- code units ---------------------------------------------------------------

def test_utf16_units_splits_surrogate_pair():
    assert utf16_units("a😀") == [0x61, 0xD83D, 0xDE00]


def test_from_units_round_trips_lone_surrogates():
    assert from_units([0xDE00, 0x61]) == "\ude00a"


def test_reverse_units_plain_text():
    assert reverse_units("demo@reset") == "teser@omed"


def test_reverse_units_splits_surrogate_pair():
    assert reverse_units("a😀") == "\ude00\ud83da"


# --- encode_runtime_utf8 ------------------------------------------------------

def test_runtime_utf8_joins_pairs():
    assert encode_runtime_utf8("😀") == "😀".encode("utf-8")


def test_runtime_utf8_joins_pair_given_as_two_code_points():
    assert encode_runtime_utf8("\ud83d\ude00") == "😀".encode("utf-8")


def test_runtime_utf8_replaces_lone_surrogates():
    assert encode_runtime_utf8("\ude00\ud83da") == b"\xef\xbf\xbd\xef\xbf\xbda"
