"""Domain Types — value types shared by the hashing pipeline.

Invariants:
    - HexDigest160 is 40 hex chars; HexDigest512 is 128 uppercase hex chars
    - CredentialRequest and DerivedHashReport are frozen: one per call, never stored
    - CaseMode is the only way to pick digest output case (no magic ints)

Design Decisions:
    - NewType over dataclass wrappers for digests: zero runtime cost, full
      type-checker support
    - str Enum for CaseMode: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

HexDigest160 = NewType("HexDigest160", str)    # 40 hex chars
HexDigest512 = NewType("HexDigest512", str)    # 128 uppercase hex chars


# ─── Enums ───────────────────────────────────────────────────────

class CaseMode(str, Enum):
    """Output case of the 160-bit digest."""
    UPPER = "upper"
    LOWER = "lower"


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class CredentialRequest:
    """Inputs of one derivation. Validated before hashing starts."""
    username: str
    password: str
    legacy_id: str


@dataclass(frozen=True)
class DerivedHashReport:
    """Result of one derivation, handed back to the operator.

    Carries the plaintext password on purpose: the operator copies the whole
    report when overwriting the legacy password field.
    """
    legacy_id: str
    username: str
    password: str
    hash_hex: HexDigest512
    report_text: str
