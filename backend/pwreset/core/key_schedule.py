"""Key Schedule — salts, keys and the wide digest used by stretched key derivation.

Invariants:
    - Password salt is "5unf15h" + username + "D4740N"
    - Password hash is stretch(password, salt, 7), uppercased: 40 hex chars
    - Round key is reverse_units(username + "@" + legacy_id)
    - wide_digest is SHA-512 over the legacy runtime's UTF-8, uppercased: 128 hex chars

Design Decisions:
    - Constants are module-level, not settings: changing any of them silently
      breaks every hash already stored in the legacy table
    - hashlib for SHA-512: the legacy scheme itself used a library SHA-512 here,
      only the 160-bit primitive is hand-rolled
"""

import hashlib

from pwreset.core.byte_encoder import encode_runtime_utf8, reverse_units
from pwreset.core.domain_types import HexDigest160, HexDigest512
from pwreset.core.stretcher import stretch

PASSWORD_SALT_PREFIX = "5unf15h"
PASSWORD_SALT_SUFFIX = "D4740N"
PASSWORD_STRETCH_ITERATIONS = 7
WIDE_DIGEST_ROUNDS = 1024


def password_salt(username: str) -> str:
    return f"{PASSWORD_SALT_PREFIX}{username}{PASSWORD_SALT_SUFFIX}"


def password_hash(username: str, password: str) -> HexDigest160:
    """Stretch the password with the per-user salt."""
    stretched = stretch(
        password, password_salt(username), PASSWORD_STRETCH_ITERATIONS,
    )
    return HexDigest160(stretched.upper())


def round_key(username: str, legacy_id: str) -> str:
    """Key appended to the seed on every wide-digest round."""
    return reverse_units(f"{username}@{legacy_id}")


def wide_digest(text: str) -> HexDigest512:
    return HexDigest512(
        hashlib.sha512(encode_runtime_utf8(text)).hexdigest().upper(),
    )
