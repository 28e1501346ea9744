"""Stretched Key Derivation — password hash -> seed -> 1024 wide-digest rounds.

Invariants:
    - Exactly 7 primitive digests (inside password_hash) and 1 + 1024 wide digests
    - Round order is fixed: seed = wide_digest(seed + round_key), 1024 times
    - Control returns to the event loop after every round
    - Same CredentialRequest -> same 128-char uppercase hex, always

Design Decisions:
    - asyncio.sleep(0) per round over a worker thread: keeps a single-loop host
      responsive without moving work off the loop (ADR: pure CPU, ~1ms per round)
    - Not cancellable by design; callers await one completion
"""

import asyncio

from pwreset.core.domain_types import CredentialRequest, HexDigest512
from pwreset.core.key_schedule import (
    WIDE_DIGEST_ROUNDS,
    password_hash,
    round_key,
    wide_digest,
)


async def derive_stretched_key(request: CredentialRequest) -> HexDigest512:
    """Derive the legacy stretched key for one credential request."""
    pwd_hash = password_hash(request.username, request.password)
    key = round_key(request.username, request.legacy_id)

    seed = wide_digest(pwd_hash + key)
    for _ in range(WIDE_DIGEST_ROUNDS):
        seed = wide_digest(seed + key)
        await asyncio.sleep(0)
    return seed
