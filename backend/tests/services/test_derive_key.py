"""Stretched key derivation tests — determinism, sensitivity, call counts, yielding.

Tests cover:
    - Output shape (128 uppercase hex) and determinism
    - Each argument changes the output
    - Agreement with an independent hashlib oracle
    - 7 primitive digests and 1 + 1024 wide digests per derivation
    - Event loop stays live during the 1024 rounds
"""

import asyncio
import re
from unittest.mock import patch

from pwreset.core.digest import digest
from pwreset.core.domain_types import CredentialRequest
from pwreset.core.key_schedule import WIDE_DIGEST_ROUNDS, wide_digest
from pwreset.services.derive_key import derive_stretched_key
from tests.reference_hash import reference_derive


async def _derive(username, password, legacy_id):
    return await derive_stretched_key(
        CredentialRequest(username, password, legacy_id),
    )


# --- Shape & determinism ------------------------------------------------------

async def test_output_is_128_uppercase_hex():
    result = await _derive("demo", "pass1234", "reset")
    assert re.fullmatch(r"[0-9A-F]{128}", result)


async def test_deterministic():
    first = await _derive("demo", "pass1234", "reset")
    second = await _derive("demo", "pass1234", "reset")
    assert first == second


async def test_matches_independent_reference():
    assert await _derive("demo", "pass1234", "reset") == (
        reference_derive("demo", "pass1234", "reset")
    )


async def test_matches_reference_for_multibyte_bmp_input():
    assert await _derive("jürgen", "pässwörd€", "東京") == (
        reference_derive("jürgen", "pässwörd€", "東京")
    )


# --- Sensitivity --------------------------------------------------------------

async def test_each_argument_changes_output():
    results = {
        await _derive("alice", "pw1", "x"),
        await _derive("bob", "pw1", "x"),
        await _derive("alice", "pw2", "x"),
        await _derive("alice", "pw1", "y"),
    }
    assert len(results) == 4


# --- Call counts --------------------------------------------------------------

async def test_wide_digest_called_once_plus_1024_times():
    with patch(
        "pwreset.services.derive_key.wide_digest", wraps=wide_digest,
    ) as spy:
        await _derive("demo", "pass1234", "reset")
    assert spy.call_count == 1 + WIDE_DIGEST_ROUNDS


async def test_primitive_digest_called_seven_times():
    with patch("pwreset.core.stretcher.digest", wraps=digest) as spy:
        await _derive("demo", "pass1234", "reset")
    assert spy.call_count == 7


async def test_every_round_appends_reversed_key():
    with patch(
        "pwreset.services.derive_key.wide_digest", wraps=wide_digest,
    ) as spy:
        await _derive("demo", "pass1234", "reset")
    for call in spy.call_args_list:
        assert call.args[0].endswith("teser@omed")


# --- Cooperative yielding -----------------------------------------------------

async def test_event_loop_runs_other_tasks_during_rounds():
    ticks = 0
    done = False

    async def ticker():
        nonlocal ticks
        while not done:
            ticks += 1
            await asyncio.sleep(0)

    task = asyncio.create_task(ticker())
    await _derive("demo", "pass1234", "reset")
    done = True
    await task
    assert ticks >= WIDE_DIGEST_ROUNDS // 2


async def test_concurrent_derivations_do_not_interfere():
    args = [("alice", "pw1", "x"), ("bob", "pw2", "y"), ("alice", "pw1", "x")]
    results = await asyncio.gather(*(_derive(*a) for a in args))
    assert results[0] == results[2]
    assert results[0] != results[1]
    assert results[1] == await _derive("bob", "pw2", "y")
