"""Password Reset — the single operation exposed to callers.

Invariants:
    - Inputs validated before any hashing (InvalidInputError, never coerced)
    - legacy_id None -> Settings.default_legacy_id ("reset")
    - Returns one DerivedHashReport; nothing is persisted
    - Plaintext password and hash never reach the logs

Design Decisions:
    - Unexpected failures re-raised as DerivationError so callers handle one
      typed error (ADR: uniform error shape)
"""

import logging
import time
from typing import Any

from pwreset.config import get_settings
from pwreset.core.domain_types import DerivedHashReport
from pwreset.core.errors import DerivationError, ErrorContext, PwResetError
from pwreset.core.format_report import build_report
from pwreset.core.key_schedule import WIDE_DIGEST_ROUNDS
from pwreset.core.validate_input import validate_credentials
from pwreset.services.derive_key import derive_stretched_key

logger = logging.getLogger(__name__)


async def derive_password_hash(
    username: Any, password: Any, legacy_id: Any = None,
) -> DerivedHashReport:
    """Derive the legacy password hash and the operator report for it."""
    if legacy_id is None:
        legacy_id = get_settings().default_legacy_id
    request = validate_credentials(username, password, legacy_id)

    log_extra = {"legacy_id": request.legacy_id, "username": request.username}
    logger.info("Deriving legacy password hash", extra=log_extra)
    started = time.perf_counter()
    try:
        hash_hex = await derive_stretched_key(request)
    except PwResetError:
        raise
    except Exception as e:
        logger.error(
            f"Derivation failed: {e}", exc_info=True, extra=log_extra,
        )
        raise DerivationError(
            str(e),
            ErrorContext(legacy_id=request.legacy_id, username=request.username),
        ) from e

    duration_ms = round((time.perf_counter() - started) * 1000, 1)
    logger.info(
        "Derived legacy password hash",
        extra={**log_extra, "rounds": WIDE_DIGEST_ROUNDS, "duration_ms": duration_ms},
    )
    return DerivedHashReport(
        legacy_id=request.legacy_id,
        username=request.username,
        password=request.password,
        hash_hex=hash_hex,
        report_text=build_report(
            request.username, request.password, request.legacy_id, hash_hex,
        ),
    )
