"""Password Reset Route — derive a legacy hash for manual insertion.

Invariants:
    - POST /api/v1/password-reset returns 200 with hash + report
    - Body validated by PasswordResetRequest before reaching the handler
    - Domain errors propagate to the global PwResetError handler
"""

from fastapi import APIRouter, status

from pwreset.schemas.password_reset import (
    PasswordResetRequest, PasswordResetResponse,
)
from pwreset.services.password_reset import derive_password_hash

router = APIRouter(prefix="/api/v1/password-reset", tags=["password-reset"])


@router.post(
    "", response_model=PasswordResetResponse,
    status_code=status.HTTP_200_OK,
)
async def create_password_reset(body: PasswordResetRequest):
    """Derive the legacy hash for the given credentials."""
    report = await derive_password_hash(
        body.username, body.password, body.legacy_id,
    )
    return PasswordResetResponse(
        legacy_id=report.legacy_id,
        username=report.username,
        hash_hex=report.hash_hex,
        report_text=report.report_text,
    )
