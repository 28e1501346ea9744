"""Password Reset Schemas — request/response contracts for the reset endpoint.

Invariants:
    - username, password: required strict strings (empty allowed)
    - legacy_id: optional strict string; omitted -> server default
    - Unpaired surrogates (e.g. a lone "\\ud83d" JSON escape) are rejected with a
      field-level 400 before any hashing: they cannot be echoed back as UTF-8
    - Response echoes inputs except the bare password (it is inside report_text)
"""

from pydantic import BaseModel, Field, StrictStr, field_validator


class PasswordResetRequest(BaseModel):
    """Credentials to derive a legacy hash for."""
    username: StrictStr
    password: StrictStr
    legacy_id: StrictStr | None = None

    @field_validator("username", "password", "legacy_id")
    @classmethod
    def reject_unpaired_surrogates(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("contains an unpaired UTF-16 surrogate") from None
        return v


class PasswordResetResponse(BaseModel):
    """Derived hash plus the operator report."""
    legacy_id: str
    username: str
    hash_hex: str = Field(min_length=128, max_length=128)
    report_text: str
