"""Input Validation — fail-fast type checks for credential fields.

Invariants:
    - Every field must be a str (subclasses accepted); nothing is coerced
    - Fields are checked in order username, password, legacy_id; first failure wins
    - Empty strings are valid: the legacy scheme hashes them like any other text
"""

from typing import Any

from pwreset.core.domain_types import CredentialRequest
from pwreset.core.errors import InvalidInputError


def validate_credentials(
    username: Any, password: Any, legacy_id: Any,
) -> CredentialRequest:
    """Return a CredentialRequest or raise InvalidInputError."""
    for name, value in (
        ("username", username), ("password", password), ("legacy_id", legacy_id),
    ):
        if not isinstance(value, str):
            raise InvalidInputError(name, value)
    return CredentialRequest(
        username=username, password=password, legacy_id=legacy_id,
    )
