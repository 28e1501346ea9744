"""Input validation tests — non-text inputs fail fast, nothing coerced."""

import pytest

from pwreset.core.domain_types import CredentialRequest
from pwreset.core.errors import InvalidInputError
from pwreset.core.validate_input import validate_credentials


def test_valid_strings_build_request():
    req = validate_credentials("demo", "pass1234", "reset")
    assert req == CredentialRequest("demo", "pass1234", "reset")


def test_empty_strings_are_valid():
    req = validate_credentials("", "", "")
    assert req.password == ""


@pytest.mark.parametrize("field, args", [
    ("username", (123, "pw", "id")),
    ("password", ("demo", 1234, "id")),
    ("legacy_id", ("demo", "pw", None)),
    ("password", ("demo", b"bytes", "id")),
])
def test_non_string_rejected(field, args):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_credentials(*args)
    assert exc_info.value.field == field
    assert exc_info.value.code == "INVALID_INPUT"
    assert exc_info.value.http_status == 400


def test_first_invalid_field_wins():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_credentials(1, 2, 3)
    assert exc_info.value.field == "username"
