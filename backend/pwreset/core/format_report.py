"""Report Formatting — operator-facing text for a derived hash.

Invariants:
    - Pure string building: no IO, no persistence
    - Banner first, then identifier, username, plaintext password, blank line, hash
    - Plaintext password is echoed on purpose: the operator needs it alongside
      the hash when overwriting the legacy password field
"""

REPORT_BANNER = (
    "=== REPLACE PASSWORD IN TCLMUSER TABLE WITH THIS NEW PASSWORD ==="
)


def build_report(
    username: str, password: str, legacy_id: str, hash_hex: str,
) -> str:
    return (
        f"{REPORT_BANNER}\n"
        f"UUID: {legacy_id}\n"
        f"Username: {username}\n"
        f"Password: {password}\n"
        f"\n"
        f"{hash_hex}"
    )
