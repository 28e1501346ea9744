"""Report formatting tests."""

from pwreset.core.format_report import REPORT_BANNER, build_report

HASH = "A" * 128


def test_report_contains_all_inputs_and_hash():
    report = build_report("demo", "pass1234", "reset", HASH)
    for part in ("reset", "demo", "pass1234", HASH):
        assert part in report


def test_report_layout():
    report = build_report("demo", "pass1234", "reset", HASH)
    assert report.splitlines() == [
        REPORT_BANNER,
        "UUID: reset",
        "Username: demo",
        "Password: pass1234",
        "",
        HASH,
    ]


def test_banner_tells_operator_to_replace_password():
    assert "REPLACE PASSWORD" in REPORT_BANNER
