from __future__ import annotations

import pytest

from totp_guard.scripts import show_code
from totp_guard.services import totp_service

SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_prints_code_for_timestamp(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_code.main(["--secret", SECRET, "--at", "59"]) == 0
    assert capsys.readouterr().out.strip() == "287082"


def test_prints_current_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(totp_service, "_now", lambda: 1111111109.0)
    assert show_code.main(["--secret", SECRET]) == 0
    assert capsys.readouterr().out.strip() == "081804"


def test_secret_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("TOTP_SECRET", SECRET)
    assert show_code.main(["--at", "1234567890"]) == 0
    assert capsys.readouterr().out.strip() == "005924"


def test_verify_valid_and_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    assert show_code.main(["--secret", SECRET, "--at", "59", "--verify", "287082"]) == 0
    assert capsys.readouterr().out.strip() == "valid"

    assert show_code.main(["--secret", SECRET, "--at", "59", "--verify", "000000"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_verify_respects_window(capsys: pytest.CaptureFixture[str]) -> None:
    # 969429 belongs to step 3, two steps after the step of t=59
    args = ["--secret", SECRET, "--at", "59", "--verify", "969429"]
    assert show_code.main(args) == 1
    assert show_code.main([*args, "--window", "2"]) == 0
    capsys.readouterr()


def test_prints_provisioning_uri(capsys: pytest.CaptureFixture[str]) -> None:
    args = ["--secret", SECRET, "--uri", "--issuer", "ACME Co", "--account", "alice"]
    assert show_code.main(args) == 0
    assert capsys.readouterr().out.strip() == (
        "otpauth://totp/ACME%20Co:alice?secret=" + SECRET
        + "&issuer=ACME%20Co&algorithm=SHA1&digits=6&period=30"
    )


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--secret", "not base32!"],
        ["--secret", "GEZDGNBV"],
        ["--secret", SECRET, "--uri"],
        ["--secret", SECRET, "--uri", "--issuer", "A:B", "--account", "alice"],
        ["--secret", SECRET, "--window", "-1", "--verify", "123456"],
    ],
)
def test_input_errors_exit_with_two(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], argv: list[str]
) -> None:
    monkeypatch.delenv("TOTP_SECRET", raising=False)
    assert show_code.main(argv) == 2
    assert "[error]" in capsys.readouterr().err
