import base64
import io
import json

import pyseto
from pytest import fixture, raises

from pasetomint.cli import main
from pasetomint.schema import SymmetricKey


@fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    for name in ("PASETOMINT_KEY", "PASETOMINT_ISSUER", "PASETOMINT_AUDIENCE", "PASETOMINT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _run(argv: list[str], stdin: str = "") -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def _claims(key: SymmetricKey, token: str, assertion: bytes = b"") -> dict:
    decoded = pyseto.decode(key.to_paseto_key(), token.strip(), implicit_assertion=assertion)
    return json.loads(decoded.payload)


def test_key_command_prints_base64_key() -> None:
    code, out, err = _run(["key"])

    assert code == 0
    assert err == ""
    assert len(base64.b64decode(out.strip(), validate=True)) == 32


def test_key_command_outputs_differ() -> None:
    assert _run(["key"])[1] != _run(["key"])[1]


def test_generate_with_key_argument(encoded_key: str, symmetric_key: SymmetricKey) -> None:
    code, out, _ = _run(
        [
            "generate",
            encoded_key,
            "--sub",
            "alice",
            "--expires-in",
            "1h",
            "--claim",
            "role=admin",
            "-c",
            "beta",
            "--assertion",
            "ctx",
        ]
    )

    assert code == 0
    claims = _claims(symmetric_key, out, b"ctx")
    assert claims["sub"] == "alice"
    assert "exp" in claims
    assert claims["role"] == "admin"
    assert claims["beta"] is None


def test_generate_reads_key_from_stdin_by_default(
    encoded_key: str, symmetric_key: SymmetricKey
) -> None:
    code, out, _ = _run(["generate", "--iss", "mint"], stdin=encoded_key + "\n")

    assert code == 0
    claims = _claims(symmetric_key, out)
    assert claims["iss"] == "mint"
    assert "exp" not in claims


def test_generate_uses_settings_defaults(
    monkeypatch, encoded_key: str, symmetric_key: SymmetricKey
) -> None:
    monkeypatch.setenv("PASETOMINT_KEY", encoded_key)
    monkeypatch.setenv("PASETOMINT_ISSUER", "configured")

    code, out, _ = _run(["generate", "--aud", "api"])

    assert code == 0
    claims = _claims(symmetric_key, out)
    assert claims["iss"] == "configured"
    assert claims["aud"] == "api"


def test_malformed_stdin_key_reports_error() -> None:
    code, out, err = _run(["generate", "-"], stdin="QUJDRA==")

    assert code == 1
    assert out == ""
    assert err.startswith("error: ")
    assert "32 bytes" in err


def test_reserved_custom_claim_reports_error(encoded_key: str) -> None:
    code, _, err = _run(["generate", encoded_key, "--claim", "exp=tomorrow"])

    assert code == 1
    assert "collides with a registered claim" in err


def test_invalid_timestamp_reports_error(encoded_key: str) -> None:
    code, _, err = _run(["generate", encoded_key, "--nbf", "later"])

    assert code == 1
    assert "'nbf'" in err


def test_exp_and_expires_in_are_mutually_exclusive(encoded_key: str) -> None:
    with raises(SystemExit) as exit_info:
        _run(["generate", encoded_key, "--exp", "2030-01-01T00:00:00Z", "--expires-in", "1h"])

    assert exit_info.value.code == 2


def test_nbf_and_iat_may_coexist(encoded_key: str, symmetric_key: SymmetricKey) -> None:
    code, out, _ = _run(
        [
            "generate",
            encoded_key,
            "--nbf",
            "2025-08-01T12:00:00Z",
            "--iat",
            "2025-08-01T11:00:00Z",
        ]
    )

    assert code == 0
    claims = _claims(symmetric_key, out)
    assert claims["nbf"] == "2025-08-01T12:00:00Z"
    assert claims["iat"] == "2025-08-01T11:00:00Z"


def test_empty_claim_name_is_an_argument_error(encoded_key: str) -> None:
    with raises(SystemExit) as exit_info:
        _run(["generate", encoded_key, "--claim", "=value"])

    assert exit_info.value.code == 2


def test_out_of_range_exp_reports_error(encoded_key: str) -> None:
    code, out, err = _run(["generate", encoded_key, "--exp", "9999-12-31T23:59:59-01:00"])

    assert code == 1
    assert out == ""
    assert "'exp'" in err


def test_out_of_range_iat_reports_error(encoded_key: str) -> None:
    code, _, err = _run(["generate", encoded_key, "--iat", "0001-01-01T00:00:00+01:00"])

    assert code == 1
    assert "'iat'" in err


def test_undecodable_stdin_reports_error() -> None:
    stdout, stderr = io.StringIO(), io.StringIO()
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe key"), encoding="utf-8")

    code = main(["generate", "-"], stdin=stdin, stdout=stdout, stderr=stderr)

    assert code == 1
    assert stderr.getvalue().startswith("error: ")


def test_overlong_duration_reports_error(encoded_key: str) -> None:
    code, _, err = _run(["generate", encoded_key, "--expires-in", "9" * 5000 + "s"])

    assert code == 1
    assert "too large" in err


def test_unknown_log_level_does_not_crash(monkeypatch) -> None:
    monkeypatch.setenv("PASETOMINT_LOG_LEVEL", "bogus")

    code, out, _ = _run(["key"])

    assert code == 0
    assert out.strip()
