"""CLI tests using click.testing.CliRunner.

Uses TOXID_HOME env var to isolate the config directory per test.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from toxid.cli.main import cli

from tests.vectors import CLASSICAL_HEX, COMMITMENT_HEX, NOSPAM_HEX, PK_HEX, PQ_HEX

BAD_CHECKSUM_HEX = CLASSICAL_HEX[:-4] + "0000"


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict:
    """Isolated TOXID_HOME with no overrides."""
    home = tmp_path / "toxid_home"
    home.mkdir()
    return {"TOXID_HOME": str(home), "TOXID_LOG_LEVEL": "", "TOXID_OUTPUT_FORMAT": ""}


def test_cli_help(runner: CliRunner):
    """--help lists every command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("inspect", "validate", "scan", "build"):
        assert cmd in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


def test_inspect_classical(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["inspect", CLASSICAL_HEX], env=env)
    assert result.exit_code == 0
    assert "classical (38 bytes)" in result.output
    assert PK_HEX in result.output
    assert NOSPAM_HEX in result.output
    assert "ML-KEM" not in result.output
    assert "Valid:      yes" in result.output


def test_inspect_pq(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["inspect", PQ_HEX], env=env)
    assert result.exit_code == 0
    assert "post-quantum (46 bytes)" in result.output
    assert COMMITMENT_HEX in result.output


def test_inspect_bad_checksum(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["inspect", BAD_CHECKSUM_HEX], env=env)
    assert result.exit_code == 0
    assert "checksum mismatch" in result.output


def test_inspect_json(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["inspect", PQ_HEX, "--json"], env=env)
    assert result.exit_code == 0
    info = json.loads(result.output)
    assert info["variant"] == "post-quantum"
    assert info["mlkem_commitment"] == COMMITMENT_HEX
    assert info["nospam"] == NOSPAM_HEX
    assert info["checksum"] == "BEB1"
    assert info["valid"] is True


def test_inspect_json_from_env(runner: CliRunner, env: dict):
    env["TOXID_OUTPUT_FORMAT"] = "json"
    result = runner.invoke(cli, ["inspect", CLASSICAL_HEX], env=env)
    assert result.exit_code == 0
    assert json.loads(result.output)["mlkem_commitment"] is None


def test_inspect_malformed(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["inspect", PK_HEX], env=env)
    assert result.exit_code == 1
    assert "not an address" in result.output


def test_invalid_config_exits(runner: CliRunner, env: dict):
    env["TOXID_OUTPUT_FORMAT"] = "xml"
    result = runner.invoke(cli, ["inspect", CLASSICAL_HEX], env=env)
    assert result.exit_code == 1
    assert "Invalid output_format" in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


def test_validate_all_valid(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["validate", CLASSICAL_HEX, PQ_HEX], env=env)
    assert result.exit_code == 0
    assert f"{CLASSICAL_HEX}: valid" in result.output
    assert f"{PQ_HEX}: valid" in result.output


def test_validate_reports_each_failure_kind(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["validate", CLASSICAL_HEX, BAD_CHECKSUM_HEX, "nope"], env=env)
    assert result.exit_code == 1
    assert f"{BAD_CHECKSUM_HEX}: bad checksum" in result.output
    assert "nope: malformed" in result.output


def test_validate_json(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["validate", "--json", PQ_HEX], env=env)
    assert result.exit_code == 0
    assert json.loads(result.output) == {PQ_HEX: "valid"}


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


def test_scan_stdin(runner: CliRunner, env: dict):
    text = f"add me {CLASSICAL_HEX} or {BAD_CHECKSUM_HEX}\n"
    result = runner.invoke(cli, ["scan"], input=text, env=env)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines == [CLASSICAL_HEX, f"{BAD_CHECKSUM_HEX}  (bad checksum)"]


def test_scan_valid_only(runner: CliRunner, env: dict):
    text = f"{BAD_CHECKSUM_HEX} {PQ_HEX}"
    result = runner.invoke(cli, ["scan", "--valid-only"], input=text, env=env)
    assert result.exit_code == 0
    assert result.output.splitlines() == [PQ_HEX]


def test_scan_file_json(runner: CliRunner, env: dict, tmp_path: Path):
    path = tmp_path / "chat.txt"
    path.write_text(f"my id:\n{PQ_HEX}\n")
    result = runner.invoke(cli, ["scan", str(path), "--json"], env=env)
    assert result.exit_code == 0
    found = json.loads(result.output)
    assert [entry["address"] for entry in found] == [PQ_HEX]


def test_scan_file_with_undecodable_bytes(runner: CliRunner, env: dict, tmp_path: Path):
    path = tmp_path / "paste.bin"
    path.write_bytes(b"\xff\xfe\x80 junk " + CLASSICAL_HEX.encode("ascii") + b" \xc3(\n")
    result = runner.invoke(cli, ["scan", str(path)], env=env)
    assert result.exit_code == 0
    assert result.output.splitlines() == [CLASSICAL_HEX]


def test_scan_nothing_found(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["scan"], input=f"key only {PK_HEX}", env=env)
    assert result.exit_code == 0
    assert "No addresses found." in result.output


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


def test_build_classical(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["build", PK_HEX, NOSPAM_HEX], env=env)
    assert result.exit_code == 0
    assert result.output.strip() == CLASSICAL_HEX


def test_build_pq(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["build", PK_HEX, NOSPAM_HEX, "--commitment", COMMITMENT_HEX], env=env)
    assert result.exit_code == 0
    assert result.output.strip() == PQ_HEX


def test_build_bad_public_key(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["build", PK_HEX[:-2], NOSPAM_HEX], env=env)
    assert result.exit_code == 1
    assert "Invalid public key" in result.output


def test_build_bad_nospam(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["build", PK_HEX, "C8BA"], env=env)
    assert result.exit_code == 1
    assert "NoSpam must be 4 bytes" in result.output


def test_build_non_hex_nospam(runner: CliRunner, env: dict):
    result = runner.invoke(cli, ["build", PK_HEX, "ZZZZZZZZ"], env=env)
    assert result.exit_code == 1
    assert "not hex" in result.output
