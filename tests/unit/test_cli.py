from __future__ import annotations

import json
from pathlib import Path

import pytest

from drips import __version__
from drips.cli import build_parser, main

ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def _json_out(capsys: pytest.CaptureFixture[str]) -> dict:
    return json.loads(capsys.readouterr().out)


def test_cli_help_includes_subcommands(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main([])
    assert rc == 2
    out = capsys.readouterr().out
    for cmd in ("config", "account", "rate", "metadata"):
        assert cmd in out


def test_cli_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"drips v{__version__}"


def test_cli_unknown_command_errors() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["nope"])


def test_config_encode_and_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "encode", "--stream-id", "1", "--amount-per-second", "1000000000"]) == 0
    packed = _json_out(capsys)["packed"]
    assert int(packed) == 2**224 + 10**9 * 2**64

    assert main(["config", "decode", packed]) == 0
    assert _json_out(capsys) == {"streamId": 1, "amountPerSecond": "1000000000", "start": 0, "durationSeconds": 0}


def test_config_encode_out_of_range_is_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["config", "encode", "--stream-id", str(2**32), "--amount-per-second", "1"]) == 1
    assert "streamId" in capsys.readouterr().err


def test_account_address(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["account", ADDRESS.lower()]) == 0
    assert _json_out(capsys) == {"accountId": str(int(ADDRESS, 16)), "driver": "address", "address": ADDRESS}


def test_account_orcid(capsys: pytest.CaptureFixture[str]) -> None:
    payload = int.from_bytes(b"0000-0002-1825-0097".ljust(27, b"\x00"), "big")
    assert main(["account", str((3 << 224) | payload)]) == 0
    out = _json_out(capsys)
    assert out["driver"] == "repo"
    assert out["orcid"] == "0000-0002-1825-0097"


def test_account_unknown_driver(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["account", str(9 << 224)]) == 1
    assert "Unknown driver tag 9" in capsys.readouterr().err


def test_rate(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rate", "1", "--unit", "second", "--decimals", "18"]) == 0
    assert _json_out(capsys) == {"amountPerSecond": str(10**27), "unit": "second", "decimals": 18}


def test_rate_uses_config_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text("streams:\n  token_decimals: 6\n  time_unit: day\n")
    assert main(["rate", "86.4"]) == 0
    assert _json_out(capsys) == {"amountPerSecond": str(10**12), "unit": "day", "decimals": 6}


def test_rate_unroundable(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rate", "0.000000000000000001", "--unit", "year", "--decimals", "18"]) == 1
    assert "1 wei per week" in capsys.readouterr().err


def test_metadata_validate(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    link = {"accountId": "500", "driver": "nft", "type": "dripList"}
    doc = {
        "driver": "immutable-splits",
        "type": "subList",
        "recipients": [{"type": "address", "weight": 1_000_000, "accountId": "1"}],
        "parent": link,
        "root": link,
    }
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(doc))

    assert main(["metadata", "validate", str(path), "--family", "immutable-splits", "--latest"]) == 0
    assert _json_out(capsys) == {"family": "immutable-splits", "version": "v1", "latest": True}


def test_metadata_validate_no_match(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"driver": "repo"}))
    assert main(["metadata", "validate", str(path), "--family", "repo-driver"]) == 1
    assert "No known repo-driver metadata version matched" in capsys.readouterr().err


def test_metadata_validate_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["metadata", "validate", str(tmp_path / "nope.json"), "--family", "nft-driver"]) == 1
    assert "cannot read" in capsys.readouterr().err
