"""
Tests for the command line interface
"""

import json
import os

from hookforge import print_hook
from hookforge.cli import main


def test_prints_source(capsys):
    assert main(["--name", "FeeHook", "--bumping-fee"]) == 0
    out = capsys.readouterr().out
    assert out == print_hook({"name": "FeeHook", "bumping_fee_hook": True})


def test_json_summary(capsys):
    assert main(["--whitelist", "--bumping-fee", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["parents"] == ["BaseHook", "BumpingFee", "Whitelist"]
    assert data["permissions"]["beforeSwap"] is True
    assert "isWhitelisted" in data["source"]


def test_output_writes_file(tmp_path, capsys):
    assert main(["--whitelist", "--output", "gated", "--output-dir", str(tmp_path)]) == 0
    path = tmp_path / "gated.sol"
    assert path.exists()
    assert path.read_text(encoding="utf-8") == print_hook({"whitelist_hook": True})
    assert str(path) in capsys.readouterr().out


def test_output_defaults_to_contract_name(tmp_path):
    assert main(["--name", "Named", "--output", "--output-dir", str(tmp_path)]) == 0
    assert os.path.exists(tmp_path / "Named.sol")


def test_error_exit_code(capsys):
    assert main(["--name", "!!!"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid contract name" in captured.err
