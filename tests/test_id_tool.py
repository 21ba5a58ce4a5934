#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Numeric ID Obfuscation Codec
# Copyright (C) 2025 [Your Name/Institution]
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_id_tool.py

"""
Unit tests for the command-line front end (src/id_tool.py).

The tool normally reads config.ini; every test here swaps in an empty
config so only codec defaults and command-line options apply.
"""
from configparser import ConfigParser
from unittest.mock import patch

import pytest

import id_tool


@pytest.fixture(autouse=True)
def empty_config(monkeypatch):
    monkeypatch.setattr(id_tool, "APP_CONFIG", ConfigParser())


def run_tool(capsys, *args):
    exit_code = id_tool.main(list(args))
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


def test_encode(capsys):
    """Test printing the ID for a list of numbers."""
    assert run_tool(capsys, "encode", "1", "2", "3") == (0, "86Rf07\n", "")


def test_decode(capsys):
    """Test printing the numbers of an ID."""
    assert run_tool(capsys, "decode", "86Rf07") == (0, "1 2 3\n", "")


def test_decode_unknown_characters_prints_empty_line(capsys):
    """Test decoding an ID with unknown symbols."""
    exit_code, out, _ = run_tool(capsys, "decode", "*")
    assert exit_code == 0
    assert out == "\n"


def test_min_length_override(capsys):
    """Test the --min-length option."""
    exit_code, out, _ = run_tool(capsys, "--min-length", "10", "encode", "1", "2", "3")
    assert exit_code == 0
    assert out == "86Rf07xd4z\n"


def test_alphabet_override(capsys):
    """Test the --alphabet option."""
    exit_code, out, _ = run_tool(capsys, "--alphabet", "0123456789abcdef", "encode", "1", "2", "3")
    assert exit_code == 0
    assert out == "489158\n"


def test_no_blocklist(capsys):
    """Test the --no-blocklist option."""
    _, blocked_out, _ = run_tool(capsys, "encode", "4572721")
    _, unblocked_out, _ = run_tool(capsys, "--no-blocklist", "encode", "4572721")
    assert unblocked_out == "aho1e\n"
    assert blocked_out != "aho1e\n"


def test_blocklist_file(capsys, write_blocklist_file):
    """Test the --blocklist-file option."""
    path = write_blocklist_file(["ArUO"])
    exit_code, out, _ = run_tool(capsys, "--blocklist-file", str(path), "encode", "100000")
    assert exit_code == 0
    assert out == "QyG4\n"


def test_missing_blocklist_file(capsys, tmp_path):
    """Test the error for an unreadable blocklist file."""
    exit_code, _, err = run_tool(capsys, "--blocklist-file", str(tmp_path / "missing.txt"), "encode", "1")
    assert exit_code == 1
    assert "Could not read blocklist file" in err


def test_negative_number_is_reported(capsys):
    """Test the error for a negative number."""
    exit_code, out, err = run_tool(capsys, "encode", "-1")
    assert exit_code == 1
    assert out == ""
    assert "Number is not a non negative integer: -1" in err


def test_invalid_alphabet_is_reported(capsys):
    """Test the error for a bad alphabet."""
    exit_code, _, err = run_tool(capsys, "--alphabet", "ab", "encode", "1")
    assert exit_code == 1
    assert "Alphabet is too small" in err


def test_usage_error_exits_with_2():
    """Test that argparse usage errors exit with status 2."""
    with pytest.raises(SystemExit) as e:
        id_tool.main(["encode", "not-a-number"])
    assert e.value.code == 2


def test_main_reads_sys_argv(capsys):
    """Test running without explicit arguments."""
    with patch("sys.argv", ["id_tool.py", "encode", "0"]):
        assert id_tool.main() == 0
    assert capsys.readouterr().out == "bM\n"

# === End of tests/test_id_tool.py ===
