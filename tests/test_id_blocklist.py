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
# Filename: tests/test_id_blocklist.py

"""
Unit tests for src/id_blocklist.py.
"""
from pathlib import Path

import pytest

import id_blocklist
from codec_errors import ConfigError

ALPHABET = "abcdef123"
WORDS = ["fab", "FACE", "bead", "ab12", "1bad", "ab", "xyz", "cafe", "Fab"]


@pytest.fixture
def blocklist():
    return id_blocklist.new(WORDS, 3, ALPHABET)


def test_words_are_classified(blocklist):
    """Test that words land in the exact, prefix/suffix and anywhere buckets."""
    assert blocklist.min_word_length == 3
    assert blocklist.exact_matches == frozenset({"fab"})
    assert blocklist.prefixes_and_suffixes == ("1bad", "ab12")
    assert blocklist.matches_anywhere == ("bead", "cafe", "face")


def test_lists_are_sorted_by_length_then_value():
    """Test the ordering of the matching buckets."""
    blocklist = id_blocklist.new(["ffffa", "eeee", "dddd", "ccccc"], 3, "abcdef")
    assert blocklist.matches_anywhere == ("dddd", "eeee", "ccccc", "ffffa")


def test_words_outside_lowercased_alphabet_are_dropped():
    """A lowercase word can still block an uppercase-only alphabet."""
    blocklist = id_blocklist.new(["sxnzkl", "sx-nz"], 3, "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert blocklist.matches_anywhere == ("sxnzkl",)


@pytest.mark.parametrize("id_str, expected", [
    ("FAB", True),       # exact match, any case
    ("fabc", False),     # short words never match inside longer ids
    ("ab", False),       # shorter than the minimum word length
    ("xCAFEx", True),    # anywhere
    ("ab12ff", True),    # prefix
    ("ffab12", True),    # suffix
    ("fab12f", False),   # digit words only match at the ends
    ("dddd", False),
])
def test_is_blocked(blocklist, id_str, expected):
    """Test blocklist matching for each kind of word."""
    assert id_blocklist.is_blocked(blocklist, id_str) is expected


def test_empty_blocklist_blocks_nothing():
    """Test that an empty word list never blocks."""
    blocklist = id_blocklist.new([], 3, ALPHABET)
    assert not id_blocklist.is_blocked(blocklist, "fab")
    assert not id_blocklist.is_blocked(blocklist, "cafe")


def test_short_words_are_not_blocked_with_longer_minimum():
    """Test that words below the minimum word length are dropped."""
    blocklist = id_blocklist.new(["abc"], 4, "abc")
    assert not id_blocklist.is_blocked(blocklist, "abc")


def test_generators_are_accepted():
    """Test that any iterable of words is accepted."""
    blocklist = id_blocklist.new((w for w in ["cafe"]), 3, ALPHABET)
    assert blocklist.matches_anywhere == ("cafe",)


@pytest.mark.parametrize("not_enumerable", ["555", b"555", 42.456, 7, None])
def test_non_enumerable_blocklist_is_rejected(not_enumerable):
    """Test that scalars, strings and bytes are rejected as word lists."""
    with pytest.raises(ConfigError) as e:
        id_blocklist.new(not_enumerable, 3, ALPHABET)
    assert e.value.reason == "blocklist_is_not_enumerable"
    assert e.value.value == not_enumerable


def test_non_string_words_are_all_reported():
    """Test that every invalid word is reported, in order."""
    words = ["aaaa", -44.3, "ok", 5, "go", b"\x80", "bad\udc80", "done"]
    with pytest.raises(ConfigError) as e:
        id_blocklist.new(words, 3, ALPHABET)
    assert e.value.reason == "some_words_in_blocklist_are_not_utf8_strings"
    assert e.value.value == [-44.3, 5, b"\x80", "bad\udc80"]


def test_load_words_skips_blank_lines(write_blocklist_file):
    """Test reading a word file with blank and padded lines."""
    path = write_blocklist_file(["first", "", "  second  ", ""])
    assert id_blocklist.load_words(path) == ["first", "second"]


def test_default_words_are_bundled():
    """Test that the bundled default list loads and is clean."""
    words = id_blocklist.default_words()
    assert "aho1e" in words
    assert all(word == word.strip() and word for word in words)


def test_default_words_returns_a_copy():
    """Test that callers cannot modify the cached default list."""
    words = id_blocklist.default_words()
    words.append("not-a-real-entry")
    assert "not-a-real-entry" not in id_blocklist.default_words()


def test_default_words_load_outside_the_project_root(monkeypatch, tmp_path):
    """Test that the default list is read from the installed package, not the working directory."""
    import id_codec_data

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(id_blocklist, "DEFAULT_WORDS_CACHE", None)

    package_dir = Path(id_codec_data.__file__).resolve().parent
    assert (package_dir / id_blocklist.DEFAULT_BLOCKLIST_RESOURCE).is_file()
    assert "aho1e" in id_blocklist.default_words()


def test_default_list_is_declared_as_package_data():
    """Test that pyproject.toml ships the default list with the distribution."""
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    content = pyproject.read_text(encoding="utf-8")
    assert 'packages = ["id_codec_data"]' in content
    assert 'id_codec_data = ["default_blocklist.txt"]' in content

# === End of tests/test_id_blocklist.py ===
