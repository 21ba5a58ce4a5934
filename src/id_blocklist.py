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
# Filename: src/id_blocklist.py

"""
Blocklist of words that generated IDs must not contain.

The raw word list is classified once, relative to a specific alphabet, into
three buckets that trade precision for simplicity:

-   **exact_matches**: words of exactly the minimum word length. These only
    block an ID that *is* the word, since short words would otherwise hit
    far too many IDs.
-   **prefixes_and_suffixes**: longer words containing a digit (leet-speak
    spellings). These are mostly legible at the ends of an ID.
-   **matches_anywhere**: every other longer word; blocked as a substring.

Words shorter than the minimum length, or using characters the (lowercased)
alphabet cannot produce, are dropped. All matching is case-insensitive.
"""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import NamedTuple, FrozenSet, Tuple

from codec_errors import ConfigError
from id_alphabet import is_utf8_string

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
# Installed with the package, see [tool.setuptools.package-data]
DEFAULT_BLOCKLIST_PACKAGE = "id_codec_data"
DEFAULT_BLOCKLIST_RESOURCE = "default_blocklist.txt"

_DIGIT_RE = re.compile(r"\d")

# Loaded on first use
DEFAULT_WORDS_CACHE = None


class Blocklist(NamedTuple):
    min_word_length: int
    exact_matches: FrozenSet[str] = frozenset()
    prefixes_and_suffixes: Tuple[str, ...] = ()
    matches_anywhere: Tuple[str, ...] = ()


def new(words, min_word_length: int, alphabet_str: str) -> Blocklist:
    """
    Builds a Blocklist from `words` for IDs drawn from `alphabet_str`.

    Raises:
        ConfigError: if `words` is not a collection of words, or if any of its
            elements is not a valid UTF-8 string (all offenders are reported).
    """
    words = _validate_words(words)

    alphabet_chars = set(alphabet_str.lower())
    exact_matches = set()
    prefixes_and_suffixes = []
    matches_anywhere = []

    for word in dict.fromkeys(words):
        lowered = word.lower()

        if len(lowered) < min_word_length:
            continue
        if not all(char in alphabet_chars for char in lowered):
            continue

        if len(lowered) == min_word_length:
            exact_matches.add(lowered)
        elif _DIGIT_RE.search(lowered):
            prefixes_and_suffixes.append(lowered)
        else:
            matches_anywhere.append(lowered)

    return Blocklist(
        min_word_length=min_word_length,
        exact_matches=frozenset(exact_matches),
        prefixes_and_suffixes=tuple(sorted(set(prefixes_and_suffixes), key=lambda w: (len(w), w))),
        matches_anywhere=tuple(sorted(set(matches_anywhere), key=lambda w: (len(w), w))),
    )


def is_blocked(blocklist: Blocklist, id_str: str) -> bool:
    """Returns True if the (case-insensitive) ID hits any blocklist bucket."""
    lowered = id_str.lower()
    size = len(lowered)

    if size < blocklist.min_word_length:
        return False
    if size == blocklist.min_word_length:
        return lowered in blocklist.exact_matches

    return (
        any(word in lowered for word in blocklist.matches_anywhere)
        or lowered.startswith(blocklist.prefixes_and_suffixes)
        or lowered.endswith(blocklist.prefixes_and_suffixes)
    )


def load_words(path) -> list:
    """Reads a one-word-per-line UTF-8 file, skipping blank lines."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        words = [line.strip() for line in f]
    words = [word for word in words if word]
    logger.debug(f"Loaded {len(words)} blocklist words from {path}")
    return words


def default_words() -> list:
    """Returns the bundled default word list, reading it once per process."""
    global DEFAULT_WORDS_CACHE
    if DEFAULT_WORDS_CACHE is None:
        resource = resources.files(DEFAULT_BLOCKLIST_PACKAGE).joinpath(DEFAULT_BLOCKLIST_RESOURCE)
        with resources.as_file(resource) as path:
            DEFAULT_WORDS_CACHE = load_words(path)
    return list(DEFAULT_WORDS_CACHE)


def _validate_words(words) -> list:
    if isinstance(words, (str, bytes, bytearray)):
        raise ConfigError("blocklist_is_not_enumerable", words)
    try:
        words = list(words)
    except TypeError:
        raise ConfigError("blocklist_is_not_enumerable", words)

    invalid_words = [word for word in words if not is_utf8_string(word)]
    if invalid_words:
        raise ConfigError("some_words_in_blocklist_are_not_utf8_strings", invalid_words)
    return words

# === End of src/id_blocklist.py ===
