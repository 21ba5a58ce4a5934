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
# Filename: src/id_alphabet.py

"""
Alphabet primitives for the ID codec.

An alphabet is an immutable `bytes` object: a flat, random-access sequence
of unique single-byte symbols. Every transformation below returns a new
`bytes` value and never touches its input, so a shuffled alphabet can be
shared freely between encode/decode calls and threads.

Key operations:
-   `new_shuffled()`: validates a raw alphabet string and applies the
    deterministic shuffle once.
-   `shuffle()`: the seedless, deterministic permutation that drives all of
    the codec's "randomness". It must stay byte-for-byte stable, otherwise
    previously issued IDs stop decoding.
-   `split_and_exchange()` / `reverse()`: the rotation and reversal pair
    used to derive the per-ID working alphabet.
"""

import unicodedata

from codec_errors import ConfigError

MIN_ALPHABET_LENGTH = 3

# Repeats are looked for in every normalization form of the input
NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD")

# Mark categories that attach to the preceding character
GRAPHEME_EXTENDING_CATEGORIES = ("Mn", "Mc", "Me")
ZERO_WIDTH_JOINER = "\u200d"


def new_shuffled(alphabet_str) -> bytes:
    """
    Validates `alphabet_str` and returns it as a shuffled alphabet.

    Checks run in order and the first failure is raised as a ConfigError:
    the value must be a valid UTF-8 string, every grapheme must be a single
    byte, there must be at least MIN_ALPHABET_LENGTH of them, and none may
    repeat.
    """
    if not is_utf8_string(alphabet_str):
        raise ConfigError("alphabet_is_not_an_utf8_string", alphabet_str)

    graphemes = split_graphemes(alphabet_str)
    multibyte_graphemes = [g for g in graphemes if len(g.encode("utf-8")) != 1]
    if multibyte_graphemes:
        raise ConfigError("alphabet_contains_multibyte_graphemes", multibyte_graphemes)

    if len(graphemes) < MIN_ALPHABET_LENGTH:
        raise ConfigError(
            "alphabet_is_too_small",
            {"min_length": MIN_ALPHABET_LENGTH, "alphabet": alphabet_str},
        )

    repeated_graphemes = _find_repeated_graphemes(alphabet_str)
    if repeated_graphemes:
        raise ConfigError("alphabet_contains_repeated_graphemes", repeated_graphemes)

    return shuffle(alphabet_str.encode("ascii"))


def shuffle(alphabet: bytes) -> bytes:
    """Deterministically permutes the alphabet (no external randomness)."""
    symbols = bytearray(alphabet)
    size = len(symbols)

    for i in range(size - 1):
        j = size - 1 - i
        r = (i * j + symbols[i] + symbols[j]) % size
        symbols[i], symbols[r] = symbols[r], symbols[i]

    return bytes(symbols)


def split_and_exchange(alphabet: bytes, split_index: int) -> bytes:
    """Moves the symbols from `split_index` onwards in front of the ones before it."""
    if not 0 <= split_index < len(alphabet):
        raise IndexError(f"Split index {split_index} outside alphabet of size {len(alphabet)}")
    return alphabet[split_index:] + alphabet[:split_index]


def reverse(alphabet: bytes) -> bytes:
    return alphabet[::-1]


def symbol_at(alphabet: bytes, index: int) -> int:
    return alphabet[index]


def index_of(alphabet: bytes, symbol: int) -> int:
    # Only ever called with symbols taken from the same alphabet
    return alphabet.index(symbol)


def first_symbols(alphabet: bytes, count: int) -> bytes:
    """Returns the first `count` symbols, 1 <= count <= len(alphabet)."""
    if not 1 <= count <= len(alphabet):
        raise IndexError(f"Cannot take {count} symbols from alphabet of size {len(alphabet)}")
    return alphabet[:count]


def contains(alphabet: bytes, grapheme: str) -> bool:
    """True if `grapheme` is a single-byte symbol present in the alphabet."""
    encoded = grapheme.encode("utf-8", errors="surrogatepass")
    return len(encoded) == 1 and encoded[0] in alphabet


def split_graphemes(text: str) -> list:
    """
    Splits `text` into user-perceived characters.

    A grapheme here is a base character followed by any marks (nonspacing,
    spacing or enclosing) and zero width joiners, plus the symbol that
    follows a joiner (emoji sequences). This reports decomposed accents
    (e.g. "e\\u0308") and spacing vowel signs (e.g. "c\\u0903") as one
    offending unit. Rarer cluster rules, such as Hangul syllable
    sequences and regional indicator pairs, are not applied.
    """
    graphemes = []
    for char in text:
        if graphemes and _extends_grapheme(graphemes[-1], char):
            graphemes[-1] += char
        else:
            graphemes.append(char)
    return graphemes


def _extends_grapheme(grapheme: str, char: str) -> bool:
    if char == ZERO_WIDTH_JOINER or unicodedata.category(char) in GRAPHEME_EXTENDING_CATEGORIES:
        return True
    return grapheme.endswith(ZERO_WIDTH_JOINER) and unicodedata.category(char) == "So"


def is_utf8_string(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates
        return False
    return True


def _find_repeated_graphemes(alphabet_str: str) -> list:
    repeated = []
    for form in NORMALIZATION_FORMS:
        seen = set()
        for grapheme in split_graphemes(unicodedata.normalize(form, alphabet_str)):
            if grapheme in seen and grapheme not in repeated:
                repeated.append(grapheme)
            seen.add(grapheme)
    return repeated

# === End of src/id_alphabet.py ===
