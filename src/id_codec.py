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
# Filename: src/id_codec.py

"""
A reversible codec that turns lists of non-negative integers into short,
URL-safe, random-looking IDs and back.

This allows internal numeric keys (e.g. database row IDs) to be exposed as
compact public identifiers such as "86Rf07" for [1, 2, 3]. It is an
obfuscation scheme, NOT encryption: anyone with the alphabet can decode.

Usage:
    from id_codec import new, encode, decode

    codec = new(min_length=8)
    public_id = encode(codec, [1, 2, 3])
    numbers = decode(codec, public_id)   # -> [1, 2, 3]

A Codec is an immutable value. Build it once (see codec_registry.py for a
shared, cached instance) and reuse it from any number of threads.
"""

import logging
from typing import NamedTuple

import id_alphabet
import id_blocklist
from codec_errors import ConfigError, EncodeError

logger = logging.getLogger(__name__)

# url-safe characters
DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 0
MIN_LENGTH_RANGE = range(0, 256)


class Codec(NamedTuple):
    alphabet: bytes                    # already shuffled
    min_length: int                    # minimum length of generated IDs
    blocklist: id_blocklist.Blocklist  # words IDs must not contain


def new(alphabet=None, min_length=None, blocklist=None) -> Codec:
    """
    Builds a Codec. Any option left as None falls back to its default.

    Args:
        alphabet (str): Unique single-byte symbols, at least 3 of them.
        min_length (int): Minimum ID length, 0..255.
        blocklist (iterable of str): Words IDs must not contain. Replaces
            (does not extend) the bundled default list; pass [] to disable.

    Raises:
        ConfigError: if any option is invalid.
    """
    alphabet_str = DEFAULT_ALPHABET if alphabet is None else alphabet
    min_length = DEFAULT_MIN_LENGTH if min_length is None else min_length

    shuffled_alphabet = id_alphabet.new_shuffled(alphabet_str)
    _validate_min_length(min_length)

    words = id_blocklist.default_words() if blocklist is None else blocklist
    blocklist = id_blocklist.new(words, id_blocklist.MIN_WORD_LENGTH, alphabet_str)

    logger.debug(
        f"Codec ready: alphabet size {len(shuffled_alphabet)}, min_length {min_length}, "
        f"{len(blocklist.exact_matches) + len(blocklist.prefixes_and_suffixes) + len(blocklist.matches_anywhere)} "
        f"blocklist words"
    )
    return Codec(alphabet=shuffled_alphabet, min_length=min_length, blocklist=blocklist)


def encode(codec: Codec, numbers) -> str:
    """
    Encodes a sequence of non-negative integers into an ID.

    An empty sequence encodes to "". If the generated ID hits the blocklist,
    the alphabet offset is nudged and encoding retried, at most
    alphabet-size + 1 times in total.

    Raises:
        EncodeError: for a non-integer or negative number, or when every
            attempt produced a blocked ID.
    """
    numbers = _validate_numbers(numbers)
    if not numbers:
        return ""

    alphabet_size = len(codec.alphabet)
    for attempt_index in range(alphabet_size + 1):
        id_str = _encode_attempt(codec, numbers, attempt_index)
        if not id_blocklist.is_blocked(codec.blocklist, id_str):
            return id_str
        logger.debug(f"ID for attempt {attempt_index} is blocked, regenerating")

    logger.warning(f"All {alphabet_size + 1} attempts to generate an unblocked ID failed")
    raise EncodeError("all_id_generation_attempts_were_censored", alphabet_size)


def decode(codec: Codec, id_str: str) -> list:
    """
    Decodes an ID back into its list of numbers.

    Never fails on string input: an empty ID, or one containing symbols
    outside the alphabet, decodes to [].
    """
    if not isinstance(id_str, str):
        raise TypeError(f"Id is not a string: {id_str!r}")
    if id_str == "":
        return []
    if not all(id_alphabet.contains(codec.alphabet, char) for char in id_str):
        return []

    alphabet = codec.alphabet

    # first character is always the prefix
    prefix, remaining = id_str[0], id_str[1:]

    # the semi-random offset chosen during encoding
    offset = id_alphabet.index_of(alphabet, ord(prefix))
    alphabet = id_alphabet.reverse(id_alphabet.split_and_exchange(alphabet, offset))

    numbers = []
    while remaining:
        separator = chr(id_alphabet.symbol_at(alphabet, 0))
        chunk, found, rest = remaining.partition(separator)

        if not chunk:
            # the rest is padding
            break

        numbers.append(_decode_chunk(chunk, alphabet))
        if not found:
            break

        alphabet = id_alphabet.shuffle(alphabet)
        remaining = rest

    return numbers


def _encode_attempt(codec: Codec, numbers: list, attempt_index: int) -> str:
    alphabet = codec.alphabet
    alphabet_size = len(alphabet)

    offset = (_semi_random_offset(numbers, alphabet) + attempt_index) % alphabet_size

    # second part of the alphabet goes in front of the first
    alphabet = id_alphabet.split_and_exchange(alphabet, offset)
    id_prefix = id_alphabet.symbol_at(alphabet, 0)
    alphabet = id_alphabet.reverse(alphabet)

    encoded = bytearray([id_prefix])
    for position, number in enumerate(numbers):
        encoded += _encode_number(number, alphabet)
        if position < len(numbers) - 1:
            encoded.append(id_alphabet.symbol_at(alphabet, 0))
            alphabet = id_alphabet.shuffle(alphabet)

    return _pad_to_min_length(encoded, alphabet, codec.min_length).decode("ascii")


def _semi_random_offset(numbers: list, alphabet: bytes) -> int:
    alphabet_size = len(alphabet)
    offset = len(numbers)
    for position, number in enumerate(numbers):
        offset += id_alphabet.symbol_at(alphabet, number % alphabet_size) + position
    return offset


def _encode_number(number: int, alphabet: bytes) -> bytes:
    """Base (size - 1) digits of `number`; index 0 is kept for the separator."""
    base = len(alphabet) - 1
    digits = bytearray()
    while True:
        number, remainder = divmod(number, base)
        digits.append(id_alphabet.symbol_at(alphabet, remainder + 1))
        if number == 0:
            break
    digits.reverse()
    return bytes(digits)


def _decode_chunk(chunk: str, alphabet: bytes) -> int:
    base = len(alphabet) - 1
    number = 0
    for char in chunk:
        number = number * base + id_alphabet.index_of(alphabet, ord(char)) - 1
    return number


def _pad_to_min_length(encoded: bytearray, alphabet: bytes, min_length: int) -> bytes:
    if len(encoded) >= min_length:
        return bytes(encoded)

    padded = bytearray(encoded)
    padded.append(id_alphabet.symbol_at(alphabet, 0))

    while len(padded) < min_length:
        alphabet = id_alphabet.shuffle(alphabet)
        missing = min_length - len(padded)
        padded += id_alphabet.first_symbols(alphabet, min(missing, len(alphabet)))

    return bytes(padded)


def _validate_min_length(min_length):
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length not in MIN_LENGTH_RANGE:
        raise ConfigError(
            "min_length_not_an_integer_in_range",
            {"value": min_length, "range": MIN_LENGTH_RANGE},
        )


def _validate_numbers(numbers) -> list:
    if isinstance(numbers, (str, bytes, bytearray)):
        raise EncodeError("numbers_not_enumerable", numbers)
    try:
        numbers = list(numbers)
    except TypeError:
        raise EncodeError("numbers_not_enumerable", numbers)

    for number in numbers:
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise EncodeError("number_must_be_a_non_negative_integer", number)
    return numbers

# === End of src/id_codec.py ===
