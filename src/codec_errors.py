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
# Filename: src/codec_errors.py

"""
Exception types raised by the ID codec.

Every error carries a stable, machine-readable `reason` string and the
offending `value`, so callers can branch on the kind of failure instead of
parsing messages. All of them derive from ValueError, which keeps existing
`except ValueError` handlers working.
"""

REASON_MESSAGES = {
    # Configuration
    "alphabet_is_not_an_utf8_string": "Alphabet is not an utf8 string",
    "alphabet_contains_multibyte_graphemes": "Alphabet contains multibyte graphemes",
    "alphabet_is_too_small": "Alphabet is too small",
    "alphabet_contains_repeated_graphemes": "Alphabet contains repeated graphemes",
    "min_length_not_an_integer_in_range": "Min length is not an integer in range",
    "blocklist_is_not_enumerable": "Blocklist is not enumerable",
    "some_words_in_blocklist_are_not_utf8_strings": "Some words in blocklist are not utf8 strings",
    # Encoding
    "numbers_not_enumerable": "Numbers not enumerable",
    "number_must_be_a_non_negative_integer": "Number is not a non negative integer",
    "all_id_generation_attempts_were_censored": "All id generation attempts were censored",
}


class CodecError(ValueError):
    """Base class for all codec failures."""

    def __init__(self, reason: str, value=None):
        self.reason = reason
        self.value = value
        message = REASON_MESSAGES.get(reason, reason.replace("_", " ").capitalize())
        super().__init__(f"{message}: {value!r}")


class ConfigError(CodecError):
    """Raised by `id_codec.new` when the codec options are unusable."""


class EncodeError(CodecError):
    """Raised by `id_codec.encode` for bad input or an exhausted blocklist retry loop."""

# === End of src/codec_errors.py ===
