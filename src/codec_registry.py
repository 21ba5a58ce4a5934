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
# Filename: src/codec_registry.py

"""
Process-wide cache of constructed codecs.

Building a codec validates and shuffles the alphabet and classifies the
whole blocklist, which is too expensive to repeat per request. This module
builds each distinct configuration once and hands out the same immutable
Codec afterwards. Construction errors are raised to the caller and never
cached.

Usage:
    from codec_registry import get_codec, get_configured_codec

    codec = get_codec(min_length=8)        # explicit options
    codec = get_configured_codec()         # options from config.ini [Codec]
"""

import logging
from threading import Lock

import id_blocklist
import id_codec
from config_loader import APP_CONFIG, get_config_value, get_path

logger = logging.getLogger(__name__)

CODEC_CACHE = {}
CODEC_CACHE_LOCK = Lock()

# [Codec] blocklist_file value selecting the word list bundled with the package
DEFAULT_BLOCKLIST_FILE = "default"


def get_codec(alphabet=None, min_length=None, blocklist=None) -> id_codec.Codec:
    """
    Returns the cached codec for these options, building it on first use.

    Options mean the same as for `id_codec.new`; None selects the default.
    """
    words = _blocklist_key(blocklist)
    key = (alphabet, min_length, words)
    try:
        hash(key)
    except TypeError:
        # Unhashable options are never valid; let the codec say why
        return id_codec.new(alphabet, min_length, words)

    with CODEC_CACHE_LOCK:
        codec = CODEC_CACHE.get(key)
        if codec is None:
            codec = id_codec.new(alphabet, min_length, words)
            CODEC_CACHE[key] = codec
            logger.debug(f"Cached new codec ({len(CODEC_CACHE)} in cache)")
        return codec


def get_configured_codec(config=None) -> id_codec.Codec:
    """Returns the codec described by the [Codec] section of config.ini."""
    options = codec_options_from_config(APP_CONFIG if config is None else config)
    return get_codec(**options)


def codec_options_from_config(config) -> dict:
    """
    Reads [Codec] into keyword arguments for `get_codec`.

    A missing key falls back to the codec default. `blocklist_file` may name
    a word file, `default` for the bundled list, or `None` to disable the
    blocklist.
    """
    alphabet = get_config_value(config, 'Codec', 'alphabet', fallback=None)
    min_length = get_config_value(config, 'Codec', 'min_length', fallback=None, value_type=int)

    if config.has_section('Codec') and config.has_option('Codec', 'blocklist_file'):
        blocklist_file = get_config_value(config, 'Codec', 'blocklist_file')
    else:
        blocklist_file = DEFAULT_BLOCKLIST_FILE

    if blocklist_file is None:
        blocklist = []
    elif blocklist_file.strip().lower() == DEFAULT_BLOCKLIST_FILE:
        blocklist = None
    else:
        blocklist = id_blocklist.load_words(get_path(blocklist_file))

    return {"alphabet": alphabet, "min_length": min_length, "blocklist": blocklist}


def clear():
    """Drops every cached codec."""
    with CODEC_CACHE_LOCK:
        CODEC_CACHE.clear()


def _blocklist_key(blocklist):
    if blocklist is None or isinstance(blocklist, (str, bytes, bytearray)):
        return blocklist
    try:
        return tuple(blocklist)
    except TypeError:
        return blocklist

# === End of src/codec_registry.py ===
