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
# Filename: src/id_tool.py

"""
Command-line front end for the ID codec.

Encodes numbers into a public ID, or decodes an ID back into numbers, using
the codec configured in config.ini's [Codec] section. Any codec option can
be overridden on the command line.

Examples:
    python src/id_tool.py encode 1 2 3          # -> 86Rf07
    python src/id_tool.py decode 86Rf07         # -> 1 2 3
    python src/id_tool.py --min-length 10 encode 42

Exit codes: 0 on success, 1 on a codec or file error, 2 on bad usage.
"""

import argparse
import logging
import sys
from pathlib import Path

from colorama import Fore, init

# Ensure the src directory is in the Python path
sys.path.append(str(Path(__file__).resolve().parent))
import id_blocklist  # noqa: E402
import id_codec  # noqa: E402
from codec_errors import CodecError  # noqa: E402
from codec_registry import codec_options_from_config, get_codec  # noqa: E402
from config_loader import APP_CONFIG  # noqa: E402

# Initialize colorama
init(autoreset=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode numbers into short obfuscated IDs, or decode them back.",
        epilog="Example: python src/id_tool.py encode 1 2 3",
    )
    parser.add_argument("--alphabet", help="Override the alphabet from config.ini.")
    parser.add_argument("--min-length", type=int, help="Override the minimum ID length (0-255).")
    blocklist_group = parser.add_mutually_exclusive_group()
    blocklist_group.add_argument("--blocklist-file", help="One word per line; replaces the configured blocklist.")
    blocklist_group.add_argument("--no-blocklist", action="store_true", help="Disable the blocklist.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    encode_parser = subparsers.add_parser("encode", help="Encode one or more non-negative integers.")
    encode_parser.add_argument("numbers", nargs="+", type=int, help="The numbers to encode.")
    decode_parser = subparsers.add_parser("decode", help="Decode an ID into its numbers.")
    decode_parser.add_argument("id", help="The ID to decode.")
    return parser


def resolve_codec(args) -> id_codec.Codec:
    """Builds the codec from config.ini, with command-line overrides applied."""
    options = codec_options_from_config(APP_CONFIG)
    if args.alphabet is not None:
        options["alphabet"] = args.alphabet
    if args.min_length is not None:
        options["min_length"] = args.min_length
    if args.no_blocklist:
        options["blocklist"] = []
    elif args.blocklist_file:
        options["blocklist"] = id_blocklist.load_words(args.blocklist_file)
    return get_codec(**options)


def main(argv=None):
    """Parses arguments, runs the requested command, and returns an exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        codec = resolve_codec(args)
        if args.command == "encode":
            print(id_codec.encode(codec, args.numbers))
        else:
            numbers = id_codec.decode(codec, args.id)
            if not numbers:
                logging.info(f"'{args.id}' does not decode to any numbers.")
            print(" ".join(str(n) for n in numbers))
    except CodecError as e:
        print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"{Fore.RED}ERROR: Could not read blocklist file: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# === End of src/id_tool.py ===
