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
# Filename: src/encode_id_column.py

"""
Obfuscate (or restore) a column of numeric IDs in a delimited table file.

Typical use is preparing an export for a system that should only ever see
public identifiers: every internal integer ID in `--id-column` is encoded
with the configured codec and written to `--output-column`.

Its primary functions are:
1.  Reads the table with pandas (tab-delimited by default, see the
    [BatchEncode] section of config.ini).
2.  Encodes each ID into a public ID, or with `--decode` turns public IDs
    back into integers. Rows that cannot be converted are reported and left
    empty rather than aborting the whole run.
3.  Writes the table, including the new column, to the output file.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import pandas as pd
from colorama import Fore, init
from tqdm import tqdm

# Ensure the src directory is in the Python path
sys.path.append(str(Path(__file__).resolve().parent))
import id_codec  # noqa: E402
from codec_errors import CodecError  # noqa: E402
from codec_registry import get_configured_codec  # noqa: E402
from config_loader import APP_CONFIG, get_config_value  # noqa: E402

# Initialize colorama
init(autoreset=True)


class TqdmLoggingHandler(logging.Handler):
    """A logging handler that writes through tqdm so progress bars stay intact."""
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg)
            self.flush()
        except Exception:
            self.handleError(record)

class CustomFormatter(logging.Formatter):
    """Custom formatter to add colors to log levels."""
    log_format = "%(levelname)s: %(message)s"
    FORMATS = {
        logging.DEBUG: log_format,
        logging.INFO: log_format,
        logging.WARNING: Fore.YELLOW + log_format,
        logging.ERROR: Fore.RED + log_format
    }
    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.log_format)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)

def setup_logging(verbose: bool):
    handler = TqdmLoggingHandler()
    handler.setFormatter(CustomFormatter())
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, handlers=[handler], force=True)

def encode_column(df: pd.DataFrame, codec, id_column: str, output_column: str, show_progress: bool = True):
    """
    Encodes every integer ID of `id_column` into `output_column`.

    Returns:
        tuple: (DataFrame with the output column, number of rows that failed)
    """
    public_ids = []
    num_failed = 0
    values = tqdm(df[id_column], desc="Encoding IDs", ncols=80, disable=not show_progress)
    for row_number, raw_value in enumerate(values, start=1):
        number = _parse_non_negative_int(raw_value)
        if number is None:
            logging.warning(f"Row {row_number}: '{raw_value}' is not a non-negative integer. Left empty.")
            public_ids.append("")
            num_failed += 1
            continue
        try:
            public_ids.append(id_codec.encode(codec, [number]))
        except CodecError as e:
            logging.warning(f"Row {row_number}: '{raw_value}' could not be encoded ({e}). Left empty.")
            public_ids.append("")
            num_failed += 1

    df[output_column] = public_ids
    return df, num_failed

def decode_column(df: pd.DataFrame, codec, id_column: str, output_column: str, show_progress: bool = True):
    """
    Decodes every public ID of `id_column` into `output_column`.

    IDs carrying several numbers are written space-separated.

    Returns:
        tuple: (DataFrame with the output column, number of rows that failed)
    """
    decoded = []
    num_failed = 0
    values = tqdm(df[id_column], desc="Decoding IDs", ncols=80, disable=not show_progress)
    for row_number, raw_value in enumerate(values, start=1):
        numbers = id_codec.decode(codec, str(raw_value).strip())
        if not numbers:
            logging.warning(f"Row {row_number}: '{raw_value}' is not a valid ID. Left empty.")
            decoded.append("")
            num_failed += 1
            continue
        decoded.append(" ".join(str(n) for n in numbers))

    df[output_column] = decoded
    return df, num_failed

def _parse_non_negative_int(raw_value):
    text = str(raw_value).strip()
    if not text.isdigit() or not text.isascii():
        return None
    return int(text)

def main(argv=None):
    """Main function to read, convert, and write the table file."""
    parser = argparse.ArgumentParser(
        description="Encode a column of numeric IDs into obfuscated public IDs (or decode them back).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("input", help="Path to the delimited input file.")
    parser.add_argument("-o", "--output", help="Output path. Defaults to '<input>_encoded<suffix>'.")
    parser.add_argument("--id-column", default=get_config_value(APP_CONFIG, 'BatchEncode', 'id_column', fallback='id'),
                        help="Column holding the values to convert.")
    parser.add_argument("--output-column", default=get_config_value(APP_CONFIG, 'BatchEncode', 'output_column', fallback='public_id'),
                        help="Column to write the converted values to.")
    parser.add_argument("--delimiter", default=get_config_value(APP_CONFIG, 'BatchEncode', 'delimiter', fallback='\t'),
                        help="Field delimiter of the input and output files.")
    parser.add_argument("--decode", action="store_true", help="Decode public IDs instead of encoding numbers.")
    parser.add_argument("--force", action="store_true", help="Overwrite the output file if it exists.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    input_path = Path(args.input)
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_name(f"{input_path.stem}_encoded{input_path.suffix}")

    if not input_path.exists():
        logging.error(f"Input file not found: {input_path}")
        return 1

    if output_path.exists() and not args.force:
        print(f"{Fore.YELLOW}WARNING: '{output_path}' already exists. Use --force to overwrite it.")
        return 1

    try:
        codec = get_configured_codec()
    except (CodecError, OSError) as e:
        logging.error(f"Could not build the codec from config.ini: {e}")
        return 1

    try:
        df = pd.read_csv(input_path, sep=args.delimiter, dtype=str, keep_default_na=False)
    except Exception as e:
        logging.error(f"Could not read '{input_path}': {e}")
        return 1

    if args.id_column not in df.columns:
        logging.error(f"The '{args.id_column}' column was not found in '{input_path}'.")
        return 1

    convert = decode_column if args.decode else encode_column
    df, num_failed = convert(df, codec, args.id_column, args.output_column,
                             show_progress=not args.no_progress)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, sep=args.delimiter, index=False)

    rel_output_path = os.path.relpath(output_path).replace(os.sep, '/')
    print(f"\n{Fore.CYAN}Wrote {len(df)} rows to: {rel_output_path}")
    if num_failed:
        print(f"{Fore.YELLOW}{num_failed} row(s) could not be converted and were left empty.")
    else:
        print(f"{Fore.GREEN}SUCCESS: All {len(df)} rows converted.\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())

# === End of src/encode_id_column.py ===
