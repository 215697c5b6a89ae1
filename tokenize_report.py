#!/usr/bin/env python3
"""
Tokenization report script.
Reads filenames from a text file and writes their tokens to Excel, or
prints one JSON result per filename.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from filename_tokens import Tokenizer, TokenizerOptions, TokenizationResult
from filename_tokens.excel_writer import tokens_sheet, write_excel_workbook


logger = logging.getLogger("tokenize_report")

INPUT_ENCODINGS = ['utf-8-sig', 'cp1252']


def read_filenames(input_file: Path) -> Iterator[str]:
    """
    Read non-empty lines from a file, trying common encodings in turn.

    Args:
        input_file: Text file with one filename per line

    Yields:
        Filenames with surrounding line breaks removed
    """
    for encoding in INPUT_ENCODINGS:
        try:
            text = input_file.read_text(encoding=encoding)
            break
        except UnicodeDecodeError:
            continue
    else:
        text = input_file.read_text(encoding='latin-1')

    for line in text.splitlines():
        if line.strip():
            yield line


def default_output_path(input_file: Path) -> Path:
    return input_file.with_name(f"{input_file.stem}-tokens.xlsx")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Tokenize filenames and report the tokens')
    parser.add_argument('input_file', type=Path, help='Input file containing filenames (one per line)')
    parser.add_argument('output_file', nargs='?', type=Path,
                        help='Output Excel file (defaults to <input>-tokens.xlsx)')
    parser.add_argument('-d', '--delimiters',
                        help='Delimiter characters to split on (overrides the dictionary)')
    parser.add_argument('--json', action='store_true',
                        help='Print one JSON result per line instead of writing Excel')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Tokenize every filename in the input file and write the report."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.delimiters is not None:
        options = TokenizerOptions(allowed_delimiters=args.delimiters)
    else:
        options = TokenizerOptions.from_dictionary()
    tokenizer = Tokenizer(options)

    logger.info("Reading from: %s", args.input_file)
    results: List[TokenizationResult] = []
    for filename in read_filenames(args.input_file):
        result = tokenizer.tokenize(filename)
        if args.json:
            print(result.to_json())
        results.append(result)

    logger.info("Processed %s filenames", len(results))
    if args.json:
        return 0

    output_file = args.output_file or default_output_path(args.input_file)
    write_excel_workbook(output_file, [tokens_sheet(results)])
    logger.info("Results written to %s", output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
