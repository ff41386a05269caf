"""
Command-line entry point for bytekit.
"""

import sys
import argparse
from typing import List, Optional, Union

from .core import (
    ByteKitError,
    concat,
    concat_with_separator,
    hex_to_array,
    index_of_first,
    index_of_last,
    split
)
from .utils import dump_lines, format_bytes, highlight


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="bytekit",
        description="bytekit - Byte array decoding, search, join and split"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable hexdump highlighting"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode hex text and show a hexdump")
    decode_parser.add_argument("data", type=str, help="Hex digits, whitespace allowed")

    find_parser = subparsers.add_parser("find", help="Find a byte or byte sequence")
    find_parser.add_argument("data", type=str, help="Hex digits to search in")
    find_parser.add_argument("needle", type=str, help="Hex digits to search for")
    find_parser.add_argument("--last", action="store_true", help="Search backward")
    find_parser.add_argument(
        "--from",
        dest="from_offset",
        type=int,
        default=None,
        help="Offset where the search starts"
    )

    split_parser = subparsers.add_parser("split", help="Split on a separator")
    split_parser.add_argument("separator", type=str, help="Separator as hex digits")
    split_parser.add_argument("data", type=str, help="Hex digits to split")

    join_parser = subparsers.add_parser("join", help="Join with a separator")
    join_parser.add_argument("separator", type=str, help="Separator as hex digits, '' for none")
    join_parser.add_argument("pieces", nargs="+", type=str, help="Hex digits of each piece")

    return parser.parse_args(argv)


def _byte_or_sequence(text: str) -> Union[int, bytes]:
    value = hex_to_array(text)
    if len(value) == 1:
        return value[0]

    return value


def _print_dump(data: bytes, color: bool) -> None:
    text = '\n'.join(dump_lines(data))
    if not text:
        return

    if color:
        print(highlight(text), end='')
    else:
        print(text)


def run(args: argparse.Namespace) -> int:
    """Run the selected subcommand and return the exit status."""

    color = not args.no_color and sys.stdout.isatty()

    if args.command == "decode":
        _print_dump(hex_to_array(args.data), color)
        return 0

    if args.command == "find":
        data = hex_to_array(args.data)
        needle = _byte_or_sequence(args.needle)

        if args.last:
            result = index_of_last(data, needle, args.from_offset)
        else:
            result = index_of_first(data, needle, args.from_offset or 0)

        if not result:
            print("not found")
            return 1

        print(result.index)
        return 0

    if args.command == "split":
        for piece in split(_byte_or_sequence(args.separator), hex_to_array(args.data)):
            print(format_bytes(piece))
        return 0

    pieces = [hex_to_array(piece) for piece in args.pieces]
    if args.separator:
        joined = concat_with_separator(_byte_or_sequence(args.separator), *pieces)
    else:
        joined = concat(*pieces)

    _print_dump(joined, color)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    try:
        return run(args)
    except (ByteKitError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
