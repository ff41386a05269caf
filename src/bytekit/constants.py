"""
Fixed values shared by the codec, the hexdump renderer and the CLI.
"""

from typing import Final, FrozenSet

HEX_DIGITS: Final[FrozenSet[str]] = frozenset('0123456789ABCDEFabcdef')

# Only these are removed by hex_to_array; other whitespace is a malformed digit.
HEX_IGNORED_CHARS: Final[str] = ' \t\r\n'

DEFAULT_BYTES_PER_LINE: Final[int] = 16
DEFAULT_OFFSET_WIDTH: Final[int] = 8

PRINTABLE_MIN: Final[int] = 32
PRINTABLE_MAX: Final[int] = 126
