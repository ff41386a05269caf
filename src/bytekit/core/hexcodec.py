"""
Hexadecimal text to byte decoding.
"""

from typing import Optional

from ..constants import HEX_DIGITS, HEX_IGNORED_CHARS
from .errors import InvalidArgumentError, MalformedNumberError, MissingInputError


def _pair_to_byte(pair: str) -> int:
    if not all(c in HEX_DIGITS for c in pair):
        raise MalformedNumberError(f"Invalid hexadecimal value: {pair!r}")

    return int(pair, 16)


def hex_to_byte(text: Optional[str]) -> int:
    """
    Convert a hex string of one or two digits to a byte value.

    A single digit is read as if left-padded with '0', so "A" and "0A"
    both give 10.

    Args:
        text (str): One or two hexadecimal digits, in either case

    Returns:
        int: The byte value, 0 to 255

    Raises:
        MissingInputError: If text is None
        InvalidArgumentError: If text is empty or longer than two characters
        MalformedNumberError: If text holds a non-hexadecimal character
    """

    if text is None:
        raise MissingInputError("Hex string must not be None")

    length = len(text)
    if length == 0 or length > 2:
        raise InvalidArgumentError("The size of the hex string must be 1 or 2")

    return _pair_to_byte(text.rjust(2, '0'))


def hex_to_array(text: Optional[str]) -> bytes:
    """
    Convert a string of hex digits to bytes.

    Spaces, tabs, carriage returns and newlines are removed first. An odd
    number of remaining digits is left-padded with a single '0'. Leading
    zero bytes are kept, so the result is always half the padded length.

    Args:
        text (str): Hex digits, e.g. "FE 05\\t4A"

    Returns:
        bytes: The decoded bytes, most significant nibble first

    Raises:
        MissingInputError: If text is None
        MalformedNumberError: If any digit pair is not valid hexadecimal
    """

    if text is None:
        raise MissingInputError("Hex string must not be None")

    clean_str = ''.join(c for c in text if c not in HEX_IGNORED_CHARS)
    if len(clean_str) % 2 == 1:
        clean_str = '0' + clean_str

    return bytes(
        _pair_to_byte(clean_str[i:i + 2])
        for i in range(0, len(clean_str), 2)
    )
