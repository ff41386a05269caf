"""
Concatenation of byte sequences, with or without a separator.
"""

from typing import Union

from .compare import BytesLike
from .search import check_byte

Separator = Union[int, BytesLike]


def concat(*arrays: BytesLike) -> BytesLike:
    """
    Concatenate byte sequences in order.

    No arrays gives b''. A single array is returned as is, without a
    copy, so it keeps its own type; two or more always give bytes.
    """

    if not arrays:
        return b''

    if len(arrays) == 1:
        return arrays[0]

    result = bytearray()
    for array in arrays:
        result.extend(array)

    return bytes(result)


def concat_with_separator(separator: Separator, *arrays: BytesLike) -> BytesLike:
    """
    Concatenate byte sequences, inserting a separator between each pair.

    The separator is never added at the start or the end, and the arrays
    are not checked for existing occurrences of it. With fewer than two
    arrays this behaves like concat().

    Args:
        separator (int | BytesLike): A byte value or a byte sequence
        *arrays (BytesLike): Sequences to join

    Returns:
        BytesLike: The joined data, bytes unless a single array was
            passed through unchanged
    """

    if isinstance(separator, int):
        check_byte(separator)

    if not arrays:
        return b''

    if len(arrays) == 1:
        return arrays[0]

    if isinstance(separator, int):
        separator = bytes([separator])

    result = bytearray(arrays[0])
    for array in arrays[1:]:
        result.extend(separator)
        result.extend(array)

    return bytes(result)
