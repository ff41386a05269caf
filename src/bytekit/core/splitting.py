"""
Splitting of a byte sequence on a separator, like str.split() without
pattern matching.
"""

from typing import List

from .compare import BytesLike
from .errors import InvalidArgumentError
from .joining import Separator
from .search import check_byte, index_of_first


def split(separator: Separator, array: BytesLike) -> List[bytes]:
    """
    Split a byte sequence on every occurrence of a separator.

    Pieces between adjacent separators, or between a separator and either
    end, are kept even when empty. The result always holds one more piece
    than there are separator matches, so an empty array gives [b''].

    Args:
        separator (int | BytesLike): A byte value or a byte sequence
        array (BytesLike): Data to split

    Returns:
        List[bytes]: The pieces, in order
    """

    if isinstance(separator, int):
        check_byte(separator)
        step = 1
    else:
        step = len(separator)
        if step == 0:
            raise InvalidArgumentError("Separator must not be empty")

    data = bytes(array)
    pieces: List[bytes] = []
    cursor = 0

    while True:
        match = index_of_first(data, separator, cursor)
        if not match:
            pieces.append(data[cursor:])
            break

        pieces.append(data[cursor:match.index])
        cursor = match.index + step

        # Separator at the very end leaves an empty trailing piece.
        if cursor == len(data):
            pieces.append(b'')
            break

    return pieces
