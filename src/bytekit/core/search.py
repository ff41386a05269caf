"""
Forward and backward search for a byte or a byte sequence.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .compare import BytesLike, region_equals
from .errors import InvalidArgumentError

Needle = Union[int, BytesLike]


@dataclass(frozen=True)
class IndexResult:
    """Outcome of a search: either found at `index`, or not found."""
    index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.index is not None

    def __bool__(self) -> bool:
        return self.found

    def get(self) -> int:
        """Return the index, raising LookupError if nothing was found."""

        if self.index is None:
            raise LookupError("No match was found")

        return self.index

    def or_else(self, default: int) -> int:
        if self.index is None:
            return default

        return self.index


NOT_FOUND = IndexResult()


def check_byte(value: int) -> None:
    """Reject byte values outside 0..255."""

    if not 0 <= value <= 255:
        raise InvalidArgumentError(f"Byte value must be between 0 and 255, got {value}")


def _check_sequence_needle(needle: BytesLike) -> None:
    if len(needle) == 0:
        raise InvalidArgumentError("Cannot search for an empty sequence")


def index_of_first(haystack: BytesLike, needle: Needle, from_offset: int = 0) -> IndexResult:
    """
    Find the first occurrence of a byte or a byte sequence.

    Args:
        haystack (BytesLike): Data to search in
        needle (int | BytesLike): Byte value or sequence to search for
        from_offset (int): First position to check

    Returns:
        IndexResult: Position of the first match at or after from_offset
    """

    if from_offset < 0:
        raise IndexError("Search offset must not be negative")

    if isinstance(needle, int):
        check_byte(needle)
        for index in range(from_offset, len(haystack)):
            if haystack[index] == needle:
                return IndexResult(index)

        return NOT_FOUND

    _check_sequence_needle(needle)

    for index in range(from_offset, len(haystack) - len(needle) + 1):
        if region_equals(haystack, index, needle, 0):
            return IndexResult(index)

    return NOT_FOUND


def index_of_last(haystack: BytesLike, needle: Needle,
                  from_offset: Optional[int] = None) -> IndexResult:
    """
    Find the last occurrence of a byte or a byte sequence.

    The scan runs backward from from_offset (inclusive) down to 0. A
    negative from_offset finds nothing; one at or past the end
    raises IndexError.

    Args:
        haystack (BytesLike): Data to search in
        needle (int | BytesLike): Byte value or sequence to search for
        from_offset (int): First position to check, defaults to the last index

    Returns:
        IndexResult: Position of the highest match at or before from_offset
    """

    if from_offset is None:
        from_offset = len(haystack) - 1

    if from_offset >= len(haystack):
        raise IndexError(f"Search offset {from_offset} out of range")

    if isinstance(needle, int):
        check_byte(needle)
        for index in range(from_offset, -1, -1):
            if haystack[index] == needle:
                return IndexResult(index)

        return NOT_FOUND

    _check_sequence_needle(needle)

    # A match cannot start past the point where the needle still fits.
    start = min(from_offset, len(haystack) - len(needle))
    for index in range(start, -1, -1):
        if region_equals(haystack, index, needle, 0):
            return IndexResult(index)

    return NOT_FOUND
