"""
Equality checks over whole byte sequences and over regions of them.
"""

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def arrays_equal(first: BytesLike, second: BytesLike) -> bool:
    """Check that two byte sequences have the same length and content."""

    if len(first) != len(second):
        return False

    if not first:
        return True

    return region_equals(first, 0, second, 0)


def region_equals(haystack: BytesLike, haystack_offset: int,
                  needle: BytesLike, needle_offset: int = 0) -> bool:
    """
    Check if the haystack holds the tail of the needle at an offset.

    needle[needle_offset:] is compared position by position against the
    haystack starting at haystack_offset, stopping at the first mismatch.

    Args:
        haystack (BytesLike): Sequence to look into
        haystack_offset (int): Position in the haystack of the first compared byte
        needle (BytesLike): Sequence to compare against
        needle_offset (int): First needle position to compare

    Returns:
        bool: True if every compared position matched

    Raises:
        IndexError: If an offset is negative, if needle_offset is not a
            position of the needle, or if the haystack runs out before a
            mismatch is found
    """

    if haystack_offset < 0 or needle_offset < 0:
        raise IndexError("Offsets must not be negative")

    if needle_offset >= len(needle):
        raise IndexError(f"Needle offset {needle_offset} out of range")

    shift = haystack_offset - needle_offset
    for index in range(needle_offset, len(needle)):
        if haystack[shift + index] != needle[index]:
            return False

    return True
