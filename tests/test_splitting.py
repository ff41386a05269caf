"""Tests for separator-based splitting."""

import pytest

from bytekit import (
    InvalidArgumentError,
    concat_with_separator,
    hex_to_array,
    split,
)

FIRST = hex_to_array("FF 37")
SECOND = hex_to_array("01 87 53")
THIRD = hex_to_array("01 87 45 A9")


class TestSplitSingleByte:
    """Test splitting on a single byte."""

    def test_round_trip(self) -> None:
        joined = concat_with_separator(0, FIRST, SECOND, THIRD)
        assert split(0, joined) == [FIRST, SECOND, THIRD]

    def test_leading_separators(self) -> None:
        result = split(0x33, hex_to_array("33    33    55 11"))
        assert len(result) == 3
        assert result == [b"", b"", b"\x55\x11"]

    def test_trailing_separators(self) -> None:
        result = split(0x33, hex_to_array("55 11    33    33"))
        assert len(result) == 3
        assert result == [b"\x55\x11", b"", b""]

    def test_no_separator(self) -> None:
        assert split(0x33, b"\x01\x02") == [b"\x01\x02"]

    def test_empty_array(self) -> None:
        assert split(0x33, b"") == [b""]

    def test_only_separator(self) -> None:
        assert split(0x33, b"\x33") == [b"", b""]

    def test_piece_count(self) -> None:
        data = hex_to_array("01 33 02 33 33 03 33")
        assert len(split(0x33, data)) == data.count(0x33) + 1

    @pytest.mark.parametrize("separator", [256, -1])
    def test_separator_out_of_byte_range(self, separator: int) -> None:
        with pytest.raises(InvalidArgumentError):
            split(separator, b"\x01\x02")

        with pytest.raises(InvalidArgumentError):
            split(separator, b"")


class TestSplitSequence:
    """Test splitting on a byte sequence."""

    @pytest.fixture
    def separator(self) -> bytes:
        return hex_to_array("FE EF")

    def test_round_trip(self, separator: bytes) -> None:
        joined = concat_with_separator(separator, FIRST, SECOND, THIRD)
        assert split(separator, joined) == [FIRST, SECOND, THIRD]

    def test_leading_separators(self, separator: bytes) -> None:
        result = split(separator, hex_to_array("FE EF    FE EF    55 11"))
        assert result == [b"", b"", b"\x55\x11"]

    def test_trailing_separators(self, separator: bytes) -> None:
        result = split(separator, hex_to_array("55 11    FE EF    FE EF"))
        assert result == [b"\x55\x11", b"", b""]

    def test_partial_separator_at_end(self, separator: bytes) -> None:
        result = split(separator, hex_to_array("55 11    FE EF    FE"))
        assert len(result) == 2
        assert result == [b"\x55\x11", b"\xfe"]

    def test_empty_array(self, separator: bytes) -> None:
        assert split(separator, b"") == [b""]

    def test_empty_separator(self) -> None:
        with pytest.raises(InvalidArgumentError):
            split(b"", b"\x01")

    def test_bytearray_input(self, separator: bytes) -> None:
        result = split(bytearray(separator), bytearray(b"\x01\xfe\xef\x02"))
        assert result == [b"\x01", b"\x02"]
        assert all(isinstance(piece, bytes) for piece in result)


@pytest.mark.parametrize(
    "separator, pieces",
    [
        (0x00, [b"\x01"]),
        (0x00, [b"\x01", b"\x02\x03"]),
        (0x7F, [b"abc", b"d", b"ef", b"\xff\xfe"]),
        (b"\x00\x00", [b"\x00\x01", b"\x02"]),
        (b"--", [b"a-b", b"c", b"-d"]),
        (b"\xfe\xef", [b"\xef", b"\x01\xfe"]),
    ],
)
def test_split_reverses_join(separator, pieces) -> None:
    """Test that splitting a joined list gives the pieces back."""
    assert split(separator, concat_with_separator(separator, *pieces)) == pieces
