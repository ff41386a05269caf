"""
Hexdump rendering for showing byte sequences on a terminal.
"""

from typing import List

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

from ..constants import (
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_OFFSET_WIDTH,
    PRINTABLE_MAX,
    PRINTABLE_MIN
)
from ..core.compare import BytesLike


def format_offset(offset: int, width: int = DEFAULT_OFFSET_WIDTH) -> str:
    """Render the offset column of a hexdump row, zero-padded to `width` digits."""

    return f"{offset:0{width}X}"


def format_bytes(data: BytesLike) -> str:
    """Format bytes as space-separated upper-case hex pairs."""

    return ' '.join(f"{byte:02X}" for byte in data)


def to_ascii(data: BytesLike) -> str:
    return ''.join(chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else '.' for b in data)


def dump_lines(data: BytesLike, bytes_per_line: int = DEFAULT_BYTES_PER_LINE) -> List[str]:
    """
    Render data as hexdump rows.

    Each row reads "OFFSET  HH HH ...  |ascii|", with an extra space after
    the first half of the hex columns. Short last rows are padded so the
    ASCII column stays aligned.

    Args:
        data (BytesLike): Bytes to render
        bytes_per_line (int): Bytes shown on each row

    Returns:
        List[str]: One string per row, empty for empty data
    """

    if bytes_per_line < 1:
        raise ValueError("bytes_per_line must be positive")

    half = bytes_per_line // 2
    hex_width = bytes_per_line * 3 - 1 + (1 if half else 0)

    lines = []
    for start in range(0, len(data), bytes_per_line):
        chunk = data[start:start + bytes_per_line]

        hex_str = format_bytes(chunk[:half])
        if len(chunk) > half:
            hex_str = f"{hex_str}  {format_bytes(chunk[half:])}" if half else format_bytes(chunk)

        lines.append(
            f"{format_offset(start)}  {hex_str.ljust(hex_width)}  |{to_ascii(chunk)}|"
        )

    return lines


def highlight(text: str) -> str:
    """Colorize hexdump text for a terminal using Pygments."""

    if not text:
        return text

    return pygments_highlight(text, HexdumpLexer(), TerminalFormatter())
