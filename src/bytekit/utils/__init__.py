"""
Utility package for presenting byte sequences.
"""

from .hexdump import (
    dump_lines,
    format_bytes,
    format_offset,
    highlight,
    to_ascii
)

__all__ = [
    'dump_lines',
    'format_bytes',
    'format_offset',
    'highlight',
    'to_ascii'
]
