"""
bytekit - byte array manipulation primitives.

Hex decoding, equality and search over byte sequences, concatenation with
an optional separator, and separator-based splitting.
"""

from .core import (
    NOT_FOUND,
    ByteKitError,
    IndexResult,
    InvalidArgumentError,
    MalformedNumberError,
    MissingInputError,
    arrays_equal,
    concat,
    concat_with_separator,
    hex_to_array,
    hex_to_byte,
    index_of_first,
    index_of_last,
    region_equals,
    split
)

__version__ = "0.1.0"

__all__ = [
    'NOT_FOUND',
    'ByteKitError',
    'IndexResult',
    'InvalidArgumentError',
    'MalformedNumberError',
    'MissingInputError',
    'arrays_equal',
    'concat',
    'concat_with_separator',
    'hex_to_array',
    'hex_to_byte',
    'index_of_first',
    'index_of_last',
    'region_equals',
    'split'
]
