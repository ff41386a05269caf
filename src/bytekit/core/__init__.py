"""
Core package for byte array manipulation.

This package implements the pure functions of the toolkit: hex decoding,
whole and region equality, byte and sequence search, concatenation and
splitting. None of them keep state or mutate their inputs.
"""

from .compare import arrays_equal, region_equals
from .errors import (
    ByteKitError,
    InvalidArgumentError,
    MalformedNumberError,
    MissingInputError
)
from .hexcodec import hex_to_array, hex_to_byte
from .joining import concat, concat_with_separator
from .search import NOT_FOUND, IndexResult, index_of_first, index_of_last
from .splitting import split

__all__ = [
    'arrays_equal',
    'region_equals',
    'ByteKitError',
    'InvalidArgumentError',
    'MalformedNumberError',
    'MissingInputError',
    'hex_to_array',
    'hex_to_byte',
    'concat',
    'concat_with_separator',
    'NOT_FOUND',
    'IndexResult',
    'index_of_first',
    'index_of_last',
    'split'
]
