"""
Exceptions raised by the byte array toolkit.

Out-of-bounds offsets are not represented here: they surface as the
built-in IndexError.
"""


class ByteKitError(Exception):
    """Base class for all toolkit errors."""


class MissingInputError(ByteKitError, TypeError):
    """A required value was None."""


class InvalidArgumentError(ByteKitError, ValueError):
    """A value violates a structural precondition."""


class MalformedNumberError(ByteKitError, ValueError):
    """Text expected to hold hexadecimal digits does not."""
