"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class InvalidLengthError(PassgenException):
    """Password length is not an integer."""

    pass


class EmptyCharsetError(PassgenException):
    """No character class is enabled."""

    pass


class ClipboardWriteError(PassgenException):
    """Clipboard rejected the write."""

    pass
