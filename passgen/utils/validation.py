"""
Input validation utilities for passgen.
"""

import logging

from ..config import MIN_LENGTH, MAX_LENGTH
from ..exceptions import InvalidLengthError


logger = logging.getLogger(__name__)


def validate_length(length: object) -> int:
    """
    Check that a requested length is an integer.

    Args:
        length: The requested length

    Returns:
        The length as an int

    Raises:
        InvalidLengthError: If length is not an integer
    """
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(get_length_error_message(length))

    return length


def clamp_length(length: int) -> int:
    """
    Clamp a requested length into the slider range.

    Args:
        length: The requested length

    Returns:
        Length within [MIN_LENGTH, MAX_LENGTH]
    """
    length = validate_length(length)
    clamped = max(MIN_LENGTH, min(length, MAX_LENGTH))

    if clamped != length:
        logger.debug(f"Length {length} clamped to {clamped}")

    return clamped


def get_length_error_message(length: object) -> str:
    """Describe why a length value was rejected."""
    if isinstance(length, bool):
        return "Length must be an integer, not a boolean"

    return f"Length must be an integer, got {type(length).__name__}"
