"""
Password generation utilities.

Uses a non-cryptographic random source so that tests can seed it. Do not use
these passwords where a secrets-grade generator is required.
"""

import random
import string
from typing import Optional, Protocol

from ..exceptions import EmptyCharsetError


# Character sets, in the order they are concatenated
LETTERS = string.ascii_lowercase + string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+[]{}|;:,.<>?"


class RandomSource(Protocol):
    """Anything that draws uniform integers in [0, n)."""

    def randrange(self, stop: int) -> int:
        ...


def build_charset(digits_enabled: bool,
                  symbols_enabled: bool,
                  letters_enabled: bool = True) -> str:
    """
    Build the eligible character set.

    Args:
        digits_enabled: Include 0-9
        symbols_enabled: Include the symbol alphabet
        letters_enabled: Include a-z and A-Z

    Returns:
        Ordered charset string

    Raises:
        EmptyCharsetError: If no character class is enabled
    """
    charset = ""

    if letters_enabled:
        charset += LETTERS

    if digits_enabled:
        charset += DIGITS

    if symbols_enabled:
        charset += SYMBOLS

    if not charset:
        raise EmptyCharsetError("At least one character type must be enabled")

    return charset


def describe_charset(digits_enabled: bool,
                     symbols_enabled: bool,
                     letters_enabled: bool = True) -> str:
    """
    Get human-readable description of character set.

    Returns:
        Description such as "letters, digits (62 chars)"
    """
    parts = []

    if letters_enabled:
        parts.append("letters")
    if digits_enabled:
        parts.append("digits")
    if symbols_enabled:
        parts.append("symbols")

    charset = build_charset(digits_enabled, symbols_enabled, letters_enabled)
    return f"{', '.join(parts)} ({len(charset)} chars)"


class PasswordGenerator:
    """Sample passwords from a charset with an injectable random source."""

    def __init__(self, rng: Optional[RandomSource] = None):
        """
        Initialize password generator.

        Args:
            rng: Random source; a fresh random.Random() when omitted
        """
        self.rng = rng if rng is not None else random.Random()

    def generate(self,
                 length: int,
                 digits_enabled: bool,
                 symbols_enabled: bool,
                 letters_enabled: bool = True) -> str:
        """
        Generate a password.

        Each position is drawn independently (with replacement), so repeated
        characters are expected. The length range is the caller's concern;
        any length <= 0 yields an empty string.

        Returns:
            Generated password string
        """
        charset = build_charset(digits_enabled, symbols_enabled, letters_enabled)
        size = len(charset)

        return ''.join(charset[self.rng.randrange(size)] for _ in range(max(0, length)))


def generate_password(length: int,
                      digits_enabled: bool = False,
                      symbols_enabled: bool = False,
                      rng: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Number of characters
        digits_enabled: Include digits
        symbols_enabled: Include symbols
        rng: Random source, e.g. random.Random(seed) for reproducible output

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(rng=rng)

    return generator.generate(length, digits_enabled, symbols_enabled)
