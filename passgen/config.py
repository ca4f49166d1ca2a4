"""
Default configuration for the password generator widget.
"""

from dataclasses import dataclass


MIN_LENGTH = 8
MAX_LENGTH = 32
DEFAULT_LENGTH = 12

# Reset tuple of the widget. The other widget revision started with digits on.
DEFAULT_DIGITS_ENABLED = False
DEFAULT_SYMBOLS_ENABLED = False
ALT_DEFAULT_DIGITS_ENABLED = True

# Seconds before the "Copied!" label reverts to "Copy".
COPY_FEEDBACK_DELAY = 2.0
QUICK_COPY_FEEDBACK_DELAY = 0.5


@dataclass(frozen=True)
class GeneratorConfig:
    """User-controlled generation parameters."""

    length: int = DEFAULT_LENGTH
    digits_enabled: bool = DEFAULT_DIGITS_ENABLED
    symbols_enabled: bool = DEFAULT_SYMBOLS_ENABLED


@dataclass(frozen=True)
class ControllerSettings:
    """Defaults restored by reset() plus the copy feedback delay."""

    defaults: GeneratorConfig = GeneratorConfig()
    copy_feedback_delay: float = COPY_FEEDBACK_DELAY


# Default settings instance you can import elsewhere
DEFAULT_SETTINGS = ControllerSettings()
