"""
Reactive password controller for passgen.

Keeps the generated password in sync with the user's constraints.
"""

from .manager import CopyFeedback, GeneratorController, GeneratorState, get_generator_controller

__all__ = ['CopyFeedback', 'GeneratorController', 'GeneratorState', 'get_generator_controller']
