"""
Generator controller: owns the configuration, the current password and the
copy feedback label, and keeps them consistent.

Every configuration transition regenerates the password before anything is
published, so subscribers never see a password built from an older
configuration.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional

from ..clipboard import ClipboardSink, get_clipboard
from ..config import ControllerSettings, GeneratorConfig, DEFAULT_SETTINGS
from ..exceptions import ClipboardWriteError
from ..timers import LoopTimer, TimerFacility, TimerHandle
from ..utils.password_generator import PasswordGenerator
from ..utils.validation import clamp_length


logger = logging.getLogger(__name__)


class CopyFeedback(Enum):
    """Label shown on the copy button."""

    IDLE = "Copy"
    CONFIRMED = "Copied!"


@dataclass(frozen=True)
class GeneratorState:
    """Snapshot handed to subscribers."""

    config: GeneratorConfig
    password: str
    copy_feedback: CopyFeedback


StateListener = Callable[[GeneratorState], None]
ErrorListener = Callable[[Exception], None]


class GeneratorController:
    """Keeps a generated password in sync with its configuration."""

    def __init__(self,
                 settings: Optional[ControllerSettings] = None,
                 generator: Optional[PasswordGenerator] = None,
                 clipboard: Optional[ClipboardSink] = None,
                 timer: Optional[TimerFacility] = None):
        """
        Initialize controller and generate the first password.

        Args:
            settings: Default configuration and copy feedback delay
            generator: Password generator (inject a seeded one for tests)
            clipboard: Clipboard sink for request_copy()
            timer: Timer facility for the copy feedback revert
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.generator = generator or PasswordGenerator()
        self.clipboard = clipboard or get_clipboard()
        self.timer = timer or LoopTimer()

        self._listeners: List[StateListener] = []
        self._error_listeners: List[ErrorListener] = []

        self._defaults = replace(
            self.settings.defaults,
            length=clamp_length(self.settings.defaults.length),
        )
        self._config = self._defaults
        self._copy_feedback = CopyFeedback.IDLE
        self._revert_handle: Optional[TimerHandle] = None
        self._revert_token: Optional[int] = None
        # Bumped by every copy request and reset; stale completions compare unequal
        self._copy_token = 0

        self._password = self._generate(self._config)

    # --- Observation ---

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def password(self) -> str:
        return self._password

    @property
    def copy_feedback(self) -> CopyFeedback:
        return self._copy_feedback

    @property
    def copy_label(self) -> str:
        return self._copy_feedback.value

    @property
    def state(self) -> GeneratorState:
        return GeneratorState(self._config, self._password, self._copy_feedback)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every transition.
        Exceptions raised by the listener are logged, not propagated.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def subscribe_errors(self, listener: ErrorListener) -> Callable[[], None]:
        """
        Register a listener called with every copy failure.
        Exceptions raised by the listener are logged, not propagated.

        Returns:
            Callable that removes the listener
        """
        self._error_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._error_listeners:
                self._error_listeners.remove(listener)

        return unsubscribe

    # --- Configuration transitions ---

    def set_length(self, length: int) -> None:
        """
        Change the password length, clamped to the slider range.

        Raises:
            InvalidLengthError: If length is not an integer
        """
        self._apply(replace(self._config, length=clamp_length(length)))

    def toggle_digits(self) -> None:
        """Flip whether digits are included."""
        self._apply(replace(self._config, digits_enabled=not self._config.digits_enabled))

    def toggle_symbols(self) -> None:
        """Flip whether symbols are included."""
        self._apply(replace(self._config, symbols_enabled=not self._config.symbols_enabled))

    def regenerate(self) -> None:
        """Roll a new password for the current configuration."""
        self._apply(self._config)

    def reset(self) -> None:
        """Restore the default configuration and the idle copy label."""
        self._copy_token += 1
        self._cancel_revert()
        self._copy_feedback = CopyFeedback.IDLE
        self._apply(self._defaults)

    def _apply(self, config: GeneratorConfig) -> None:
        """Install a configuration, regenerate, then publish once."""
        password = self._generate(config)
        self._config = config
        self._password = password

        logger.debug(
            f"Regenerated: length={config.length} digits={config.digits_enabled} "
            f"symbols={config.symbols_enabled}"
        )
        self._publish()

    def _generate(self, config: GeneratorConfig) -> str:
        return self.generator.generate(
            config.length,
            config.digits_enabled,
            config.symbols_enabled,
        )

    # --- Copy interaction ---

    async def request_copy(self) -> None:
        """
        Copy the current password to the clipboard.

        On success the label becomes "Copied!" and reverts after the
        configured delay. A completion whose request was superseded by a newer
        copy or a reset leaves the label alone.

        Raises:
            ClipboardWriteError: If the clipboard rejected the write
        """
        self._copy_token += 1
        token = self._copy_token
        password = self._password

        try:
            await asyncio.to_thread(self.clipboard.write_text, password)
        except ClipboardWriteError as e:
            logger.warning(f"Copy request {token} failed: {e}")
            self._notify(self._error_listeners, e)
            raise

        if token != self._copy_token:
            logger.debug(f"Copy request {token} superseded, feedback unchanged")
            return

        self._cancel_revert()
        self._copy_feedback = CopyFeedback.CONFIRMED
        self._revert_token = token
        self._revert_handle = self.timer.schedule_once(
            self.settings.copy_feedback_delay,
            lambda: self._revert_feedback(token),
        )
        logger.debug(f"Copy request {token} confirmed")
        self._publish()

    def _revert_feedback(self, token: int) -> None:
        if token != self._revert_token:
            return

        self._revert_handle = None
        self._revert_token = None
        self._copy_feedback = CopyFeedback.IDLE
        self._publish()

    def _cancel_revert(self) -> None:
        if self._revert_handle is not None:
            self._revert_handle.cancel()
            self._revert_handle = None
        self._revert_token = None

    def _publish(self) -> None:
        self._notify(self._listeners, self.state)

    def _notify(self, listeners: List[Callable], payload: object) -> None:
        """Call every listener; one that raises is logged and skipped."""
        for listener in list(listeners):
            try:
                listener(payload)
            except Exception as e:
                logger.error(f"Unexpected error in listener {listener!r}: {e}")


def get_generator_controller(settings: Optional[ControllerSettings] = None,
                             **kwargs) -> GeneratorController:
    """
    Get a configured generator controller instance.

    Args:
        settings: Default configuration and copy feedback delay
        **kwargs: Collaborators forwarded to GeneratorController

    Returns:
        GeneratorController instance
    """
    return GeneratorController(settings=settings, **kwargs)
