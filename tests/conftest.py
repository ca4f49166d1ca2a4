"""
Shared fakes for the controller's collaborators.
"""

import threading
from typing import Callable, Dict, List

import pytest

from passgen.exceptions import ClipboardWriteError


class FakeHandle:
    """Timer handle that records cancellation."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimer:
    """Manually advanced timer facility."""

    def __init__(self):
        self.now = 0.0
        self.handles: List[FakeHandle] = []

    def schedule_once(self, delay: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> List[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in sorted(self.live, key=lambda h: h.due):
            if handle.due <= self.now:
                handle.fired = True
                handle.callback()


class FakeClipboard:
    """Clipboard sink that remembers what was written."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.writes: List[str] = []

    def write_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardWriteError("Could not copy to clipboard: access denied")
        self.writes.append(text)


class GatedClipboard:
    """Clipboard whose writes block until the test releases them."""

    def __init__(self):
        self.writes: List[str] = []
        self._gates: Dict[str, threading.Event] = {}
        self._lock = threading.Lock()

    def gate(self, text: str) -> threading.Event:
        with self._lock:
            return self._gates.setdefault(text, threading.Event())

    def release(self, text: str) -> None:
        self.gate(text).set()

    def release_all(self) -> None:
        with self._lock:
            for gate in self._gates.values():
                gate.set()

    def write_text(self, text: str) -> None:
        if not self.gate(text).wait(timeout=5):
            raise RuntimeError("clipboard write was never released")
        with self._lock:
            self.writes.append(text)


@pytest.fixture
def fake_timer():
    """Create a manually advanced timer."""
    return FakeTimer()


@pytest.fixture
def fake_clipboard():
    """Create an in-memory clipboard."""
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    """Create a clipboard that rejects every write."""
    return FakeClipboard(fail=True)


@pytest.fixture
def gated_clipboard():
    """Create a clipboard whose writes wait to be released."""
    clipboard = GatedClipboard()
    yield clipboard
    clipboard.release_all()
