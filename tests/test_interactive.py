"""
Unit tests for the interactive password widget.
"""

import asyncio
from unittest.mock import MagicMock

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from passgen.controller import CopyFeedback, GeneratorController
from passgen.ui.realtime import PasswordWidgetApp
from passgen.ui.theme import THEME_STYLES, Theme, ThemeState


def fragments_text(formatted):
    return "".join(text for _, text in formatted)


class TestPasswordWidget:
    """Test widget rendering and key handling."""

    @pytest.fixture
    def controller(self, fake_clipboard, fake_timer):
        return GeneratorController(clipboard=fake_clipboard, timer=fake_timer)

    @pytest.fixture
    def widget(self, controller):
        """Create the widget against a pipe input and dummy output."""
        with create_pipe_input() as pipe_input:
            with create_app_session(input=pipe_input, output=DummyOutput()):
                yield PasswordWidgetApp(controller)

    def press(self, widget, *keys):
        bindings = widget.bindings.get_bindings_for_keys(keys)
        assert bindings, f"No binding for {keys}"
        event = MagicMock()
        bindings[-1].handler(event)
        return event

    def test_password_line(self, widget, controller):
        """Test password and copy label are rendered."""
        text = fragments_text(widget._get_password_text())

        assert controller.password in text
        assert "Copy" in text
        assert "Copied!" not in text

    def test_controls_line(self, widget, controller):
        """Test length and checkboxes are rendered."""
        text = fragments_text(widget._get_controls_text())

        assert "Password Length: 12" in text
        assert "[ ] Include Numbers" in text
        assert "[ ] Include Symbols" in text

        controller.toggle_digits()
        text = fragments_text(widget._get_controls_text())
        assert "[x] Include Numbers" in text

    def test_status_line(self, widget, controller):
        """Test the charset summary follows the configuration."""
        assert "letters (52 chars)" in fragments_text(widget._get_status_text())

        controller.toggle_symbols()
        assert "letters, symbols (76 chars)" in fragments_text(widget._get_status_text())

    def test_length_keys(self, widget, controller):
        """Test arrows change the length within bounds."""
        self.press(widget, Keys.Right)
        assert controller.config.length == 13

        self.press(widget, '-')
        self.press(widget, Keys.Left)
        assert controller.config.length == 11

        for _ in range(40):
            self.press(widget, '+')
        assert controller.config.length == 32
        assert len(controller.password) == 32

    def test_toggle_keys(self, widget, controller):
        """Test d and s flip the character classes."""
        self.press(widget, 'd')
        self.press(widget, 's')

        assert controller.config.digits_enabled is True
        assert controller.config.symbols_enabled is True

    def test_regenerate_and_reset_keys(self, widget, controller):
        """Test g re-rolls and r resets."""
        self.press(widget, Keys.Right)
        self.press(widget, 'g')
        assert controller.config.length == 13

        widget.error_message = "stale"
        self.press(widget, 'r')
        assert controller.config.length == 12
        assert widget.error_message is None

    def test_theme_key(self, widget):
        """Test t switches the theme."""
        event = self.press(widget, 't')

        assert widget.theme.theme is Theme.LIGHT
        event.app.invalidate.assert_called_once()

    def test_copy_key_starts_background_task(self, widget):
        """Test c schedules a copy."""
        event = self.press(widget, 'c')

        event.app.create_background_task.assert_called_once()
        event.app.create_background_task.call_args[0][0].close()

    def test_copy_shows_confirmation(self, widget, controller, fake_clipboard):
        """Test the label changes after a copy."""
        asyncio.run(widget.copy_password())

        assert fake_clipboard.writes == [controller.password]
        assert "Copied!" in fragments_text(widget._get_password_text())

    def test_successful_copy_clears_error_and_redraws(self, widget):
        """Test a stale error disappears even without a controller transition."""
        widget._unsubscribe()
        widget.app = MagicMock()
        widget.error_message = "Could not copy to clipboard: access denied"

        asyncio.run(widget.copy_password())

        assert widget.error_message is None
        widget.app.invalidate.assert_called_once()
        assert "access denied" not in fragments_text(widget._get_status_text())

    def test_copy_failure_is_shown(self, failing_clipboard, fake_timer):
        """Test a failed copy lands in the status line."""
        controller = GeneratorController(clipboard=failing_clipboard, timer=fake_timer)
        with create_pipe_input() as pipe_input:
            with create_app_session(input=pipe_input, output=DummyOutput()):
                widget = PasswordWidgetApp(controller)

                asyncio.run(widget.copy_password())

                assert controller.copy_feedback is CopyFeedback.IDLE
                assert "access denied" in fragments_text(widget._get_status_text())

    def test_run_unsubscribes(self, widget, controller):
        """Test the widget stops listening once closed."""
        widget.app = MagicMock()
        widget.run()

        widget.app.run.assert_called_once()
        assert controller._listeners == []


class TestThemeState:
    """Test the theme toggle."""

    def test_toggle(self):
        """Test dark and light alternate."""
        theme = ThemeState()
        assert theme.theme is Theme.DARK
        assert theme.toggle() is Theme.LIGHT
        assert theme.toggle() is Theme.DARK

    def test_style_follows_theme(self):
        """Test the style matches the current theme."""
        theme = ThemeState(Theme.LIGHT)
        assert theme.style is THEME_STYLES[Theme.LIGHT]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
