"""
Real-time password generator widget.

Renders the controller state and maps keys to controller operations; the
password on screen changes as soon as a constraint does.
"""

from typing import Optional

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import DynamicStyle

from ..config import MIN_LENGTH, MAX_LENGTH
from ..controller import CopyFeedback, GeneratorController, GeneratorState
from ..exceptions import ClipboardWriteError
from ..utils.password_generator import describe_charset
from .theme import ThemeState


class PasswordWidgetApp:
    """Minimal interactive password generator."""

    def __init__(self, controller: GeneratorController,
                 theme: Optional[ThemeState] = None):
        """
        Initialize the widget.

        Args:
            controller: Controller whose state is rendered
            theme: Theme state; dark by default
        """
        self.controller = controller
        self.theme = theme or ThemeState()
        self.error_message: Optional[str] = None

        self._unsubscribe = self.controller.subscribe(self._on_state_changed)

        # Create key bindings
        self.bindings = self._create_key_bindings()

        # Create layout
        self.layout = self._create_layout()

        # Create application
        self.app = Application(
            layout=self.layout,
            key_bindings=self.bindings,
            style=DynamicStyle(lambda: self.theme.style),
            full_screen=False,
            mouse_support=False
        )

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the interface."""
        bindings = KeyBindings()

        @bindings.add('c-c')
        @bindings.add('escape')
        @bindings.add('q')
        def _(event):
            """Quit."""
            event.app.exit()

        @bindings.add('right')
        @bindings.add('+')
        def _(event):
            """Longer password."""
            self.controller.set_length(self.controller.config.length + 1)

        @bindings.add('left')
        @bindings.add('-')
        def _(event):
            """Shorter password."""
            self.controller.set_length(self.controller.config.length - 1)

        @bindings.add('d')
        def _(event):
            """Toggle digits."""
            self.controller.toggle_digits()

        @bindings.add('s')
        def _(event):
            """Toggle symbols."""
            self.controller.toggle_symbols()

        @bindings.add('g')
        def _(event):
            """Generate another password."""
            self.controller.regenerate()

        @bindings.add('r')
        def _(event):
            """Reset to defaults."""
            self.error_message = None
            self.controller.reset()

        @bindings.add('c')
        @bindings.add('enter')
        def _(event):
            """Copy password to clipboard."""
            event.app.create_background_task(self.copy_password())

        @bindings.add('t')
        def _(event):
            """Toggle light/dark theme."""
            self.theme.toggle()
            event.app.invalidate()

        return bindings

    def _create_layout(self) -> Layout:
        """Create the widget layout."""
        root_container = HSplit([
            Window(
                content=FormattedTextControl(
                    text=FormattedText([
                        ("class:title", "Password Generator\n"),
                        ("class:subtitle", "Create a strong and secure password."),
                    ])
                ),
                height=2,
            ),
            Window(height=1, char=" "),
            Window(
                content=FormattedTextControl(text=self._get_password_text),
                height=1,
                wrap_lines=False,
            ),
            Window(height=1, char=" "),
            Window(
                content=FormattedTextControl(text=self._get_controls_text),
                height=2,
                wrap_lines=False,
            ),
            Window(height=1, char=" "),
            Window(
                content=FormattedTextControl(text=self._get_status_text),
                height=1,
            ),
        ], style="class:widget")

        return Layout(root_container)

    def _on_state_changed(self, state: GeneratorState) -> None:
        """Redraw after every controller transition."""
        self.app.invalidate()

    async def copy_password(self) -> None:
        """Copy through the controller, keeping failures on screen."""
        try:
            await self.controller.request_copy()
            self.error_message = None
        except ClipboardWriteError as e:
            self.error_message = str(e)
        finally:
            self.app.invalidate()

    def _get_password_text(self) -> FormattedText:
        """Password field and copy button."""
        state = self.controller.state
        if state.copy_feedback is CopyFeedback.CONFIRMED:
            button_style = "class:copy.confirmed"
        else:
            button_style = "class:copy"

        return FormattedText([
            ("class:password", f" {state.password} "),
            ("", " "),
            (button_style, f" {state.copy_feedback.value} "),
        ])

    def _get_controls_text(self) -> FormattedText:
        """Length slider and character class checkboxes."""
        config = self.controller.config
        filled = config.length - MIN_LENGTH
        empty = MAX_LENGTH - config.length

        def checkbox(enabled: bool) -> str:
            return "[x]" if enabled else "[ ]"

        return FormattedText([
            ("class:label", "Password Length: "),
            ("class:value", f"{config.length:>2} "),
            ("class:slider", "━" * filled + "●"),
            ("class:slider.empty", "─" * empty),
            ("", "\n"),
            ("class:label", f"{checkbox(config.digits_enabled)} Include Numbers   "),
            ("class:label", f"{checkbox(config.symbols_enabled)} Include Symbols"),
        ])

    def _get_status_text(self) -> FormattedText:
        """Error line, or key help and charset summary."""
        if self.error_message:
            return FormattedText([("class:error", self.error_message)])

        config = self.controller.config
        charset_info = describe_charset(config.digits_enabled, config.symbols_enabled)
        instructions = " • ←/→: length • d: numbers • s: symbols • c: copy • g: new • r: reset • t: theme • Esc: quit"

        return FormattedText([
            ("class:status", charset_info),
            ("class:status", instructions),
        ])

    def run(self) -> None:
        """Run the widget until the user quits."""
        try:
            self.app.run()
        finally:
            self._unsubscribe()


def password_widget(controller: GeneratorController,
                    theme: Optional[ThemeState] = None) -> None:
    """
    Show the interactive password generator.

    Args:
        controller: Controller driving the widget
        theme: Initial theme state
    """
    app = PasswordWidgetApp(controller, theme)
    app.run()
