"""
Light/dark theme state for the interactive widget.

Purely cosmetic; it has no link to the generator configuration.
"""

from enum import Enum

from prompt_toolkit.styles import Style


class Theme(Enum):
    DARK = "dark"
    LIGHT = "light"


THEME_STYLES = {
    Theme.DARK: Style.from_dict({
        "widget": "bg:#0f172a #e5e7eb",
        "title": "bold #ffffff",
        "subtitle": "#94a3b8",
        "password": "bold #2dd4bf",
        "copy": "bg:#0d9488 #ffffff bold",
        "copy.confirmed": "bg:#115e59 #ffffff bold",
        "label": "#cbd5e1",
        "value": "bold #2dd4bf",
        "slider": "#2dd4bf",
        "slider.empty": "#334155",
        "status": "#64748b",
        "error": "bold #f87171",
    }),
    Theme.LIGHT: Style.from_dict({
        "widget": "bg:#f8fafc #0f172a",
        "title": "bold #0f172a",
        "subtitle": "#475569",
        "password": "bold #0f766e",
        "copy": "bg:#14b8a6 #ffffff bold",
        "copy.confirmed": "bg:#0f766e #ffffff bold",
        "label": "#334155",
        "value": "bold #0f766e",
        "slider": "#0f766e",
        "slider.empty": "#cbd5e1",
        "status": "#64748b",
        "error": "bold #dc2626",
    }),
}


class ThemeState:
    """Current theme of the widget."""

    def __init__(self, theme: Theme = Theme.DARK):
        self.theme = theme

    def toggle(self) -> Theme:
        """Switch between dark and light, returning the new theme."""
        self.theme = Theme.LIGHT if self.theme is Theme.DARK else Theme.DARK
        return self.theme

    @property
    def style(self) -> Style:
        return THEME_STYLES[self.theme]
