"""Terminal styling helpers shared by the plain-text formatters."""

from rich.console import Console
from rich.text import Text

VALUE_STYLE = "cyan"


def colorize(text: str) -> str:
    """Wrap ``text`` in ANSI escape codes for the value style."""
    console = Console(force_terminal=True, color_system="standard", width=max(len(text), 1))
    with console.capture() as capture:
        console.print(Text(text, style=VALUE_STYLE), end="", soft_wrap=True)
    return capture.get()


def plain(text: str) -> str:
    return text
