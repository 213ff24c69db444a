"""ASCII art banner shown above the address bar."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


def _build_banner() -> Text:
    """Build the banner as a Rich Text object with globe art and title side by side."""
    #           P      R      O      X      Y      P      A      S      S
    title_rows = [
        ["╔═╗", "╦═╗", "╔═╗", "╗ ╔", "╦ ╦", "╔═╗", "╔═╗", "╔═╗", "╔═╗"],
        ["╠═╝", "╠╦╝", "║ ║", " ╬ ", "╚╦╝", "╠═╝", "╠═╣", "╚═╗", "╚═╗"],
        ["╩  ", "╩╚═", "╚═╝", "╝ ╚", " ╩ ", "╩  ", "╩ ╩", "╚═╝", "╚═╝"],
    ]
    # PROXY in the accent color, PASS in white
    colors = ["bright_green"] * 5 + ["bright_white"] * 4

    art_rows = [
        " ╭─┬─╮ ",
        " ├─┼─┤ ",
        " ╰─┴─╯ ",
    ]

    text = Text()
    for title_row, art_row in zip(title_rows, art_rows):
        text.append(art_row, style="bold bright_green")
        text.append("  ")
        for part, color in zip(title_row, colors):
            text.append(part, style=f"bold {color}")
        text.append("\n")

    text.append("Anonymous Browsing", style="bright_white")
    text.append("  │  ", style="dim")
    text.append("every request goes through the proxy", style="italic green")
    return text


class Banner(Vertical):
    """Application banner with ASCII art title."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 5;
        background: $primary-background;
        padding: 0 1;
    }

    Banner > #banner-art {
        width: 100%;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(_build_banner(), id="banner-art")
