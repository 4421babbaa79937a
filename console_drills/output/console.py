"""Rich console setup shared by both tools.

Output text is reproduced literally, so markup, emoji codes and syntax
highlighting are all switched off and long table rows are never wrapped.
"""

from typing import TextIO

from rich.console import Console


def make_console(file: TextIO | None = None, stderr: bool = False) -> Console:
    """Build a console that prints text exactly as given."""
    return Console(
        file=file,
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def emit(console: Console, text: str = "") -> None:
    """Print one plain line."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def emit_notice(console: Console, text: str, style: str) -> None:
    """Print one line with a style; the plain text is unchanged."""
    console.print(text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)
