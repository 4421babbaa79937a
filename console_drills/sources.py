"""Line sources that feed raw user input into the console tools.

Every tool reads through the same one-method capability so tests and batch
runs can swap the interactive console for a scripted list or a text file.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol, TextIO

from rich.console import Console

logger = logging.getLogger(__name__)

# Stands in for a line whose bytes could not be decoded; never parses as a number
UNDECODABLE_LINE = "\ufffd"


class LineSource(Protocol):
    """Anything that can hand out one line of input at a time."""

    def read_line(self, prompt: str = "") -> str | None:
        """Return the next line without its newline, or None when exhausted."""
        ...


class ConsoleLineSource:
    """
    Reads lines interactively from the terminal.

    The prompt is written through the rich console so it lands on the same
    stream as every other line of output. Blocks until the user presses Enter.
    """

    def __init__(self, console: Console):
        self.console = console

    def read_line(self, prompt: str = "") -> str | None:
        try:
            return self.console.input(prompt, markup=False, emoji=False)
        except EOFError:
            return None
        except UnicodeDecodeError:
            logger.debug("Replaced undecodable console input")
            return UNDECODABLE_LINE


class ScriptedLineSource:
    """Replays a fixed sequence of lines, then reports exhaustion."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str = "") -> str | None:
        self.prompts.append(prompt)
        return next(self._lines, None)


class FileLineSource:
    """Reads lines from a text file (or any open text stream)."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    @classmethod
    def from_path(cls, path: Path) -> "FileLineSource":
        return cls(path.open("r", encoding="utf-8", errors="replace"))

    def read_line(self, prompt: str = "") -> str | None:
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "FileLineSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def iter_lines(source: LineSource, prompt: str = "") -> Iterator[str]:
    """Lazily yield lines from a source until it runs dry."""
    while True:
        line = source.read_line(prompt)
        if line is None:
            return
        yield line
