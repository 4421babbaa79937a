"""Resolve the multiplication table size from user input."""

import logging

from rich.console import Console

from ..config import (
    CUSTOM_SIZE_PROMPT,
    DEFAULT_TABLE_SIZE,
    INVALID_SIZE_MSG,
    MAX_NUMBER_PROMPT,
    YES_ANSWER,
)
from ..output import emit_notice
from ..parsing import parse_int
from ..sources import LineSource

logger = logging.getLogger(__name__)


def is_yes(answer: str | None) -> bool:
    return answer is not None and answer.lower() == YES_ANSWER


def select_table_size(source: LineSource, console: Console, default: int = DEFAULT_TABLE_SIZE) -> int:
    """
    Ask whether to customize the table size and return the size to use.

    Declining returns the default silently. Accepting but giving anything
    other than a positive integer falls back to the default with a notice.
    """
    if not is_yes(source.read_line(CUSTOM_SIZE_PROMPT)):
        return default

    size = parse_int(source.read_line(MAX_NUMBER_PROMPT))
    if size is None or size < 1:
        emit_notice(console, INVALID_SIZE_MSG.format(size=default), "yellow")
        logger.debug("Custom size rejected, using %d", default)
        return default

    logger.debug("Using custom table size %d", size)
    return size
