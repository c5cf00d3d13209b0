"""loguru sink setup for the command line.

Library modules only do ``from loguru import logger``; the CLI calls
``setup_logging`` once at start-up. All output goes to stderr so stdout
stays clean for piping.
"""

import sys
from typing import TextIO

from loguru import logger

LEVEL_TAGS: dict[str, str] = {
    "DEBUG": "<dim>[DEBUG]</dim>",
    "INFO": "<blue><bold>[INFO]</bold></blue>",
    "SUCCESS": "<green><bold>[✓]</bold></green>",
    "WARNING": "<yellow><bold>[WARN]</bold></yellow>",
    "ERROR": "<red><bold>[ERROR]</bold></red>",
    "CRITICAL": "<red><bold>[ERROR]</bold></red>",
}


def _format(record) -> str:  # pyright: ignore[reportMissingParameterType]
    tag = LEVEL_TAGS.get(record["level"].name, "[{level}]")
    return tag + " {message}\n{exception}"


def setup_logging(
    *,
    verbose: bool = False,
    color: bool | None = None,
    sink: TextIO | None = None,
) -> int:
    """Replace loguru's default handler with a single stderr sink.

    Args:
        verbose: Show DEBUG messages (timings, ignored options)
        color: Force colour on/off; None lets loguru decide (tty, NO_COLOR)
        sink: Stream to write to, defaults to sys.stderr

    Returns:
        The loguru handler id
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=_format,
        colorize=color,
        backtrace=False,
        diagnose=False,
    )
