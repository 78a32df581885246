"""Console logging for the player service.

``setup_logging`` is applied by ``create_container`` from ``Settings.log_level``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Node transport chatter stays at WARNING unless asked for explicitly.
QUIET_LOGGERS = ("httpx", "httpcore")

_LEVEL_STYLES: dict[int, str] = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "1;31",
}


def _supports_color(stream: TextIO) -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color.

    Whether to color is decided per record from the target ``stream``:
    never when ``NO_COLOR`` is set or the stream is not a terminal.
    """

    def __init__(
        self,
        fmt: str | None = DEFAULT_FORMAT,
        datefmt: str | None = DEFAULT_DATEFMT,
        *,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.stream = stream if stream is not None else sys.stdout

    def format(self, record: logging.LogRecord) -> str:
        style = _LEVEL_STYLES.get(record.levelno)
        if style is None or not _supports_color(self.stream):
            return super().format(record)

        # Color a copy so other handlers still see the plain level name.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"\033[{style}m{record.levelname}\033[0m"
        return super().format(colored)


def setup_logging(log_level: str = "INFO", *, stream: TextIO | None = None) -> logging.Handler:
    """Route root logging to a colored console handler at ``log_level``.

    Any handler installed by an earlier call is replaced, so calling this
    repeatedly never duplicates output. Unknown level names fall back to INFO.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    target = stream if stream is not None else sys.stdout
    handler = logging.StreamHandler(target)
    handler.setFormatter(ColoredFormatter(stream=target))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, ColoredFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return handler
