from __future__ import annotations

import logging
import sys
from enum import IntEnum

logger = logging.getLogger("ppcalc")


class Ansi(IntEnum):
    GRAY = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    RESET = 0

    def __repr__(self) -> str:
        return f"\x1b[{self.value}m"


COLOURS = {
    logging.DEBUG: Ansi.GRAY,
    logging.INFO: Ansi.BLUE,
    logging.WARNING: Ansi.YELLOW,
    logging.ERROR: Ansi.RED,
}


class ColourFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if colour := COLOURS.get(record.levelno):
            return f"{colour!r}{message}{Ansi.RESET!r}"

        return message


def configure(debug: bool = False) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            ColourFormatter("[%(asctime)s] %(levelname)s: %(message)s", "%H:%M:%S"),
        )
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def debug(message: str) -> None:
    logger.debug(message)


def info(message: str) -> None:
    logger.info(message)


def warning(message: str) -> None:
    logger.warning(message)


def error(message: str) -> None:
    logger.error(message)
