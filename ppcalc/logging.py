from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import IntEnum

import ppcalc.settings

ROOT_LOGGER = logging.getLogger("ppcalc")


class Ansi(IntEnum):
    # default colours
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    # light colours
    GRAY = 90
    LRED = 91
    LGREEN = 92
    LYELLOW = 93
    LBLUE = 94
    LMAGENTA = 95
    LCYAN = 96
    LWHITE = 97

    RESET = 0

    def __repr__(self) -> str:
        return f"\x1b[{self.value}m"


def configure_logging(debug: bool | None = None) -> None:
    if debug is None:
        debug = ppcalc.settings.DEBUG

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def log(
    msg: str,
    start_color: Ansi | None = None,
    extra: Mapping[str, object] | None = None,
) -> None:
    """\
    Log a message, picking the level from its colour.

    Yellow logs as a warning, red as an error and gray as debug output;
    everything else logs at info level.
    """
    if start_color is Ansi.LYELLOW:
        log_level = logging.WARNING
    elif start_color is Ansi.LRED:
        log_level = logging.ERROR
    elif start_color is Ansi.GRAY:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    if ppcalc.settings.LOG_WITH_COLORS and start_color is not None:
        msg = f"{start_color!r}{msg}{Ansi.RESET!r}"

    ROOT_LOGGER.log(log_level, msg, extra=extra)
