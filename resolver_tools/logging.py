# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging
import sys
import typing as t

from colorama import Fore

from resolver_tools import HINT_LEVEL, get_logger
from resolver_tools.environment import ResolverSettings


class LevelRangeFilter(logging.Filter):
    """
    Pass records with ``low <= levelno < high``
    """

    def __init__(self, low: int = logging.NOTSET, high: int = logging.CRITICAL + 1) -> None:
        super().__init__()
        self.low = low
        self.high = high

    def filter(self, record: logging.LogRecord) -> bool:
        return self.low <= record.levelno < self.high


class ResolverFormatter(logging.Formatter):
    """
    Prefix every message with its level name, colored on a terminal.

    Levels: debug(10), hint(15, default), notice(20), warning(30), error(40), fatal(50)
    """

    LEVELS = {
        logging.DEBUG: ('DEBUG', Fore.LIGHTBLACK_EX),
        HINT_LEVEL: ('HINT', Fore.CYAN),
        logging.INFO: ('NOTICE', Fore.GREEN),
        logging.WARNING: ('WARNING', Fore.YELLOW),
        logging.ERROR: ('ERROR', Fore.RED),
        logging.CRITICAL: ('FATAL', Fore.RED),
    }

    def __init__(self, colored: bool = True) -> None:
        super().__init__(fmt='%(message)s')
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        prefix, color = self.LEVELS.get(record.levelno, (record.levelname, ''))
        line = f'{prefix}: {super().format(record)}'

        if self.colored and sys.stdout.isatty() and sys.stderr.isatty():
            return f'{color}{line}{Fore.RESET}'

        return line


def _stream_handler(
    stream: t.TextIO, level_filter: logging.Filter, colored: bool
) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.addFilter(level_filter)
    handler.setFormatter(ResolverFormatter(colored=colored))
    return handler


def setup_logging(settings: t.Optional[ResolverSettings] = None) -> None:
    """
    Send debug, hint and notice messages to stdout, warnings and errors to stderr.

    Level and colors come from ``RESOLVER_DEBUG_MODE``, ``RESOLVER_NO_HINTS``
    and ``RESOLVER_NO_COLORS``.
    """
    settings = settings or ResolverSettings()
    logger = get_logger()

    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    elif settings.NO_HINTS:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(HINT_LEVEL)

    colored = not settings.NO_COLORS
    logger.handlers.clear()
    logger.addHandler(_stream_handler(sys.stdout, LevelRangeFilter(high=logging.WARNING), colored))
    logger.addHandler(_stream_handler(sys.stderr, LevelRangeFilter(low=logging.WARNING), colored))

    logger.propagate = False  # ends here, don't propagate to root logger, we're client code
