"""Logging utility for localenu"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('localenu')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_EMITTED = set()


def warn_once(warning: str, *args) -> bool:
    """
    Log a warning through the package logger, unless the same (formatted) message has
    already been logged during this process.

    Args:
        warning:
            The warning message; may contain %-style placeholders

        *args:
            Values interpolated into the message

    Returns:
        True if the warning was emitted, False if it was suppressed
    """
    message = warning % args if args else warning
    if message in _EMITTED:
        return False

    LOGGER.warning(message)
    _EMITTED.add(message)
    return True


def _reset_warnings():
    """Forget which warnings have been emitted (test isolation)"""
    _EMITTED.clear()
