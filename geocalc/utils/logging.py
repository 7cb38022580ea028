"""Package logger for geocalc, plus a de-duplicating warning helper"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geocalc')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Message templates already emitted by warn_once
_WARNED: Set[str] = set()


def warn_once(msg: str, *args) -> None:
    """
    Logs a warning through the geocalc logger the first time a given message
    template is seen. Later calls with the same template are dropped, whatever
    their arguments.

    Args:
        msg:
            The message template, in %-style logging format

        *args:
            Values to interpolate into the template

    Returns:
        None
    """
    if msg in _WARNED:
        return

    LOGGER.warning(msg, *args)
    _WARNED.add(msg)
