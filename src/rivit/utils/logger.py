"""Logger factory that keeps every Rivit logger under the ``rivit`` namespace.

Rivit only logs at DEBUG, when a line is skipped or a parse finishes, so
enabling ``logging.getLogger("rivit").setLevel(logging.DEBUG)`` shows why
a construct is missing from a document.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, prefixed with ``rivit.`` when needed.

    >>> get_logger("mymodule").name
    'rivit.mymodule'
    """
    if not (name == "rivit" or name.startswith("rivit.")):
        name = f"rivit.{name}"
    return logging.getLogger(name)
