"""Logging setup.

All modules log through ``logging.getLogger(__name__)``; this installs a
single rich handler on stderr so stdout stays clean for ``--json`` output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "skillscope-rich"


def setup_logging(level: str = "INFO") -> None:
    """Configure the ``skillscope`` logger once; later calls only adjust the level."""
    logger = logging.getLogger("skillscope")
    logger.setLevel(level.upper())

    if any(getattr(h, "name", None) == _HANDLER_NAME for h in logger.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


__all__ = ["setup_logging"]
