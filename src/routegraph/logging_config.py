"""Logging setup for the command line entry point.

Library modules only create module loggers; handlers are installed here so
importing routegraph never configures logging as a side effect.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"
VERBOSE_LOG_LEVEL = "DEBUG"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    level = VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
