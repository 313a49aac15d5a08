"""
Logging setup for maze_arena.

Algorithms and the comparison harness log through module loggers; the command
line installs a handler here once at startup.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: str = "WARNING",
    use_rich: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Install a single handler on the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        use_rich: Use a RichHandler; False falls back to timestamped plain lines
        console: Console the RichHandler writes to (stderr when omitted)
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Calling this twice must not double every record
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    if use_rich:
        handler = RichHandler(
            console=console or Console(file=sys.stderr),
            level=numeric_level,
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        ))

    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Root logger set to {level.upper()} (rich={use_rich})")
