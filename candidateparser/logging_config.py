import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings


def setup_logging(settings: Settings, verbose: bool = False, console: Optional[Console] = None) -> None:
    """Send log records to stderr through RichHandler.

    The level comes from settings unless verbose forces DEBUG. Pass the CLI's
    stderr console so log lines and rejected-line reports interleave cleanly.
    Calling this again replaces the root handlers.
    """
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(name)s | %(message)s",
        handlers=[handler],
    )


__all__ = ["setup_logging"]
