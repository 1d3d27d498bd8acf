"""Logging setup shared by the Lambda handler and the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "dnsupdater"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", rich_output: bool = False) -> None:
    """Configure the root logger once per process.

    The Lambda runtime installs its own root handler; in that case only the
    level is changed.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return
    if root.handlers and not rich_output:
        return

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))

    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
