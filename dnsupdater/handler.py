"""AWS Lambda entry point."""

import asyncio
from typing import Any

from dnsupdater.config import load_settings
from dnsupdater.log import setup_logging
from dnsupdater.reconciler import Reconciler

_reconciler: Reconciler | None = None


def get_reconciler() -> Reconciler:
    """Return the process-wide reconciler, reused across warm invocations."""
    global _reconciler
    if _reconciler is None:
        _reconciler = Reconciler(settings=load_settings())
    return _reconciler


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle an EC2 instance state-change notification."""
    reconciler = get_reconciler()
    setup_logging(reconciler.settings.log_level)
    report = asyncio.run(reconciler.handle(event))
    return report.summary()
