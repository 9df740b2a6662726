from __future__ import annotations
import logging
from .events import BaseEvent


class LoggerObserver:
    """Mirrors lifecycle events into the run log (DEBUG, so the console stays quiet)."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def notify(self, event: BaseEvent) -> None:
        fields = event.dict()
        body = ", ".join(f"{k}={v}" for k, v in fields.items() if k not in ("ts", "run_id"))
        self.logger.debug(f"[EVENT] {event.__class__.__name__} run={fields['run_id']}: {body}")
