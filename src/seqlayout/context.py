from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .errors import LayoutCancelledError

# ============================================================================
# Layout context
#
# Scoped handle threaded through every layout stage. It carries the logger
# diagnostics are written to and a cancellation signal; it holds no data the
# geometry depends on.
# ============================================================================

logger = logging.getLogger("seqlayout")


@dataclass(slots=True)
class LayoutContext:
    logger: logging.Logger = field(default_factory=lambda: logger)
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def background(cls) -> LayoutContext:
        """A context that logs to the package logger and is never cancelled."""
        return cls()

    def with_logger(self, new_logger: logging.Logger) -> LayoutContext:
        """Same cancellation signal, different log sink."""
        return LayoutContext(logger=new_logger, cancel_event=self.cancel_event)

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def check(self, stage: str) -> None:
        """Raise LayoutCancelledError if the context has been cancelled."""
        if self.cancel_event.is_set():
            self.logger.info("layout cancelled during %s", stage)
            raise LayoutCancelledError(f"layout cancelled during {stage}")
