"""
Batch progress tracking.
"""

import logging
import threading
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class BatchProgress:
    total_steps: int
    current_step: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def advance(self) -> int:
        with self._lock:
            if self.current_step >= self.total_steps:
                raise RuntimeError(f"Progress already complete ({self.total_steps} steps)")
            self.current_step += 1
            return self.current_step


class LoggingProgressNotifier:
    def report(self, current_step: int, total_steps: int) -> None:
        logger.info("Completed %d of %d", current_step, total_steps)
