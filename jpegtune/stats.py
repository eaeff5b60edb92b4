"""Counters and debug output collected while processing an image."""

from dataclasses import dataclass, field
from typing import Dict, Optional, TextIO

NUM_ITERS_CNT = "number of iterations"
NUM_ITERS_UP_CNT = "number of iterations up"
NUM_ITERS_DOWN_CNT = "number of iterations down"


@dataclass
class ProcessStats:
    """Named counters plus optional text sinks for debug logging."""

    counters: Dict[str, int] = field(default_factory=dict)
    debug_output: Optional[TextIO] = None
    debug_output_file: Optional[TextIO] = None
    filename: str = ""

    def increment(self, name: str, amount: int = 1) -> int:
        """Add amount to the named counter and return its new value."""
        value = self.counters.get(name, 0) + amount
        self.counters[name] = value
        return value

    def log(self, message: str) -> None:
        """Write message to every configured debug sink."""
        for sink in (self.debug_output, self.debug_output_file):
            if sink is not None:
                sink.write(message)