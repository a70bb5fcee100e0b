import os
import time
from typing import Callable


def get_secret(name: str, default: str | None = None) -> str | None:
    """
    Reads a secret from Docker secrets if available,
    otherwise falls back to a normal environment variable.
    """
    file_path = os.getenv(f"{name}_FILE")
    if file_path and os.path.exists(file_path):
        with open(file_path, "r") as f:
            return f.read().strip()
    return os.getenv(name, default)


class IdGenerator:
    """
    Creation-time based ids (epoch milliseconds) that never repeat
    inside one process, even when two records are created in the same
    millisecond or the clock goes backwards.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self, floor: int = 0) -> int:
        candidate = max(int(self._clock() * 1000), self._last + 1, floor + 1)
        self._last = candidate
        return candidate
