"""
Message id and timestamp sources.

Builders take these as injectable callables so tests can pin the only
non-deterministic parts of a message.
"""

import itertools
import time
import uuid
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], int]


def new_id() -> str:
    return str(uuid.uuid4())


def epoch_seconds() -> int:
    return int(time.time())


def sequential_ids(prefix: str = "msg") -> IdFactory:
    """Return an id factory yielding ``prefix-1``, ``prefix-2``, ..."""
    counter = itertools.count(1)

    def _next() -> str:
        return f"{prefix}-{next(counter)}"

    return _next
