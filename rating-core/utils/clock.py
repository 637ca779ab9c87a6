import time
from collections.abc import Callable

Clock = Callable[[], int]


def now_millis() -> int:
    return int(time.time() * 1000)
