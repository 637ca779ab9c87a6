import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

MAX_DELAY_SECONDS = 30.0


class RetryError(RuntimeError):
    pass


def with_retry(
    func: Callable[[], Any],
    *,
    attempts: int = 3,
    delay_seconds: float = 0.5,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    description: str = "operation",
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """Call ``func`` until it succeeds, doubling the pause between attempts."""
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    last_exc: BaseException | None = None
    delay = max(delay_seconds, 0.0)
    for attempt in range(1, attempts + 1):
        try:
            return func()
        except retry_on as exc:
            last_exc = exc
            logger.warning("%s failed (attempt %s/%s): %s", description, attempt, attempts, exc)
            if attempt < attempts:
                sleep(min(delay, MAX_DELAY_SECONDS))
                delay *= 2

    raise RetryError(f"{description} failed after {attempts} attempts") from last_exc
