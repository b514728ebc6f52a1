import time
import logging
from typing import Callable, Optional, TypeVar

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

def poll_until(
    fetch: Callable[[], T],
    condition: Callable[[T], bool],
    interval: float,
    timeout: float,
    sleep: Optional[Callable[[float], None]] = None,
    ) -> Optional[T]:
    """
    Call fetch at a fixed interval until condition holds or timeout elapses.

    The elapsed time is accumulated from the interval, not measured, so a
    120s timeout with a 5s interval gives at most 24 attempts.

    Args:
        fetch: Zero-argument callable returning the current state
        condition: Predicate applied to each fetched value
        interval: Seconds to sleep between attempts
        timeout: Stop once the accumulated sleep time reaches this value
        sleep: Sleep function (uses time.sleep if None)

    Returns:
        The first fetched value satisfying condition, or None on timeout

    Raises:
        Any exception raised by fetch is propagated unchanged.
    """
    if sleep is None:
        sleep = time.sleep

    elapsed: float = 0
    attempt: int = 0
    while True:
        attempt += 1
        value = fetch()
        if condition(value):
            logger.debug(f"Condition met on attempt {attempt} after {elapsed}s")
            return value

        logger.debug(f"Condition not met on attempt {attempt}, waiting {interval}s before retry")
        sleep(interval)
        elapsed += interval
        if elapsed >= timeout:
            logger.debug(f"Polling stopped after {attempt} attempts ({elapsed}s)")
            return None
