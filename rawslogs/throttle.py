import time

from .config import THROTTLE_DELAY_SECONDS


def throttle(delay: float = THROTTLE_DELAY_SECONDS) -> None:
    """Fixed pause before retrying a rate-limited call. No backoff, no ceiling."""
    time.sleep(delay)
