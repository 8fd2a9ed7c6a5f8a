"""
Generic driver for token-paginated CloudWatch Logs calls.

A run starts with no token and keeps calling ``fetch(token)`` until the
continuation token runs out. Throttled calls are retried with the same token
after a short pause; any other API error ends the run but keeps whatever was
already collected.

GetLogEvents never returns an empty forward token: at the end of a stream it
hands back the token it was given. With ``stall_guard`` on, a repeated token
therefore means "done", except right after a throttle, where the server gets
one more try with that token.
"""
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from .config import log
from .errors import LogsApiError, RateLimited
from .models import Page
from .throttle import throttle as default_throttle

T = TypeVar("T")


def advance_token(previous: Optional[str], new: Optional[str], is_retry: bool, stall_guard: bool) -> Optional[str]:
    """
    Decide the token for the next request after a successful fetch that was
    made with ``previous``. None means the run is over.
    """
    if not stall_guard:
        return new or None
    if previous and new and previous != new:
        return new
    if is_retry:
        return new or None
    return None


class Paginator(Generic[T]):

    def __init__(
        self,
        fetch: Callable[[Optional[str]], Page[T]],
        label: str,
        stall_guard: bool = False,
        throttle: Callable[[], None] = default_throttle,
    ):
        self.fetch = fetch
        self.label = label
        self.stall_guard = stall_guard
        self.throttle = throttle

    def pages(self) -> Iterator[Page[T]]:
        token: Optional[str] = None
        first = True
        is_retry = False
        while True:
            try:
                page = self.fetch(token)
            except RateLimited:
                log.debug(f"[{self.label}] throttled, retrying token={token}")
                is_retry = True
                self.throttle()
                continue
            except LogsApiError as e:
                log.error(f"[{self.label}] {e}")
                return

            yield page

            if first:
                # the opening request has nothing to compare against
                token = page.next_token or None
                first = False
            else:
                token = advance_token(token, page.next_token, is_retry, self.stall_guard)
            is_retry = False
            if token is None:
                return

    def __iter__(self) -> Iterator[T]:
        for page in self.pages():
            yield from page.items

    def collect(self) -> List[T]:
        return list(self)
