from typing import Optional

THROTTLING_CODES = frozenset({
    "ThrottlingException",
    "Throttling",
    "TooManyRequestsException",
    "RequestLimitExceeded",
})


class LogsError(Exception):
    """Base class for everything raised by rawslogs."""


class LogsApiError(LogsError):
    """
    A remote call failed. The paginator reports these and stops the run;
    they never reach callers of the retriever.
    """

    def __init__(self, operation: str, code: str, message: Optional[str] = None):
        self.operation = operation
        self.code = code
        self.message = message or ""
        super().__init__(f"{operation} failed: {code}" + (f" ({self.message})" if self.message else ""))


class RateLimited(LogsApiError):
    """The API asked us to slow down. Retried by the paginator, never surfaced."""


class DataIntegrityError(LogsError):
    """A log group or stream came back without its name."""

    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"{kind} #{index} returned by the API has no name")
