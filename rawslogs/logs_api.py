from typing import Any, Callable, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .config import (
    EVENTS_PAGE_LIMIT,
    GROUPS_PAGE_LIMIT,
    STREAMS_PAGE_LIMIT,
    ClientSettings,
    log,
    make_logs_client,
)
from .errors import THROTTLING_CODES, LogsApiError, RateLimited
from .models import LogEvent, LogGroup, LogStream, Page


def _error_from_client_error(operation: str, e: ClientError) -> LogsApiError:
    err = e.response.get("Error", {})
    code = err.get("Code") or str(e.response.get("ResponseMetadata", {}).get("HTTPStatusCode", "Unknown"))
    message = err.get("Message")
    if code in THROTTLING_CODES:
        return RateLimited(operation, code, message)
    return LogsApiError(operation, code, message)


class LogsApi:
    """
    Thin typed layer over a boto3 ``logs`` client. Each call returns one Page
    and raises RateLimited or LogsApiError instead of botocore exceptions.
    """

    def __init__(self, client: Any = None, settings: Optional[ClientSettings] = None):
        self._settings = settings or ClientSettings()
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = make_logs_client(self._settings)
        return self._client

    def _call(self, operation: str, **kwargs) -> Dict[str, Any]:
        method: Callable[..., Dict[str, Any]] = getattr(self.client, operation)
        try:
            return method(**kwargs)
        except ClientError as e:
            raise _error_from_client_error(operation, e) from e
        except BotoCoreError as e:
            raise LogsApiError(operation, type(e).__name__, str(e)) from e

    def describe_groups(self, limit: int = GROUPS_PAGE_LIMIT, next_token: Optional[str] = None) -> Page[LogGroup]:
        kwargs: Dict[str, Any] = dict(limit=limit)
        if next_token:
            kwargs["nextToken"] = next_token
        resp = self._call("describe_log_groups", **kwargs)
        return Page(
            items=[LogGroup.from_api(g) for g in resp.get("logGroups", [])],
            next_token=resp.get("nextToken"),
        )

    def describe_streams(
        self,
        group: str,
        limit: int = STREAMS_PAGE_LIMIT,
        next_token: Optional[str] = None,
        order_by: str = "LastEventTime",
        descending: bool = False,
    ) -> Page[LogStream]:
        kwargs: Dict[str, Any] = dict(
            logGroupName=group,
            limit=limit,
            orderBy=order_by,
            descending=descending,
        )
        if next_token:
            kwargs["nextToken"] = next_token
        resp = self._call("describe_log_streams", **kwargs)
        return Page(
            items=[LogStream.from_api(s) for s in resp.get("logStreams", [])],
            next_token=resp.get("nextToken"),
        )

    def get_events(
        self,
        group: str,
        stream: str,
        start: int,
        end: int,
        limit: int = EVENTS_PAGE_LIMIT,
        next_token: Optional[str] = None,
        start_from_head: bool = True,
    ) -> Page[LogEvent]:
        """
        ``start`` and ``end`` are epoch seconds; GetLogEvents wants milliseconds.
        The page's token is the forward token.
        """
        kwargs: Dict[str, Any] = dict(
            logGroupName=group,
            logStreamName=stream,
            startTime=start * 1000,
            endTime=end * 1000,
            limit=limit,
            startFromHead=start_from_head,
        )
        if next_token:
            kwargs["nextToken"] = next_token
        resp = self._call("get_log_events", **kwargs)
        events = resp.get("events", [])
        log.debug(f"[events] {group}/{stream}: {len(events)} event(s)")
        return Page(
            items=[LogEvent.from_api(e) for e in events],
            next_token=resp.get("nextForwardToken"),
        )
