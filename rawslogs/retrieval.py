from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO, Union

from .config import EVENTS_PAGE_LIMIT, GROUPS_PAGE_LIMIT, STREAMS_PAGE_LIMIT, log
from .errors import DataIntegrityError
from .logs_api import LogsApi
from .models import LogEvent, LogGroup, LogStream, TimeWindow
from .paginator import Paginator
from .throttle import throttle as default_throttle
from .timewindow import resolve_window


@dataclass(frozen=True)
class EventQuery:
    group: str
    start: Optional[str] = None
    end: Optional[str] = None


def _require_names(kind: str, records: Sequence[Union[LogGroup, LogStream]]) -> List[str]:
    names = []
    for i, record in enumerate(records):
        if not record.name:
            raise DataIntegrityError(kind, i)
        names.append(record.name)
    return names


class LogRetriever:
    """
    Lists groups, streams and events, writing one line per result to ``out``.
    Diagnostics go to the rawslogs logger, never to ``out``.
    """

    def __init__(
        self,
        api: LogsApi,
        out: Optional[TextIO] = None,
        throttle: Callable[[], None] = default_throttle,
    ):
        self.api = api
        self.out = out if out is not None else sys.stdout
        self.throttle = throttle

    def _write(self, line: str) -> None:
        print(line, file=self.out)

    # ----------------- collection -----------------

    def groups(self) -> List[LogGroup]:
        return Paginator(
            lambda token: self.api.describe_groups(limit=GROUPS_PAGE_LIMIT, next_token=token),
            label="groups",
            throttle=self.throttle,
        ).collect()

    def streams(self, group: str) -> List[LogStream]:
        return Paginator(
            lambda token: self.api.describe_streams(
                group,
                limit=STREAMS_PAGE_LIMIT,
                next_token=token,
                order_by="LastEventTime",
                descending=False,
            ),
            label="streams",
            throttle=self.throttle,
        ).collect()

    def stream_events(self, group: str, stream: str, window: TimeWindow) -> List[LogEvent]:
        return Paginator(
            lambda token: self.api.get_events(
                group,
                stream,
                window.start,
                window.end,
                limit=EVENTS_PAGE_LIMIT,
                next_token=token,
                start_from_head=True,
            ),
            label="events",
            stall_guard=True,
            throttle=self.throttle,
        ).collect()

    def events(self, group: str, window: TimeWindow) -> List[LogEvent]:
        """
        Every event of every stream in the group, stream by stream in the order
        DescribeLogStreams returned them. Not sorted across streams.
        """
        events: List[LogEvent] = []
        for stream in _require_names("log stream", self.streams(group)):
            events.extend(self.stream_events(group, stream, window))
        return events

    # ----------------- listing -----------------

    def list_groups(self) -> List[str]:
        names = _require_names("log group", self.groups())
        for name in names:
            self._write(name)
        return names

    def list_streams(self, group: str) -> List[str]:
        names = _require_names("log stream", self.streams(group))
        for name in names:
            self._write(name)
        return names

    def list_events(self, query: EventQuery) -> List[LogEvent]:
        window = resolve_window(query.start, query.end)
        complete = [e for e in self.events(query.group, window) if e.is_complete]
        for event in complete:
            self._write(event.format())
        log.debug(f"[events] wrote {len(complete)} event(s) from {query.group}")
        return complete
