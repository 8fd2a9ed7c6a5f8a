"""Shared fixtures: scripted fetch callables and a fake CloudWatch Logs API."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from rawslogs.errors import LogsApiError, RateLimited
from rawslogs.models import LogEvent, LogGroup, LogStream, Page


class ScriptedFetch:
    """Plays back a fixed list of outcomes (pages or exceptions) and records tokens."""

    def __init__(self, outcomes: list[Any]) -> None:
        self.outcomes = list(outcomes)
        self.tokens: list[str | None] = []

    def __call__(self, token: str | None) -> Page:
        self.tokens.append(token)
        if not self.outcomes:
            raise AssertionError(f"unexpected fetch with token={token!r}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeLogsApi:
    """Stands in for LogsApi, serving scripted outcomes per call."""

    def __init__(
        self,
        groups: list[Any] | None = None,
        streams: dict[str, list[Any]] | None = None,
        events: dict[str, list[Any]] | None = None,
    ) -> None:
        self.group_fetch = ScriptedFetch(groups or [])
        self.stream_fetches = {g: ScriptedFetch(o) for g, o in (streams or {}).items()}
        self.event_fetches = {s: ScriptedFetch(o) for s, o in (events or {}).items()}
        self.calls: list[tuple[Any, ...]] = []

    def describe_groups(self, limit: int = 50, next_token: str | None = None) -> Page:
        self.calls.append(("describe_groups", limit, next_token))
        return self.group_fetch(next_token)

    def describe_streams(
        self,
        group: str,
        limit: int = 50,
        next_token: str | None = None,
        order_by: str = "LastEventTime",
        descending: bool = False,
    ) -> Page:
        self.calls.append(("describe_streams", group, limit, next_token, order_by, descending))
        return self.stream_fetches[group](next_token)

    def get_events(
        self,
        group: str,
        stream: str,
        start: int,
        end: int,
        limit: int = 10_000,
        next_token: str | None = None,
        start_from_head: bool = True,
    ) -> Page:
        self.calls.append(("get_events", group, stream, start, end, limit, next_token, start_from_head))
        return self.event_fetches[stream](next_token)


def event(n: int) -> LogEvent:
    return LogEvent(ingestion_time=1_700_000_000_000 + n, message=f"e{n}", timestamp=1_699_999_999_000 + n)


def groups_page(*names: str | None, token: str | None = None) -> Page:
    return Page(items=[LogGroup(name=n) for n in names], next_token=token)


def streams_page(*names: str | None, token: str | None = None) -> Page:
    return Page(items=[LogStream(name=n) for n in names], next_token=token)


def throttled(operation: str = "get_log_events") -> RateLimited:
    return RateLimited(operation, "ThrottlingException", "Rate exceeded")


def failure(operation: str = "get_log_events") -> LogsApiError:
    return LogsApiError(operation, "ResourceNotFoundException", "The specified log stream does not exist.")


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def fake_throttle(sleeps: list[float]) -> MagicMock:
    """Records each throttle instead of sleeping."""
    return MagicMock(side_effect=lambda: sleeps.append(0.1))
