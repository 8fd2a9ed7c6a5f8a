from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class LogGroup:
    name: Optional[str]

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "LogGroup":
        return cls(name=item.get("logGroupName"))


@dataclass(frozen=True)
class LogStream:
    name: Optional[str]

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "LogStream":
        return cls(name=item.get("logStreamName"))


@dataclass(frozen=True)
class LogEvent:
    """
    One OutputLogEvent. Any field may be missing in what the API returns;
    only complete events are ever written out.
    """
    ingestion_time: Optional[int] = None
    message: Optional[str] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "LogEvent":
        return cls(
            ingestion_time=item.get("ingestionTime"),
            message=item.get("message"),
            timestamp=item.get("timestamp"),
        )

    @property
    def is_complete(self) -> bool:
        return None not in (self.ingestion_time, self.message, self.timestamp)

    def format(self) -> str:
        return f"{self.ingestion_time} {self.message} {self.timestamp}"


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    next_token: Optional[str] = None


@dataclass(frozen=True)
class TimeWindow:
    """Epoch seconds. start <= end is the caller's business."""
    start: int
    end: int
    now: int
