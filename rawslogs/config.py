import os
import logging
from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.config import Config

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s | %(levelname)s | %(message)s",
)
log = logging.getLogger("rawslogs")

DEFAULT_REGION = "us-east-1"

GROUPS_PAGE_LIMIT = 50
STREAMS_PAGE_LIMIT = 50
EVENTS_PAGE_LIMIT = 10_000

ONE_HOUR_IN_SECONDS = 60 * 60


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning(f"[config] {name}={raw!r} is not an integer; using {default}")
        return default


THROTTLE_DELAY_SECONDS = env_int("RAWSLOGS_THROTTLE_MS", 100) / 1000.0

CONNECT_TIMEOUT = env_int("RAWSLOGS_CONNECT_TIMEOUT", 10)
READ_TIMEOUT = env_int("RAWSLOGS_READ_TIMEOUT", 60)
# total attempts per call, first one included; 1 leaves throttling to the paginator
MAX_ATTEMPTS = env_int("RAWSLOGS_MAX_ATTEMPTS", 1)


@dataclass(frozen=True)
class ClientSettings:
    """
    Everything needed to build a CloudWatch Logs client. The profile is passed
    straight to the boto3 session; nothing here touches os.environ.
    """
    profile: Optional[str] = None
    region: Optional[str] = None
    connect_timeout: int = CONNECT_TIMEOUT
    read_timeout: int = READ_TIMEOUT
    max_attempts: int = MAX_ATTEMPTS

    @classmethod
    def from_env(cls, profile: Optional[str] = None, region: Optional[str] = None) -> "ClientSettings":
        return cls(
            profile=profile or os.getenv("AWS_PROFILE") or None,
            region=region or os.getenv("AWS_REGION") or None,
        )


def make_logs_client(settings: ClientSettings) -> Any:
    session = boto3.session.Session(profile_name=settings.profile)
    region = settings.region or session.region_name or DEFAULT_REGION
    cfg = Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"total_max_attempts": settings.max_attempts, "mode": "standard"},
    )
    log.debug(f"[client] logs client profile={settings.profile} region={region}")
    return session.client("logs", region_name=region, config=cfg)
