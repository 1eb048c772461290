"""Common types and time helpers shared across models."""

from datetime import UTC, date, datetime, tzinfo
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    return datetime.now(UTC)


def zone(name: str | None) -> tzinfo:
    """Resolve an IANA zone name; ``None`` means the host's local zone."""
    if name is None:
        local = datetime.now().astimezone().tzinfo
        assert local is not None
        return local
    return ZoneInfo(name)


def local_datetime(epoch: float, tz: tzinfo) -> datetime:
    return datetime.fromtimestamp(epoch, tz)


def local_date(epoch: float, tz: tzinfo) -> date:
    return local_datetime(epoch, tz).date()
