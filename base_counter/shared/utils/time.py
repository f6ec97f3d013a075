from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today_str(now: datetime | None = None) -> str:
    return (now or utcnow()).date().isoformat()
