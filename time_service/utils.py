from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_iso8601_seconds(instant: datetime) -> str:
    """Render a UTC instant as ISO-8601, truncated to whole seconds, e.g. 2024-01-01T00:00:00Z."""
    truncated = instant.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None)
    return truncated.isoformat() + "Z"


def to_epoch_seconds(instant: datetime) -> int:
    # Floors, so instants before 1970 with a fractional part round down
    return (instant - EPOCH) // timedelta(seconds=1)
