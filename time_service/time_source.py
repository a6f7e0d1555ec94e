import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional, Protocol

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

UTC_ZONE_KEYS = {"UTC", "Etc/UTC", "Z"}


class Clock(Protocol):
    """Anything that can tell the current time in a known zone."""

    zone: tzinfo

    def now(self) -> datetime: ...


class SystemClock:
    """The node's wall clock, reporting in UTC."""

    zone = timezone.utc

    def now(self) -> datetime:
        return datetime.now(self.zone)


class FixedClock:
    """A clock stuck at a single instant. Used by tests and by fixed-instant startup config."""

    def __init__(self, instant: datetime, zone: tzinfo = timezone.utc):
        if instant.tzinfo is None:
            raise InvalidConfiguration(f"Fixed instant [{instant.isoformat()}] must carry a UTC offset.")
        self.instant = instant
        self.zone = zone

    def now(self) -> datetime:
        return self.instant.astimezone(self.zone)


SYSTEM_CLOCK = SystemClock()


def zone_name(zone: tzinfo) -> str:
    return getattr(zone, "key", None) or str(zone)


def is_utc(zone: Optional[tzinfo]) -> bool:
    if zone is None:
        return False
    if zone == timezone.utc:
        return True
    return getattr(zone, "key", None) in UTC_ZONE_KEYS


class PlatformTimeSource:
    """
    Supplies the platform's official current date/time, always in UTC.

    By default the node's system clock is used. A different clock can be
    supplied, e.g. a FixedClock where a static time is needed, but it must be
    configured with the UTC time zone.
    """

    def __init__(self, clock: Clock = SYSTEM_CLOCK):
        if clock is None:
            raise InvalidConfiguration("Arg 'clock' must not be None.")
        zone = getattr(clock, "zone", None)
        if not is_utc(zone):
            shown = zone_name(zone) if zone is not None else None
            raise InvalidConfiguration(f"Arg 'clock' must use a time zone of UTC, not [{shown}].")
        self.clock = clock

    def get_current_instant(self) -> datetime:
        return self.clock.now()


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant such as 2024-01-01T00:00:00Z into an aware UTC datetime."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidConfiguration(f"Invalid fixed instant [{value}]: {e}") from e
    if parsed.tzinfo is None:
        raise InvalidConfiguration(f"Fixed instant [{value}] must carry a UTC offset.")
    return parsed.astimezone(timezone.utc)


def build_time_source(fixed_instant: Optional[str] = None) -> PlatformTimeSource:
    """Create the time source the service runs with, from startup configuration."""
    if fixed_instant:
        instant = parse_instant(fixed_instant)
        logger.info(f"Using fixed platform time {instant.isoformat()}")
        return PlatformTimeSource(FixedClock(instant))
    logger.info("Using system clock for platform time")
    return PlatformTimeSource()
