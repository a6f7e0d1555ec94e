import enum
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from ..errors import ApiErrorCode
from ..time_source import PlatformTimeSource
from ..utils import to_epoch_seconds, to_iso8601_seconds

logger = logging.getLogger(__name__)

router = APIRouter()


class TimeFormat(enum.Enum):
    """Representations in which the platform time can be returned."""
    ISO_8601 = "iso-8601"
    UNIX = "unix"

    @classmethod
    def parse(cls, value: str) -> Optional["TimeFormat"]:
        try:
            return cls(value.lower())
        except ValueError:
            return None


def handle_get_platform_time(format_param: Optional[str], time_source: PlatformTimeSource) -> tuple[int, dict]:
    """
    Build the response to a 'Get Platform Time' request.

    Args:
        format_param: requested format, matched case-insensitively. Defaults to iso-8601.
        time_source: source of the current platform time

    Returns:
        (status_code, body). 200 with the time keyed by format, or 400 with an error body.
    """
    if format_param is None:
        format_param = TimeFormat.ISO_8601.value

    time_format = TimeFormat.parse(format_param)
    if time_format is None:
        logger.info(f"Rejected 'format' request param [{format_param}]")
        return 400, {
            "code": ApiErrorCode.INVALID_REQUEST_PARAM_VALUE.value,
            "message": f"Invalid 'format' request param [{format_param}].",
        }

    # Read once so both representations refer to the same moment
    current = time_source.get_current_instant()
    if time_format is TimeFormat.ISO_8601:
        body = {"dateTime": to_iso8601_seconds(current)}
    else:
        body = {"epochSeconds": to_epoch_seconds(current)}
    logger.debug(f"Platform time response: {body}")
    return 200, body


def get_time_source(request: Request) -> PlatformTimeSource:
    return request.app.state.time_source


@router.get("/v1/platform-time")
def get_platform_time(
    time_format: str = Query(TimeFormat.ISO_8601.value, alias="format", description="One of iso-8601 or unix."),
    time_source: PlatformTimeSource = Depends(get_time_source),
):
    """Return the platform's current date/time, always in UTC."""
    status_code, body = handle_get_platform_time(time_format, time_source)
    return JSONResponse(status_code=status_code, content=body)
