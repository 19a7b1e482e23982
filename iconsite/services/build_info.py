"""Build info provider: the timestamp stamped into every page footer."""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from iconsite.models.build_info import BuildInfo, BuildTime

BUILD_TIMEZONE = ZoneInfo("CET")


def format_build_time(moment: datetime) -> str:
    """Format *moment* in the build timezone, e.g.
    ``Sunday, October 18, 2026 at 3:04:05 PM GMT+2``.
    """
    local = moment.astimezone(BUILD_TIMEZONE)
    hour = local.hour % 12 or 12
    offset = local.utcoffset()
    offset_hours = int(offset.total_seconds() // 3600) if offset else 0
    zone = f"GMT{offset_hours:+d}" if offset_hours else "GMT"
    return (
        f"{local:%A}, {local:%B} {local.day}, {local.year} "
        f"at {hour}:{local:%M:%S} {local:%p} {zone}"
    )


def get_build_info(now: Optional[datetime] = None) -> BuildInfo:
    """Return the build info for a build starting at *now* (default: current time)."""
    moment = now or datetime.now(timezone.utc)
    return BuildInfo(time=BuildTime(formatted=format_build_time(moment)))
