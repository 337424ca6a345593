"""Popup formatting - Pure functions.

This module formats earthquake data into popup markup for map markers.
All functions are pure with no side effects.
"""

from datetime import datetime
from html import escape
from zoneinfo import ZoneInfo

from quake_map.core.earthquake import Earthquake


def _format_number(value: float) -> str:
    """Render the shortest exact form, without a trailing ".0" (7.0 -> "7")."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_local_time(time_ms: int, tz: str | None = None) -> str:
    """Format an epoch-millisecond timestamp as a local date/time string.

    Pure function. Output follows the en-US locale layout,
    e.g. "12/5/2024, 10:44:21 AM".

    Args:
        time_ms: Milliseconds since the epoch
        tz: IANA timezone name; None uses the system local timezone

    Returns:
        Formatted date/time string
    """
    if tz is None:
        local = datetime.fromtimestamp(time_ms / 1000).astimezone()
    else:
        local = datetime.fromtimestamp(time_ms / 1000, tz=ZoneInfo(tz))

    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local:%M}:{local:%S} {meridiem}"
    )


def format_popup(earthquake: Earthquake, tz: str | None = None) -> str:
    """Format an earthquake as popup HTML.

    Pure function. Depth is the raw coordinate value, not the color bucket.

    Args:
        earthquake: Earthquake to format
        tz: IANA timezone name for the time line (None for system local)

    Returns:
        HTML fragment
    """
    lines = [
        f"<strong>Location:</strong> {escape(earthquake.place)}<br>",
        f"<strong>Magnitude:</strong> {_format_number(earthquake.magnitude)}<br>",
        f"<strong>Depth:</strong> {_format_number(earthquake.depth_km)} km<br>",
        f"<strong>Time:</strong> {format_local_time(earthquake.time_ms, tz)}<br>",
        f"<strong>Status:</strong> {escape(earthquake.status)}<br>",
    ]

    if earthquake.tsunami:
        lines.append("<strong>Tsunami:</strong> Warning Issued<br>")

    lines.append(
        f'<a href="{escape(earthquake.url, quote=True)}" target="_blank">More details</a>'
    )

    return "\n".join(lines)
