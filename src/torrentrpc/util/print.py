# torrentrpc - Client library for the Transmission BitTorrent daemon RPC
# Copyright (C) 2025  Anton Larionov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from datetime import datetime, timedelta
from functools import cache

# Transmission reports these ETA values instead of a real duration
ETA_DONE = -1
ETA_UNKNOWN = -2


@cache
def print_size(
    num: int, iec: bool = True, prec: int = 2, suffix: str = ""
) -> str:
    """Format a byte count as a human-readable size string.

    Args:
        num: Number of bytes
        iec: Use 1024-based units (KiB, MiB, ...) instead of 1000-based
            units (kB, MB, ...)
        prec: Digits after the decimal point for scaled values
        suffix: Text appended after the unit (e.g. "/s")

    Returns:
        Formatted string, e.g. "1.50 KiB" or "999 B"
    """
    if iec:
        base, units, end = 1024, "KMGTPEZY", "iB"
    else:
        base, units, end = 1000, "kMGTPEZY", "B"

    if abs(num) < base:
        return f"{num} B{suffix}"

    exp, div = 0, base
    n = abs(num) // base
    while n >= base and exp < len(units) - 1:
        div *= base
        exp += 1
        n //= base

    return f"{num / div:.{prec}f} {units[exp]}{end}{suffix}"


@cache
def print_speed(num: int, iec: bool = True) -> str:
    """Format a number of bytes per second as a speed string."""
    return print_size(num, iec=iec, suffix="/s")


@cache
def print_percent(value: float) -> str:
    """Format a 0..1 fraction as a whole percentage, e.g. "42%"."""
    return f"{value * 100:.0f}%"


@cache
def print_duration(duration: timedelta | None) -> str:
    """Format a duration the way Transmission reports ETAs.

    -1 second means the torrent is done, -2 seconds means the ETA is
    unknown. Other negative durations get a leading "-".
    """
    if duration is None:
        return "-"

    seconds = int(duration.total_seconds())
    if seconds == ETA_DONE:
        return "Done"
    if seconds == ETA_UNKNOWN:
        return "Unknown"

    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)

    intervals = (
        ("d", 86400),  # 60 * 60 * 24
        ("h", 3600),  # 60 * 60
        ("m", 60),
        ("s", 1),
    )
    result = []
    for key, count in intervals:
        value = seconds // count
        if value:
            seconds -= value * count
            result.append(f"{value}{key}")

    return sign + "".join(result) if result else "0s"


def print_time(dt: datetime | None) -> str:
    """Format a timestamp, or "-" when it is unset."""
    if dt is None:
        return "-"
    return dt.strftime("%Y-%m-%d %H:%M:%S")
