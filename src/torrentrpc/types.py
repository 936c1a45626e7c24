"""Enumerated domains and scalar conversions of the Transmission RPC.

Decoders in this module take raw JSON values (as produced by ``json.loads``)
and either return the Python value or raise the matching error from
:mod:`torrentrpc.errors`.
"""

import base64
from datetime import datetime, timedelta
from enum import Enum, IntEnum
from typing import Any

from .errors import (
    InvalidBoolError,
    InvalidDurationError,
    InvalidEncryptionError,
    InvalidEnumError,
    InvalidModeError,
    InvalidPriorityError,
    InvalidStateError,
    InvalidStatusError,
    InvalidTimeError,
)


class Status(IntEnum):
    """Torrent activity status (tr_torrent_activity)."""

    STOPPED = 0
    CHECK_WAIT = 1
    CHECKING = 2
    DOWNLOAD_WAIT = 3
    DOWNLOADING = 4
    SEED_WAIT = 5
    SEEDING = 6


class Priority(IntEnum):
    """File and bandwidth priority (tr_priority_t)."""

    LOW = -1
    NORMAL = 0
    HIGH = 1


class Mode(IntEnum):
    """Seeding idle/ratio limit mode (tr_idlelimit, tr_ratiolimit)."""

    GLOBAL = 0
    SINGLE = 1
    UNLIMITED = 2


class State(IntEnum):
    """Tracker announce/scrape state (tr_tracker_state)."""

    INACTIVE = 0
    WAITING = 1
    QUEUED = 2
    ACTIVE = 3


class Encryption(str, Enum):
    """Session peer encryption preference."""

    REQUIRED = "required"
    PREFERRED = "preferred"
    TOLERATED = "tolerated"

    def __str__(self) -> str:
        return self.value


def _is_int(value: Any) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_int_enum(
    cls: type[IntEnum], value: Any, error: type[InvalidEnumError]
) -> IntEnum:
    if not _is_int(value):
        raise error(value)
    try:
        return cls(value)
    except ValueError:
        raise error(value) from None


def decode_status(value: Any) -> Status:
    return _decode_int_enum(Status, value, InvalidStatusError)


def decode_priority(value: Any) -> Priority:
    return _decode_int_enum(Priority, value, InvalidPriorityError)


def decode_mode(value: Any) -> Mode:
    return _decode_int_enum(Mode, value, InvalidModeError)


def decode_state(value: Any) -> State:
    return _decode_int_enum(State, value, InvalidStateError)


def decode_encryption(value: Any) -> Encryption:
    if not isinstance(value, str):
        raise InvalidEncryptionError(value)
    try:
        return Encryption(value)
    except ValueError:
        raise InvalidEncryptionError(value) from None


def decode_time(value: Any) -> datetime | None:
    """Decode Unix seconds; 0 means the time is not set."""
    if not _is_int(value):
        raise InvalidTimeError(value)
    if value == 0:
        return None
    try:
        return datetime.fromtimestamp(value)
    except (OverflowError, OSError, ValueError):
        raise InvalidTimeError(value) from None


def decode_duration(value: Any) -> timedelta:
    """Decode a number of seconds.

    Negative values are kept as-is: -1 and -2 are Transmission's
    "done" and "unknown" ETA markers.
    """
    if not _is_int(value):
        raise InvalidDurationError(value)
    try:
        return timedelta(seconds=value)
    except OverflowError:
        raise InvalidDurationError(value) from None


def decode_bool(value: Any) -> bool:
    """Decode a JSON boolean, or an integer where non-zero means true."""
    if isinstance(value, bool):
        return value
    if _is_int(value):
        return value != 0
    raise InvalidBoolError(value)


def encode_value(value: Any) -> Any:
    """Convert a Python argument value into its JSON wire form."""
    if hasattr(value, "to_wire"):
        return value.to_wire()

    match value:
        case Enum():
            return value.value
        case datetime():
            return int(value.timestamp())
        case timedelta():
            return int(value.total_seconds())
        case bytes() | bytearray():
            return base64.b64encode(value).decode("ascii")
        case list() | tuple():
            return [encode_value(v) for v in value]
        case dict():
            return {k: encode_value(v) for k, v in value.items()}
    return value
