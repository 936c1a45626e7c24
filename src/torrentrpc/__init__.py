"""Client library for the Transmission BitTorrent daemon RPC.

The print_* helpers render sizes, speeds, percentages, ETAs and
timestamps from decoded torrents for display.
"""

from .client import Client
from .errors import (
    ClientError,
    InvalidArgumentsError,
    InvalidBoolError,
    InvalidDurationError,
    InvalidEncryptionError,
    InvalidEnumError,
    InvalidIdentifierError,
    InvalidModeError,
    InvalidPriorityError,
    InvalidResponseError,
    InvalidScalarError,
    InvalidStateError,
    InvalidStatusError,
    InvalidTimeError,
    MismatchedTagError,
    RequestCancelledError,
    RequestFailedError,
    SingleTorrentError,
    UnauthorizedError,
)
from .factory import create_client
from .ids import RECENTLY_ACTIVE, TorrentHash
from .models import (
    DEFAULT_TORRENT_GET_FIELDS,
    Session,
    SessionStats,
    Torrent,
    TorrentAddResponse,
    TorrentGetResponse,
)
from .request import (
    SessionSetRequest,
    TorrentAddRequest,
    TorrentGetRequest,
    TorrentSetRequest,
)
from .transport import Transport
from .types import Encryption, Mode, Priority, State, Status
from .util.print import (
    print_duration,
    print_percent,
    print_size,
    print_speed,
    print_time,
)
from .version import __version__

__all__ = [
    "Client",
    "ClientError",
    "DEFAULT_TORRENT_GET_FIELDS",
    "Encryption",
    "InvalidArgumentsError",
    "InvalidBoolError",
    "InvalidDurationError",
    "InvalidEncryptionError",
    "InvalidEnumError",
    "InvalidIdentifierError",
    "InvalidModeError",
    "InvalidPriorityError",
    "InvalidResponseError",
    "InvalidScalarError",
    "InvalidStateError",
    "InvalidStatusError",
    "InvalidTimeError",
    "MismatchedTagError",
    "Mode",
    "Priority",
    "RECENTLY_ACTIVE",
    "RequestCancelledError",
    "RequestFailedError",
    "Session",
    "SessionSetRequest",
    "SessionStats",
    "SingleTorrentError",
    "State",
    "Status",
    "Torrent",
    "TorrentAddRequest",
    "TorrentAddResponse",
    "TorrentGetRequest",
    "TorrentGetResponse",
    "TorrentHash",
    "TorrentSetRequest",
    "Transport",
    "UnauthorizedError",
    "__version__",
    "create_client",
    "print_duration",
    "print_percent",
    "print_size",
    "print_speed",
    "print_time",
]
