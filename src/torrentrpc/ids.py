"""Torrent identifier list validation.

Every torrent method accepts a list of identifiers mixing integer ids,
hash strings and the "recently-active" keyword. The list is normalised
here before it is put on the wire.
"""

from typing import Any

from .errors import InvalidIdentifierError
from .util.misc import is_hex

RECENTLY_ACTIVE = "recently-active"

HASH_LENGTH = 40
SHORT_HASH_LENGTH = 7

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TorrentId = int | str


class TorrentHash(str):
    """A torrent info hash, validated and lowercased on construction.

    Accepts a 40-character hex string, a 7-character short hash, or the
    same forms as ASCII bytes.
    """

    def __new__(cls, value: str | bytes | bytearray) -> "TorrentHash":
        if isinstance(value, (bytes, bytearray)):
            try:
                value = bytes(value).decode("ascii")
            except UnicodeDecodeError:
                raise InvalidIdentifierError(value) from None

        if not isinstance(value, str):
            raise InvalidIdentifierError(value)

        if len(value) not in (HASH_LENGTH, SHORT_HASH_LENGTH):
            raise InvalidIdentifierError(value)

        if not is_hex(value):
            raise InvalidIdentifierError(value)

        return super().__new__(cls, value.lower())

    @property
    def is_short(self) -> bool:
        return len(self) == SHORT_HASH_LENGTH


def check_identifier(value: Any) -> TorrentId:
    """Normalise a single torrent identifier.

    Args:
        value: An int (signed 64-bit range), a hash as str or bytes,
            or the "recently-active" keyword

    Returns:
        The int id, the lowercased hash string, or "recently-active"

    Raises:
        InvalidIdentifierError: If the value is none of the above
    """
    match value:
        case bool():
            raise InvalidIdentifierError(value)
        case int():
            if not INT64_MIN <= value <= INT64_MAX:
                raise InvalidIdentifierError(value)
            return value
        case str() if value == RECENTLY_ACTIVE:
            return RECENTLY_ACTIVE
        case str() | bytes() | bytearray():
            return str(TorrentHash(value))

    raise InvalidIdentifierError(value)


def check_identifier_list(*ids: Any) -> list[TorrentId] | None:
    """Normalise a torrent identifier list.

    Returns:
        The normalised list, or None for an empty input, meaning the
        "ids" argument must be omitted (all torrents)

    Raises:
        InvalidIdentifierError: If any element is not a valid identifier
    """
    if not ids:
        return None

    return [check_identifier(value) for value in ids]
