"""Exceptions raised by the Transmission RPC client."""

from typing import Any


class ClientError(Exception):
    """Base exception for all client errors."""

    pass


class InvalidIdentifierError(ClientError):
    """A torrent identifier is not an id, a hash, or "recently-active"."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid torrent identifier: {value!r}")


class InvalidEnumError(ClientError):
    """A decoded value lies outside its enumerated domain."""

    kind = "enum"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid {self.kind}: {value!r}")


class InvalidStatusError(InvalidEnumError):
    kind = "status"


class InvalidPriorityError(InvalidEnumError):
    kind = "priority"


class InvalidModeError(InvalidEnumError):
    kind = "mode"


class InvalidStateError(InvalidEnumError):
    kind = "state"


class InvalidEncryptionError(InvalidEnumError):
    kind = "encryption"


class InvalidScalarError(ClientError):
    """A time, duration or bool value could not be decoded."""

    kind = "scalar"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid {self.kind}: {value!r}")


class InvalidTimeError(InvalidScalarError):
    kind = "time"


class InvalidDurationError(InvalidScalarError):
    kind = "duration"


class InvalidBoolError(InvalidScalarError):
    kind = "bool"


class InvalidArgumentsError(ClientError):
    """Request arguments cannot be encoded as strict JSON."""

    pass


class MismatchedTagError(ClientError):
    """The response envelope carries a different tag than the request."""

    def __init__(self, request_tag: int, response_tag: int) -> None:
        self.request_tag = request_tag
        self.response_tag = response_tag
        super().__init__(
            f"Mismatched request and response tags: "
            f"{request_tag} != {response_tag}"
        )


class SingleTorrentError(ClientError):
    """torrent-rename-path was given other than exactly one identifier."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            "torrent-rename-path can only be used with one torrent "
            f"identifier, got {count}"
        )


class RequestFailedError(ClientError):
    """The RPC call did not complete with HTTP 200 and result "success".

    Attributes:
        status: Final HTTP status code, if a response was received
        result: The server's result text, if an envelope was decoded
    """

    def __init__(
        self,
        message: str = "Request failed",
        status: int | None = None,
        result: str | None = None,
    ) -> None:
        self.status = status
        self.result = result
        super().__init__(message)


class UnauthorizedError(RequestFailedError):
    """The server rejected the configured credentials (HTTP 401)."""

    def __init__(self) -> None:
        super().__init__("Unauthorized user", status=401)


class InvalidResponseError(RequestFailedError):
    """The response body is not a valid RPC envelope."""

    pass


class RequestCancelledError(ClientError):
    """The caller cancelled the call before it completed."""

    def __init__(self) -> None:
        super().__init__("Request cancelled")
