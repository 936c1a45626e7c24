"""JSON-RPC envelope encoding and decoding.

Request envelope::

    {"method": "torrent-get", "arguments": {...}, "tag": 7}

Response envelope::

    {"result": "success", "arguments": {...}, "tag": 7}
"""

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidArgumentsError, InvalidResponseError

RESULT_SUCCESS = "success"

RESPONSE_KEYS = frozenset({"result", "arguments", "tag"})


@dataclass(frozen=True)
class ResponseEnvelope:
    """Decoded response envelope."""

    result: str
    arguments: Any = field(default_factory=dict)
    tag: int | None = None

    @property
    def success(self) -> bool:
        return self.result == RESULT_SUCCESS


def encode_request(method: str, arguments: Any, tag: int) -> bytes:
    """Encode a request envelope as UTF-8 JSON.

    The "arguments" key is left out only when arguments is None; an empty
    mapping is still sent.

    Raises:
        InvalidArgumentsError: If the arguments hold NaN, infinity or a
            value JSON cannot represent
    """
    if not method:
        raise ValueError("RPC method name must not be empty")

    envelope: dict[str, Any] = {"method": method}
    if arguments is not None:
        envelope["arguments"] = arguments
    envelope["tag"] = tag

    try:
        body = json.dumps(envelope, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentsError(
            f"Cannot encode {method} arguments: {e}"
        ) from e
    return body.encode("utf-8")


def decode_response(body: bytes | str) -> ResponseEnvelope:
    """Decode a response envelope.

    Integers are decoded exactly (Python ints do not lose precision on
    64-bit ids). Unknown top-level keys are rejected.

    Raises:
        InvalidResponseError: If the body is not a valid envelope
    """
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidResponseError(f"Invalid response body: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidResponseError(
            f"Invalid response envelope: expected object, "
            f"got {type(payload).__name__}"
        )

    unknown = payload.keys() - RESPONSE_KEYS
    if unknown:
        raise InvalidResponseError(
            f"Unknown response envelope keys: {', '.join(sorted(unknown))}"
        )

    result = payload.get("result")
    if not isinstance(result, str):
        raise InvalidResponseError(f"Invalid response result: {result!r}")

    tag = payload.get("tag")
    if tag is not None and (not isinstance(tag, int) or isinstance(tag, bool)):
        raise InvalidResponseError(f"Invalid response tag: {tag!r}")

    arguments = payload.get("arguments")
    if arguments is None:
        arguments = {}

    return ResponseEnvelope(result=result, arguments=arguments, tag=tag)
