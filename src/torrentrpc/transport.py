"""HTTP transport for the Transmission RPC.

Protocol documentation:
https://github.com/transmission/transmission/blob/main/docs/rpc-spec.md

Every call is a POST of a JSON envelope to a single URL. The daemon
protects the endpoint with an anti-CSRF token: a request without the
current token is answered with HTTP 409 and the token in the
X-Transmission-Session-Id header. The transport caches the token and
retries, so the first call of a client normally takes two attempts.
"""

import itertools
import threading
from threading import Event
from typing import Any, Callable
from urllib.parse import unquote, urlsplit, urlunsplit

import requests

from .envelope import decode_response, encode_request
from .errors import (
    MismatchedTagError,
    RequestCancelledError,
    RequestFailedError,
    UnauthorizedError,
)
from .util.log import get_logger, log_time
from .version import __version__

logger = get_logger()

CSRF_HEADER = "X-Transmission-Session-Id"

DEFAULT_HOST = "localhost:9091"
DEFAULT_PATH = "/transmission/rpc/"
DEFAULT_USERNAME = "transmission"
DEFAULT_PASSWORD = "transmission"
DEFAULT_RETRIES = 3
DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = f"torrentrpc/{__version__}"

Credentials = tuple[str, str]


def build_url(
    url: str | None = None, host: str | None = None
) -> tuple[str, Credentials | None]:
    """Resolve the RPC endpoint and the credentials embedded in it.

    A complete url wins over host. A host ("[user:pass@]name:port") is
    expanded to http://<host>/transmission/rpc/. With neither, the
    daemon defaults are used: localhost:9091 as transmission:transmission.

    Returns:
        The URL with any userinfo removed, and the (user, password) pair
        taken from the userinfo, or None
    """
    if not url:
        if not host:
            host = f"{DEFAULT_USERNAME}:{DEFAULT_PASSWORD}@{DEFAULT_HOST}"
        url = f"http://{host}{DEFAULT_PATH}"

    parts = urlsplit(url)
    if parts.username is None:
        return url, None

    netloc = parts.netloc.rpartition("@")[2]
    credentials = (unquote(parts.username), unquote(parts.password or ""))
    return urlunsplit(parts._replace(netloc=netloc)), credentials


class Transport:
    """Sends RPC envelopes and handles the CSRF token, retries and auth.

    A transport is safe to share between threads. The tag counter and
    the cached CSRF token are the only mutable state; each has its own
    lock. The HTTP configuration is fixed at construction.
    """

    def __init__(
        self,
        url: str | None = None,
        host: str | None = None,
        username: str | None = None,
        password: str | None = None,
        csrf: str | None = None,
        retries: int = DEFAULT_RETRIES,
        timeout: float | None = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        credential_fallback: Credentials | None = None,
        session: requests.Session | None = None,
        log_bodies: bool = False,
    ) -> None:
        """Create a transport.

        Args:
            url: Complete RPC URL, overrides host
            host: Host shorthand, e.g. "user:pass@localhost:9091"
            username: User name, overrides userinfo from url or host
            password: Password, overrides userinfo from url or host
            csrf: CSRF token to start with
            retries: Attempts allowed after the first one
            timeout: Seconds each network attempt may take
            user_agent: User-Agent header value
            credential_fallback: (user, password) to switch to after
                the daemon answers 401
            session: HTTP session to send requests with
            log_bodies: Log request and response bodies at DEBUG
        """
        if retries < 0:
            raise ValueError(f"retries must not be negative: {retries}")

        self._url, auth = build_url(url, host)
        if username is not None or password is not None:
            auth = (username or "", password or "")

        self._auth = auth
        self._fallback = credential_fallback
        self._retries = retries
        self._timeout = timeout
        self._user_agent = user_agent
        self._log_bodies = log_bodies
        self._owns_session = session is None
        self._session = session or requests.Session()

        self._tags = itertools.count(1)
        self._tag_lock = threading.Lock()

        self._csrf = csrf or None
        self._csrf_lock = threading.Lock()
        self._auth_lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def retries(self) -> int:
        return self._retries

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @property
    def csrf(self) -> str | None:
        """The most recent CSRF token, or None before the first one."""
        with self._csrf_lock:
            return self._csrf

    def close(self) -> None:
        """Close the HTTP session, unless it was passed in by the caller."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @log_time
    def do(
        self,
        method: str,
        arguments: Any = None,
        decode: Callable[[Any], Any] | None = None,
        *,
        cancel: Event | None = None,
    ) -> Any:
        """Call an RPC method.

        The request body is encoded once and resent unchanged on retry.
        A 409 answer is retried with the token it carried; a 401 answer
        is retried once with the fallback credentials, if configured.
        Any other status ends the attempts.

        Args:
            method: RPC method name
            arguments: JSON-encodable arguments; None omits the key
            decode: Converts the response arguments into the result
            cancel: Event checked before and after every attempt

        Returns:
            decode(arguments) of the response, or None without decode

        Raises:
            InvalidArgumentsError: If arguments are not encodable as JSON
            RequestCancelledError: If cancel is set before an attempt or
                while one is in flight
            UnauthorizedError: If the daemon rejects the credentials
            RequestFailedError: On network failure, a non-200 status
                after the last attempt, or a result other than "success"
            MismatchedTagError: If the response tag differs
        """
        tag = self._next_tag()
        body = encode_request(method, arguments, tag)
        if self._log_bodies:
            logger.debug(f"Request body: {body.decode('utf-8')}")

        for attempt in range(1, self._retries + 2):
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError()

            logger.debug(f"Sending {method} (tag {tag}, attempt {attempt})")

            auth = self._current_auth()
            try:
                response = self._session.post(
                    self._url,
                    data=body,
                    headers=self._headers(),
                    auth=auth,
                    timeout=self._timeout,
                )
            except requests.exceptions.RequestException as e:
                raise RequestFailedError(f"Request failed: {e}") from e

            if cancel is not None and cancel.is_set():
                raise RequestCancelledError()

            token = response.headers.get(CSRF_HEADER)
            if token:
                self._set_csrf(token)

            if response.status_code == 409:
                continue
            if response.status_code == 401 and self._use_fallback(auth):
                continue
            break

        status = response.status_code
        if self._log_bodies:
            logger.debug(f"Response body ({status}): {response.text}")

        if status == 401:
            raise UnauthorizedError()
        if status != 200:
            raise RequestFailedError(
                f"Request failed: HTTP {status}", status=status
            )

        envelope = decode_response(response.content)
        if envelope.tag is not None and envelope.tag != tag:
            raise MismatchedTagError(tag, envelope.tag)
        if not envelope.success:
            raise RequestFailedError(
                f"Request failed: {envelope.result}",
                status=status,
                result=envelope.result,
            )

        if decode is None:
            return None
        return decode(envelope.arguments)

    def _next_tag(self) -> int:
        with self._tag_lock:
            return next(self._tags)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
        }
        token = self.csrf
        if token:
            headers[CSRF_HEADER] = token
        return headers

    def _set_csrf(self, token: str) -> None:
        with self._csrf_lock:
            if token != self._csrf:
                logger.debug(f"CSRF token updated: {token}")
            self._csrf = token

    def _current_auth(self) -> Credentials | None:
        with self._auth_lock:
            return self._auth

    def _use_fallback(self, rejected: Credentials | None) -> bool:
        """Switch to the fallback credentials after a 401.

        Returns False when there is no fallback or it was the one
        rejected.
        """
        with self._auth_lock:
            if self._fallback is None or rejected == self._fallback:
                return False
            if self._auth != self._fallback:
                logger.debug("Unauthorized, switching to fallback credentials")
                self._auth = self._fallback
            return True
