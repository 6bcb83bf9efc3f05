"""Subsonic REST API client over HTTP.

Every operation is a GET to ``<server>/rest/<operation>`` carrying the
authentication parameters and ``f=json`` in the query string. JSON
responses are wrapped in a ``subsonic-response`` envelope; binary
operations (cover art, streams) return raw bytes on success and an
envelope on failure.
"""

import hashlib
import logging
import secrets
from typing import Any, Self

import httpx

from sunk.api.errors import DecodeError, ProtocolError, TransportError
from sunk.api.protocol import Envelope, EnvelopeError
from sunk.api.query import Params
from sunk.core.config import (
    DEFAULT_API_VERSION,
    DEFAULT_CLIENT_NAME,
    DEFAULT_TIMEOUT,
    SunkConfig,
)

logger = logging.getLogger(__name__)

RESPONSE_FORMAT = "json"

_SALT_BYTES = 6

# Content types a binary operation uses when it answers with an envelope
_JSON_CONTENT_TYPES = ("application/json", "text/json")
_XML_CONTENT_TYPES = ("text/xml", "application/xml")


def make_token(password: str, salt: str) -> str:
    """Return the Subsonic auth token ``md5(password + salt)``."""
    return hashlib.md5((password + salt).encode("utf-8")).hexdigest()  # noqa: S324


def encode_password(password: str) -> str:
    """Return the legacy ``enc:`` hex form of a password."""
    return "enc:" + password.encode("utf-8").hex()


def _envelope_error(response: httpx.Response) -> EnvelopeError | None:
    """Return the error of a failed envelope in an HTTP error response, if any."""
    try:
        envelope = Envelope.from_dict(response.json())
    except (ValueError, DecodeError):
        return None
    if envelope.is_success:
        return None
    return envelope.error


class Sunk:
    """Synchronous client for the Subsonic REST API.

    One call performs exactly one HTTP round trip; nothing is retried.
    An instance is not reentrant, callers sharing one between threads
    must serialize access.

    Example:
        with Sunk("https://music.example.com", "alice", "secret") as client:
            client.ping()
            artist = get_artist(client, 1)
    """

    def __init__(
        self,
        url: str,
        username: str,
        password: str = "",
        *,
        client_name: str = DEFAULT_CLIENT_NAME,
        api_version: str = DEFAULT_API_VERSION,
        token_auth: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Server root URL.
            username: Account name.
            password: Account password.
            client_name: Client identifier sent as ``c``.
            api_version: REST protocol version sent as ``v``.
            token_auth: Use salted token auth (``t``/``s``) instead of ``p``.
            timeout: HTTP timeout in seconds. Ignored when ``http_client`` is given.
            http_client: Preconfigured httpx client, used with its own timeout.
                Not closed by ``close()``.
        """
        self._base_url = url.strip().rstrip("/")
        self._username = username
        self._password = password
        self._client_name = client_name
        self._api_version = api_version
        self._token_auth = token_auth
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout, follow_redirects=True)

        # Filled in by ping()
        self.server_version: str = ""
        self.server_type: str = ""
        self.open_subsonic: bool = False

    @classmethod
    def from_config(cls, config: SunkConfig, http_client: httpx.Client | None = None) -> Self:
        """Create a client from connection settings."""
        return cls(
            config.base_url,
            config.username,
            config.password,
            client_name=config.client_name,
            api_version=config.api_version,
            token_auth=config.token_auth,
            timeout=config.timeout,
            http_client=http_client,
        )

    @property
    def url(self) -> str:
        """Return server root URL."""
        return self._base_url

    @property
    def username(self) -> str:
        """Return account name."""
        return self._username

    @property
    def api_version(self) -> str:
        """Return REST protocol version requested."""
        return self._api_version

    def __enter__(self) -> Self:
        """Enter context."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context (close)."""
        self.close()

    def close(self) -> None:
        """Release the HTTP connection pool if this client created it."""
        if self._owns_http:
            self._http.close()

    def _auth_params(self) -> list[tuple[str, str]]:
        """Return authentication and protocol parameters for one request."""
        params = [
            ("u", self._username),
            ("v", self._api_version),
            ("c", self._client_name),
            ("f", RESPONSE_FORMAT),
        ]
        if self._token_auth:
            salt = secrets.token_hex(_SALT_BYTES)
            params += [("t", make_token(self._password, salt)), ("s", salt)]
        else:
            params.append(("p", encode_password(self._password)))
        return params

    def _send(self, operation: str, params: Params | None) -> httpx.Response:
        """Send one request and return the HTTP response.

        Raises:
            TransportError: On connection failure, timeout or non-2xx status.
            ProtocolError: If a non-2xx response carries a failed envelope.
        """
        url = f"{self._base_url}/rest/{operation}"
        # Caller params only; auth params hold secrets
        logger.debug("Subsonic request: %s %s", operation, params or ())

        try:
            response = self._http.get(url, params=[*self._auth_params(), *(params or ())])
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error = _envelope_error(e.response)
            if error is not None:
                logger.warning("Subsonic %s failed with HTTP %d: %s", operation, status, error)
                raise ProtocolError.from_envelope(error) from e
            raise TransportError(f"{operation} failed with HTTP {status}", status) from e
        except httpx.TimeoutException as e:
            raise TransportError(f"{operation} timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{operation} failed: {e}") from e

        return response

    def _envelope(self, operation: str, response: httpx.Response) -> Envelope:
        """Decode the response body into an envelope.

        Raises:
            DecodeError: If the body is not a JSON Subsonic envelope.
        """
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"{operation} returned invalid JSON") from e

        envelope = Envelope.from_dict(data)
        if not envelope.is_success:
            logger.warning("Subsonic %s failed: %s", operation, envelope.error)
        return envelope

    def get(self, operation: str, params: Params | None = None) -> Any:
        """Call a JSON operation.

        Args:
            operation: Operation name (e.g. "getArtist").
            params: Operation parameters from ``Query.build()``.

        Returns:
            The unwrapped payload, or None for operations without one.

        Raises:
            TransportError: If the request fails at the HTTP level.
            ProtocolError: If the server reports a failure.
            DecodeError: If the response is not a valid envelope.
        """
        response = self._send(operation, params)
        return self._envelope(operation, response).unwrap()

    def get_bytes(self, operation: str, params: Params | None = None) -> bytes:
        """Call a binary operation.

        Args:
            operation: Operation name (e.g. "getCoverArt").
            params: Operation parameters from ``Query.build()``.

        Returns:
            Response body, unmodified.

        Raises:
            TransportError: If the request fails at the HTTP level.
            ProtocolError: If the server answers with a failed envelope.
            DecodeError: If the server answers with an unexpected document.
        """
        response = self._send(operation, params)
        content_type = response.headers.get("content-type", "").lower()

        if content_type.startswith(_JSON_CONTENT_TYPES):
            self._envelope(operation, response).unwrap()
            raise DecodeError(f"{operation} returned a JSON document instead of binary data")
        if content_type.startswith(_XML_CONTENT_TYPES):
            raise DecodeError(f"{operation} returned an XML document instead of binary data")

        logger.debug("Subsonic %s returned %d bytes", operation, len(response.content))
        return response.content

    def ping(self) -> bool:
        """Check connectivity and credentials.

        Records ``server_version``, ``server_type`` and ``open_subsonic``.

        Returns:
            True on success.

        Raises:
            TransportError: If the server is unreachable.
            ProtocolError: If credentials or version are rejected.
        """
        response = self._send("ping", None)
        envelope = self._envelope("ping", response)
        envelope.unwrap()

        self.server_version = envelope.server_version or envelope.version
        self.server_type = envelope.server_type
        self.open_subsonic = envelope.open_subsonic
        logger.info(
            "Connected to %s (%s %s)",
            self._base_url,
            self.server_type or "subsonic",
            self.server_version,
        )
        return True
