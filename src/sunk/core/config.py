"""Connection settings for a Subsonic server."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_NAME = "sunk"
DEFAULT_API_VERSION = "1.16.1"
DEFAULT_TIMEOUT = 10.0

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True, slots=True)
class SunkConfig:
    """Subsonic server connection info.

    Attributes:
        url: Server root URL (e.g. "https://music.example.com").
        username: Account name.
        password: Account password. Never shown in repr.
        client_name: Client identifier sent as ``c``.
        api_version: REST protocol version sent as ``v``.
        token_auth: Use salted token auth instead of the hex password form.
        timeout: HTTP timeout in seconds.
    """

    url: str
    username: str
    password: str = field(default="", repr=False)
    client_name: str = DEFAULT_CLIENT_NAME
    api_version: str = DEFAULT_API_VERSION
    token_auth: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate required settings."""
        if not self.url.strip():
            raise ValueError("Server url must not be empty")
        if not self.username.strip():
            raise ValueError("Username must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    @property
    def base_url(self) -> str:
        """Return the server URL without trailing slash."""
        return self.url.strip().rstrip("/")

    @classmethod
    def from_env(
        cls,
        prefix: str = "SUNK_",
        environ: Mapping[str, str] | None = None,
    ) -> "SunkConfig":
        """Load settings from environment variables.

        Reads ``<prefix>URL``, ``USERNAME``, ``PASSWORD``, ``CLIENT``,
        ``API_VERSION``, ``TOKEN_AUTH`` and ``TIMEOUT``.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValueError: If a required variable is missing or a value is invalid.
        """
        env = os.environ if environ is None else environ

        def require(name: str) -> str:
            value = env.get(prefix + name, "")
            if not value:
                raise ValueError(f"Missing required setting {prefix + name}")
            return value

        token_auth = True
        raw_token_auth = env.get(prefix + "TOKEN_AUTH")
        if raw_token_auth:
            token_auth = _parse_bool(prefix + "TOKEN_AUTH", raw_token_auth)

        timeout = DEFAULT_TIMEOUT
        raw_timeout = env.get(prefix + "TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(f"{prefix}TIMEOUT must be a number, got {raw_timeout!r}") from e

        config = cls(
            url=require("URL"),
            username=require("USERNAME"),
            password=env.get(prefix + "PASSWORD", ""),
            client_name=env.get(prefix + "CLIENT") or DEFAULT_CLIENT_NAME,
            api_version=env.get(prefix + "API_VERSION") or DEFAULT_API_VERSION,
            token_auth=token_auth,
            timeout=timeout,
        )
        logger.debug("Loaded config for %s@%s", config.username, config.base_url)
        return config
