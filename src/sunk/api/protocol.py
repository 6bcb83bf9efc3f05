"""Subsonic response envelope types.

Every JSON response is wrapped in a ``subsonic-response`` object:

    {"subsonic-response": {"status": "ok", "version": "1.16.1", "artist": {...}}}
    {"subsonic-response": {"status": "failed", "version": "1.16.1",
                           "error": {"code": 70, "message": "Artist not found"}}}

The payload is the single key that is not envelope metadata.
"""

import logging
from dataclasses import dataclass
from typing import Any, cast

from sunk.api.errors import DecodeError, ProtocolError

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "subsonic-response"

STATUS_OK = "ok"
STATUS_FAILED = "failed"

# Keys that describe the envelope itself rather than the payload
_METADATA_KEYS = frozenset(
    {"status", "version", "type", "serverVersion", "openSubsonic", "error", "xmlns"}
)


@dataclass(frozen=True)
class EnvelopeError:
    """Error object of a failed envelope.

    Attributes:
        code: Subsonic error code.
        message: Server supplied message.
    """

    code: int
    message: str

    def __str__(self) -> str:
        """Return error message representation."""
        return f"[{self.code}] {self.message}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnvelopeError":
        """Create error from JSON dict.

        A code that is not an integer maps to 0 and is appended to the
        message as received.
        """
        raw_code = data.get("code", 0)
        message = str(data.get("message", "Unknown error"))
        try:
            code = int(raw_code)
        except (TypeError, ValueError):
            code = 0
            message = f"{message} (code {raw_code!r})"
        return cls(code=code, message=message)


@dataclass(frozen=True)
class Envelope:
    """A decoded ``subsonic-response`` envelope.

    Attributes:
        status: "ok" or "failed".
        version: REST protocol version spoken by the server.
        server_type: Server implementation (OpenSubsonic servers only).
        server_version: Server implementation version (OpenSubsonic only).
        open_subsonic: Whether the server advertises OpenSubsonic extensions.
        payload: Payload value, or None if the response carries none.
        error: Error data (None if success).
    """

    status: str
    version: str = ""
    server_type: str = ""
    server_version: str = ""
    open_subsonic: bool = False
    payload: Any = None
    error: EnvelopeError | None = None

    @property
    def is_success(self) -> bool:
        """Return True if the envelope indicates success."""
        return self.status == STATUS_OK and self.error is None

    def unwrap(self) -> Any:
        """Return the payload, raising the server error if the call failed.

        Raises:
            ProtocolError: If the envelope reports a failure.
        """
        if not self.is_success:
            raise ProtocolError.from_envelope(self.error or EnvelopeError(0, "Unknown error"))
        return self.payload

    @classmethod
    def from_dict(cls, data: Any) -> "Envelope":
        """Create envelope from a decoded JSON response body.

        Raises:
            DecodeError: If the body is not a Subsonic envelope.
        """
        if not isinstance(data, dict):
            raise DecodeError("Response body is not a JSON object")
        body_raw = cast(dict[str, Any], data).get(ENVELOPE_KEY)
        if not isinstance(body_raw, dict):
            raise DecodeError(f"Response has no {ENVELOPE_KEY!r} object", ENVELOPE_KEY)
        body = cast(dict[str, Any], body_raw)

        status = body.get("status")
        if status not in (STATUS_OK, STATUS_FAILED):
            raise DecodeError(f"Unknown envelope status: {status!r}", "status")

        error: EnvelopeError | None = None
        error_data = body.get("error")
        if isinstance(error_data, dict):
            error = EnvelopeError.from_dict(cast(dict[str, Any], error_data))
        elif status == STATUS_FAILED:
            error = EnvelopeError(0, "Unknown error")

        payload_keys = [key for key in body if key not in _METADATA_KEYS]
        if len(payload_keys) > 1:
            logger.debug("Envelope has several payload keys, using %r", payload_keys[0])

        return cls(
            status=status,
            version=str(body.get("version", "")),
            server_type=str(body.get("type", "")),
            server_version=str(body.get("serverVersion", "")),
            open_subsonic=bool(body.get("openSubsonic", False)),
            payload=body[payload_keys[0]] if payload_keys else None,
            error=error,
        )
