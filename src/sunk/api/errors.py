"""Error types raised by the Subsonic client.

Failures fall into three families:
- ``TransportError``: the request never produced a usable HTTP response.
- ``ProtocolError``: the server answered with a failed envelope.
- ``DecodeError``: the response did not match the expected shape.

Reference: http://www.subsonic.org/pages/api.jsp (error codes)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sunk.api.protocol import EnvelopeError


class SunkError(Exception):
    """Base class for all client errors."""


class TransportError(SunkError):
    """Network or HTTP-level failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(SunkError):
    """Response payload could not be converted into the expected entity."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidNumberError(DecodeError):
    """An identifier or count was not a non-negative decimal integer."""

    def __init__(self, field: str, value: object) -> None:
        self.value = value
        super().__init__(f"Field {field!r} is not a valid unsigned integer: {value!r}", field)


class ProtocolError(SunkError):
    """Server reported an application-level failure."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"Subsonic error {code}: {message}")

    @classmethod
    def from_envelope(cls, error: "EnvelopeError") -> "ProtocolError":
        """Build the most specific error for a failed envelope."""
        error_cls = _ERRORS_BY_CODE.get(error.code, ProtocolError)
        return error_cls(error.code, error.message)


class MissingParameterError(ProtocolError):
    """A required parameter is missing (code 10)."""


class VersionMismatchError(ProtocolError):
    """Client and server protocol versions are incompatible."""


class ClientTooOldError(VersionMismatchError):
    """Client must upgrade (code 20)."""


class ServerTooOldError(VersionMismatchError):
    """Server must upgrade (code 30)."""


class AuthenticationError(ProtocolError):
    """Wrong credentials or unsupported authentication mechanism (codes 40-44)."""


class NotAuthorizedError(ProtocolError):
    """User is not authorized for the operation (code 50)."""


class TrialExpiredError(ProtocolError):
    """Server trial period is over (code 60)."""


class NotFoundError(ProtocolError):
    """Requested data was not found (code 70)."""


_ERRORS_BY_CODE: dict[int, type[ProtocolError]] = {
    10: MissingParameterError,
    20: ClientTooOldError,
    30: ServerTooOldError,
    40: AuthenticationError,
    41: AuthenticationError,
    42: AuthenticationError,
    43: AuthenticationError,
    44: AuthenticationError,
    50: NotAuthorizedError,
    60: TrialExpiredError,
    70: NotFoundError,
}
