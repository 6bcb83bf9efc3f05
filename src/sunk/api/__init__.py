"""API client for the Subsonic REST protocol over HTTP."""

from sunk.api.client import Sunk
from sunk.api.errors import (
    AuthenticationError,
    ClientTooOldError,
    DecodeError,
    InvalidNumberError,
    MissingParameterError,
    NotAuthorizedError,
    NotFoundError,
    ProtocolError,
    ServerTooOldError,
    SunkError,
    TransportError,
    TrialExpiredError,
    VersionMismatchError,
)
from sunk.api.protocol import Envelope, EnvelopeError
from sunk.api.query import Params, Query

__all__ = [
    "Sunk",
    "Query",
    "Params",
    "Envelope",
    "EnvelopeError",
    "SunkError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "InvalidNumberError",
    "MissingParameterError",
    "VersionMismatchError",
    "ClientTooOldError",
    "ServerTooOldError",
    "AuthenticationError",
    "NotAuthorizedError",
    "TrialExpiredError",
    "NotFoundError",
]
