"""Wire-level (shadow) schemas and coercion helpers.

Subsonic servers send identifiers and counts as strings (``"id": "42"``)
or, depending on the implementation, as plain integers. Entities are
decoded in two steps:

1. The JSON object is validated against a ``WireModel`` subclass that
   mirrors the literal wire types, with camelCase keys mapped to
   snake_case attributes.
2. The shadow model's ``to_model()`` converts it into the frozen domain
   dataclass, parsing ids and counts with ``parse_uint``.

Any failure in either step raises ``DecodeError``; no partially
populated entity is ever returned.
"""

import re
from typing import Annotated, Any, TypeVar, cast

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictInt,
    StrictStr,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from sunk.api.errors import DecodeError, InvalidNumberError

U64_MAX = 2**64 - 1

_DECIMAL = re.compile(r"[0-9]+")


class WireModel(BaseModel):
    """Base for shadow schemas mirroring the server's JSON objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# An id or count in its literal wire form
WireNumber = StrictStr | StrictInt

ShadowT = TypeVar("ShadowT", bound=WireModel)


def one_or_many(value: Any) -> Any:
    """Wrap a lone object in a list; some servers collapse one-element arrays."""
    if isinstance(value, dict):
        return [value]
    return value


# Nested entity array that may arrive as a lone object
WireList = Annotated[list[ShadowT], BeforeValidator(one_or_many)]


def parse_uint(value: str | int, field: str) -> int:
    """Parse an id or count into an unsigned 64-bit integer.

    Args:
        value: Decimal string or integer as sent by the server.
        field: Wire field name, for error messages.

    Returns:
        The parsed integer.

    Raises:
        InvalidNumberError: If the value is not a decimal integer in u64 range.
    """
    if isinstance(value, bool):
        raise InvalidNumberError(field, value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DECIMAL.fullmatch(value):
        number = int(value)
    else:
        raise InvalidNumberError(field, value)

    if not 0 <= number <= U64_MAX:
        raise InvalidNumberError(field, value)
    return number


def parse_optional_uint(value: str | int | None, field: str) -> int | None:
    """Parse an optional id or count; None stays None."""
    if value is None:
        return None
    return parse_uint(value, field)


def decode(shadow: type[ShadowT], data: Any, entity: str) -> ShadowT:
    """Validate a JSON object against a shadow schema.

    Args:
        shadow: Shadow schema class.
        data: Decoded JSON value.
        entity: Entity name, for error messages.

    Returns:
        The validated shadow model.

    Raises:
        DecodeError: If a required field is missing or has the wrong type.
    """
    try:
        return shadow.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise DecodeError(
            f"Invalid {entity} payload at {location or '<root>'}: {first['msg']}",
            location or None,
        ) from e


def payload_list(payload: Any, key: str) -> list[Any]:
    """Extract a homogeneous list from a container payload.

    List operations answer with a container object, e.g.
    ``{"song": [{...}, {...}]}``. An empty container omits the key.

    Args:
        payload: Unwrapped payload from the dispatcher.
        key: Name of the list inside the container.

    Returns:
        The raw list elements (possibly empty).

    Raises:
        DecodeError: If the payload does not have the expected shape.
    """
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected an object holding {key!r}, got {type(payload).__name__}")

    items = cast(dict[str, Any], payload).get(key)
    if items is None:
        return []
    items = one_or_many(items)
    if not isinstance(items, list):
        raise DecodeError(f"Expected {key!r} to be a list, got {type(items).__name__}", key)
    return cast(list[Any], items)
