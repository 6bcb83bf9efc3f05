"""Query parameter builder for Subsonic requests.

Subsonic operations take their arguments as URL query parameters. Optional
arguments are omitted from the wire entirely rather than sent empty.

Example:
    params = Query.with_("id", 42).arg("count", None).arg("includeNotPresent", True).build()
    # (("id", "42"), ("includeNotPresent", "true"))
"""

from collections.abc import Iterable
from typing import Self

# Ordered, immutable key/value pairs ready for the transport.
Params = tuple[tuple[str, str], ...]


def to_wire(value: object) -> str:
    """Convert a parameter value to its wire string form.

    Args:
        value: Parameter value (bool, int, float or str).

    Returns:
        The string sent on the wire.

    Raises:
        TypeError: If the value has no wire representation.
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported query parameter type: {type(value).__name__}")


class Query:
    """Single-use accumulator of request parameters.

    Attributes are kept private; the finished parameter set is obtained
    once through ``build()``.
    """

    def __init__(self) -> None:
        """Create an empty query."""
        self._pairs: list[tuple[str, str]] = []
        self._built = False

    @classmethod
    def with_(cls, key: str, value: object) -> Self:
        """Create a query seeded with one required parameter.

        Args:
            key: Parameter name.
            value: Parameter value, must not be None.

        Raises:
            ValueError: If value is None.
        """
        if value is None:
            raise ValueError(f"Required query parameter {key!r} has no value")
        return cls().arg(key, value)

    def arg(self, key: str, value: object | None) -> Self:
        """Append a parameter if a value is present.

        Args:
            key: Parameter name.
            value: Parameter value; None leaves the query unchanged.

        Returns:
            This query, for chaining.
        """
        self._check_open()
        if value is not None:
            self._pairs.append((key, to_wire(value)))
        return self

    def arg_list(self, key: str, values: Iterable[object] | None) -> Self:
        """Append one parameter per value, repeating the key.

        Args:
            key: Parameter name.
            values: Values to send; None or empty adds nothing.

        Returns:
            This query, for chaining.
        """
        self._check_open()
        for value in values or ():
            if value is not None:
                self._pairs.append((key, to_wire(value)))
        return self

    def build(self) -> Params:
        """Finalize the query.

        Returns:
            Immutable ordered parameter pairs.

        Raises:
            RuntimeError: If the query was already built.
        """
        self._check_open()
        self._built = True
        return tuple(self._pairs)

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Query has already been built")

    def __repr__(self) -> str:
        """Return debug representation."""
        return f"Query({self._pairs!r})"
