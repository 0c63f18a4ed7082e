"""Conversion of substitution values into a string-keyed mapping.

Populating a route takes any object-shaped value and flattens it into
``dict[str, str]`` before parameters are looked up.

Accepted shapes: ``Mapping``, dataclass instances, named tuples. Anything
else (``None``, scalars, strings, lists, arbitrary objects) is rejected
with ``InvalidValue``.

Leaf rules:

- ``str``                -> unchanged
- ``bool``               -> ``"true"`` / ``"false"``
- ``int`` / ``Decimal``  -> ``str(value)``
- finite ``float``       -> ``repr(value)``
- ``UUID``               -> canonical hyphenated form
- ``FixedRoute``         -> its canonical path

``None``, non-finite floats, sequences, mappings, nested dataclasses and
other objects are dropped. A parameter that needed a dropped value then
fails with ``UnpopulatedParam``.
"""

import dataclasses
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from uuid import UUID

from webroute.errors import InvalidValue

logger = logging.getLogger("webroute.values")


def to_value_map(values: Any) -> dict[str, str]:
    """Flatten *values* into an ordered ``dict[str, str]``.

    Numeric and boolean keys become strings (``1`` -> ``"1"``).
    Raises ``InvalidValue`` if *values* is not made of key-value pairs or
    has a key that is not a string, number, or bool.
    """
    items = _items(values)
    result: dict[str, str] = {}
    for raw_key, raw in items:
        key = _key(raw_key)
        converted = _leaf(raw)
        if converted is None:
            logger.debug("Dropping value for %r: %s is not a string leaf", key, type(raw).__name__)
            continue
        result[key] = converted
    return result


def _items(values: Any) -> list[tuple[Any, Any]]:
    if isinstance(values, Mapping):
        return list(values.items())

    if _is_value_dataclass(values):
        return [(f.name, getattr(values, f.name)) for f in dataclasses.fields(values)]

    # Named tuples are the only tuples with field names
    if isinstance(values, tuple) and hasattr(values, "_asdict"):
        return list(values._asdict().items())

    msg = (
        "Substitution values must be key-value pairs "
        f"(a mapping, dataclass, or named tuple), got {type(values).__name__}"
    )
    raise InvalidValue(msg)


def _key(key: Any) -> str:
    """Stringify a key the way JSON object keys are: numbers and bools allowed."""
    if isinstance(key, str):
        return key
    converted = _leaf(key) if isinstance(key, int | float) else None
    if converted is None:
        msg = f"Substitution keys must be strings or numbers, got {type(key).__name__}: {key!r}"
        raise InvalidValue(msg)
    return converted


def _is_value_dataclass(values: Any) -> bool:
    """Return True if *values* is an instance of a user-defined dataclass.

    Webroute's own dataclasses (routes, segments) serialize as strings,
    not as key-value pairs, so they are excluded by module prefix.
    """
    if isinstance(values, type) or not dataclasses.is_dataclass(values):
        return False
    module = getattr(type(values), "__module__", "") or ""
    return not module.startswith("webroute.")


def _leaf(value: Any) -> str | None:
    """Return the canonical string for a leaf value, or None to drop it."""
    from webroute.route import FixedRoute

    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int() | Decimal():
            return str(value)
        case float():
            return repr(value) if math.isfinite(value) else None
        case UUID() | FixedRoute():
            return str(value)
        case _:
            return None
