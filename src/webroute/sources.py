"""Conversion of route sources into segment sequences.

Anything a route can be built from or joined with is a ``RouteSource``:

- ``str``                 -> split on ``/`` and parsed
- ``FixedRoute``          -> its static segments
- ``ParameterizedRoute``  -> its segments (parameterized targets only)
- ``RouteConstant``       -> the segments of the route it holds
- ``uuid.UUID``           -> a single static segment

Each route type asks for the segment kind it stores, so constructors and
``join`` have one signature per route type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from webroute.segment import Segment, Static, parse_segment, static_segment

if TYPE_CHECKING:
    from webroute.constants import RouteConstant
    from webroute.route import FixedRoute, ParameterizedRoute

type RouteSource = str | FixedRoute | ParameterizedRoute | RouteConstant | UUID


def split_path(path: str) -> list[str]:
    """Split *path* into components, dropping separator noise.

    Leading, trailing, and doubled slashes never produce a component::

        "/a//b/" -> ["a", "b"]
        "/"      -> []
        ""       -> []
    """
    return [part for part in path.split("/") if part]


def fixed_segments(source: RouteSource) -> tuple[Static, ...]:
    """Convert *source* into static segments for a ``FixedRoute``.

    Text is never classified here: ``{id}`` stays literal.
    Raises ``TypeError`` for parameterized routes and unsupported types.
    """
    from webroute.constants import RouteConstant
    from webroute.route import FixedRoute, ParameterizedRoute

    match source:
        case str():
            return tuple(static_segment(part) for part in split_path(source))
        case FixedRoute():
            return source.segments
        case ParameterizedRoute():
            msg = (
                f"Cannot build a FixedRoute from {source!r}. "
                "Populate it first with to_fixed_route()."
            )
            raise TypeError(msg)
        case RouteConstant():
            return fixed_segments(source.value)
        case UUID():
            return (Static(str(source)),)
        case _:
            msg = f"Cannot build a route from {type(source).__name__}"
            raise TypeError(msg)


def parameterized_segments(source: RouteSource) -> tuple[Segment, ...]:
    """Convert *source* into segments for a ``ParameterizedRoute``.

    Text is classified into static, named, and catchall segments. A
    ``FixedRoute`` keeps its segments as ``Static`` even when their text
    looks like a placeholder.
    """
    from webroute.constants import RouteConstant
    from webroute.route import FixedRoute, ParameterizedRoute

    match source:
        case str():
            return tuple(parse_segment(part) for part in split_path(source))
        case ParameterizedRoute() | FixedRoute():
            return source.segments
        case RouteConstant():
            return parameterized_segments(source.value)
        case UUID():
            return (Static(str(source)),)
        case _:
            msg = f"Cannot build a route from {type(source).__name__}"
            raise TypeError(msg)
