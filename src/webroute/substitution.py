"""Populating parameterized segments with concrete values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from webroute.segment import Static
from webroute.values import to_value_map

if TYPE_CHECKING:
    from webroute.route import FixedRoute, ParameterizedRoute
    from webroute.segment import Segment


def populate(segments: Iterable[Segment], values: Mapping[str, str]) -> list[str]:
    """Return the literal text of each segment, left to right.

    Static segments pass through. Parameters are looked up in *values*;
    the first missing one raises ``UnpopulatedParam``.
    """
    return [segment.populate(values) for segment in segments]


def populated_segments(segments: Iterable[Segment], values: Any) -> tuple[Static, ...]:
    """Populate *segments* from caller-supplied *values* as static segments.

    Substituted text is kept verbatim, not re-parsed: a value containing
    ``/`` becomes several components, and blank parts are dropped like
    doubled separators.
    """
    return tuple(
        Static(part)
        for text in populate(segments, to_value_map(values))
        for part in text.split("/")
        if part.strip()
    )


def populated_path(segments: Iterable[Segment], values: Any) -> str:
    """Like ``populated_segments``, joined into a path string."""
    return "/" + "/".join(s.text for s in populated_segments(segments, values))


def to_populated_route(route: ParameterizedRoute, values: Any) -> FixedRoute:
    """Functional form of ``ParameterizedRoute.to_fixed_route``."""
    return route.to_fixed_route(values)
