"""FixedRoute and ParameterizedRoute frozen value types.

Both store their segments alongside the canonical string
``"/" + "/".join(templates)``, which is the route's identity: two routes
of the same type are equal exactly when their canonical strings are.

Usage::

    FOO = ParameterizedRoute("/foo/{foo_id}")
    BAR = ParameterizedRoute("/bar/{bar_id}")

    str(FOO.join(BAR))  # "/foo/{foo_id}/bar/{bar_id}"
    FOO.join(BAR).to_fixed_route({"foo_id": "1", "bar_id": "2"})
    # FixedRoute(path='/foo/1/bar/2')
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from webroute.segment import CatchallParam, NamedParam, Segment, Static
from webroute.sources import RouteSource, fixed_segments, parameterized_segments
from webroute.substitution import populated_segments


def _render(segments: tuple[Segment, ...]) -> str:
    return "/" + "/".join(segment.template for segment in segments)


def _assign(route: FixedRoute | ParameterizedRoute, segments: tuple[Segment, ...]) -> None:
    object.__setattr__(route, "segments", segments)
    object.__setattr__(route, "path", _render(segments))


@dataclass(frozen=True, slots=True, init=False)
class FixedRoute:
    """A concrete, requestable path made only of static segments.

    Text is never classified, so ``FixedRoute("/files/{x}")`` is the
    literal path ``/files/{x}``.
    """

    path: str
    segments: tuple[Static, ...] = field(compare=False, repr=False)

    def __init__(self, source: RouteSource = "") -> None:
        _assign(self, fixed_segments(source))

    @classmethod
    def from_segments(cls, segments: Iterable[Static]) -> FixedRoute:
        """Build a route from already-typed static segments."""
        segments = tuple(segments)
        for segment in segments:
            if not isinstance(segment, Static):
                msg = f"FixedRoute only holds Static segments, got {segment!r}"
                raise TypeError(msg)
        route = object.__new__(cls)
        _assign(route, segments)
        return route

    def join(self, source: RouteSource) -> FixedRoute:
        """Return a new route with *source* appended after this one."""
        return FixedRoute.from_segments(self.segments + fixed_segments(source))

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True, init=False)
class ParameterizedRoute:
    """A route template that may contain ``{name}`` and ``{*name}`` parameters.

    Renders to a template string for route registration and populates to
    a ``FixedRoute`` for making requests.
    """

    path: str
    segments: tuple[Segment, ...] = field(compare=False, repr=False)

    def __init__(self, source: RouteSource = "") -> None:
        _assign(self, parameterized_segments(source))

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> ParameterizedRoute:
        """Build a route from already-typed segments."""
        segments = tuple(segments)
        for segment in segments:
            if not isinstance(segment, Static | NamedParam | CatchallParam):
                msg = f"Expected a segment, got {segment!r}"
                raise TypeError(msg)
        route = object.__new__(cls)
        _assign(route, segments)
        return route

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in template order. Duplicates are kept."""
        return tuple(s.name for s in self.segments if not isinstance(s, Static))

    def join(self, source: RouteSource) -> ParameterizedRoute:
        """Return a new route with *source* appended after this one.

        Duplicate parameter names are allowed; each is resolved
        independently when the route is populated.
        """
        return ParameterizedRoute.from_segments(self.segments + parameterized_segments(source))

    def to_fixed_route(self, values: Any) -> FixedRoute:
        """Populate every parameter from *values* and return the request path.

        *values* must be object-shaped: a mapping, a dataclass instance, or
        a named tuple. Values are not re-parsed: one containing ``/`` adds
        path components, and blank values are dropped.

        Raises ``InvalidValue`` if *values* is not object-shaped.
        Raises ``UnpopulatedParam`` for the first parameter with no value.
        """
        return FixedRoute.from_segments(populated_segments(self.segments, values))

    def __str__(self) -> str:
        return self.path
