"""Path segments — the classified components between ``/`` separators.

Three variants share one union type:

    ``users``    -> Static("users")
    ``{id}``     -> NamedParam("id")
    ``{*path}``  -> CatchallParam("path")

A segment's text is never empty, which is what keeps a rendered route
from ever containing two adjacent separators.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from webroute.errors import InvalidSegment, UnpopulatedParam


def _check_name(name: str) -> None:
    if not name:
        raise InvalidSegment(name, "parameter names must not be empty")
    if "/" in name:
        raise InvalidSegment(name, "parameter names must not contain '/'")


@dataclass(frozen=True, slots=True)
class Static:
    """A literal path component, rendered verbatim."""

    text: str

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise InvalidSegment(self.text)
        if "/" in self.text:
            raise InvalidSegment(self.text, "a segment must not contain '/'")

    @property
    def is_param(self) -> bool:
        return False

    @property
    def template(self) -> str:
        return self.text

    def populate(self, values: Mapping[str, str]) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class NamedParam:
    """A placeholder for exactly one path component: ``{name}``."""

    name: str

    def __post_init__(self) -> None:
        _check_name(self.name)

    @property
    def is_param(self) -> bool:
        return True

    @property
    def template(self) -> str:
        return f"{{{self.name}}}"

    def populate(self, values: Mapping[str, str]) -> str:
        """Return the value for this parameter.

        Raises ``UnpopulatedParam`` if *values* has no entry for it.
        """
        try:
            return values[self.name]
        except KeyError:
            raise UnpopulatedParam(self.name) from None


@dataclass(frozen=True, slots=True)
class CatchallParam:
    """A placeholder for the trailing components of a path: ``{*name}``.

    Populated exactly like a named parameter; only the template form and
    how an external router matches it differ.
    """

    name: str

    def __post_init__(self) -> None:
        _check_name(self.name)

    @property
    def is_param(self) -> bool:
        return True

    @property
    def template(self) -> str:
        return f"{{*{self.name}}}"

    def populate(self, values: Mapping[str, str]) -> str:
        try:
            return values[self.name]
        except KeyError:
            raise UnpopulatedParam(self.name) from None


type Segment = Static | NamedParam | CatchallParam


def parse_segment(text: str) -> Segment:
    """Classify a single path component (already split on ``/``).

    Examples::

        "users"    -> Static("users")
        " users "  -> Static("users")
        "{id}"     -> NamedParam("id")
        "{*path}"  -> CatchallParam("path")

    Raises ``InvalidSegment`` if *text* is empty after trimming.
    """
    part = text.strip()
    if not part:
        raise InvalidSegment(text)
    if part.startswith("{*") and part.endswith("}"):
        return CatchallParam(part[2:-1])
    if part.startswith("{") and part.endswith("}"):
        return NamedParam(part[1:-1])
    return Static(part)


def static_segment(text: str) -> Static:
    """Build a ``Static`` segment without classifying braces.

    Used for fixed routes, where ``{id}`` is just text.
    """
    part = text.strip()
    if not part:
        raise InvalidSegment(text)
    return Static(part)
