"""Webroute exception hierarchy.

Shared across segment parsing, route construction, substitution, and
route constants so every module raises and catches the same types.
"""

from dataclasses import dataclass


class WebRouteError(Exception):
    """Base for all webroute errors."""


class InvalidSegment(WebRouteError, ValueError):
    """Raised when a path component cannot become a segment.

    Empty or whitespace-only components, empty parameter names, and
    static text containing a separator are all rejected here.
    """

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        detail = reason or "path components must not be empty"
        super().__init__(f"Invalid path segment {text!r}: {detail}")


class InvalidValue(WebRouteError):
    """Raised when substitution values are not made of key-value pairs."""


@dataclass(frozen=True, slots=True)
class UnpopulatedParam(WebRouteError):
    """A parameter in the template had no value to populate it."""

    name: str

    def __str__(self) -> str:
        return f"no value to populate parameter: {self.name}"


class ConfigurationError(WebRouteError):
    """Raised when a route constant is read before it was initialized.

    Typically means ``RouteRegistry.freeze()`` was never called at startup.
    """
