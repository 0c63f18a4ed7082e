"""Webroute — framework-independent route templates.

Build a route once, then use it both to register a handler and to make a
request against it.

Basic usage::

    from webroute import ParameterizedRoute

    user = ParameterizedRoute("/users/{user_id}")
    posts = user.join("/posts/{*rest}")

    str(posts)  # "/users/{user_id}/posts/{*rest}"
    posts.to_fixed_route({"user_id": 7, "rest": "2024/05"})
    # FixedRoute(path='/users/7/posts/2024/05')

Route constants built at startup::

    from webroute import RouteRegistry

    routes = RouteRegistry()
    FOO = routes.define("/foo/{foo_id}", name="FOO")
    routes.freeze()
"""

__version__ = "0.1.0"
__all__ = [
    "CatchallParam",
    "ConfigurationError",
    "FixedRoute",
    "InvalidSegment",
    "InvalidValue",
    "NamedParam",
    "ParameterizedRoute",
    "RouteConstant",
    "RouteRegistry",
    "RouteSource",
    "Segment",
    "Static",
    "UnpopulatedParam",
    "WebRouteError",
    "parse_segment",
    "to_populated_route",
    "to_value_map",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "CatchallParam": "webroute.segment",
    "NamedParam": "webroute.segment",
    "Segment": "webroute.segment",
    "Static": "webroute.segment",
    "parse_segment": "webroute.segment",
    "FixedRoute": "webroute.route",
    "ParameterizedRoute": "webroute.route",
    "RouteSource": "webroute.sources",
    "RouteConstant": "webroute.constants",
    "RouteRegistry": "webroute.constants",
    "to_populated_route": "webroute.substitution",
    "to_value_map": "webroute.values",
    "ConfigurationError": "webroute.errors",
    "InvalidSegment": "webroute.errors",
    "InvalidValue": "webroute.errors",
    "UnpopulatedParam": "webroute.errors",
    "WebRouteError": "webroute.errors",
}


def __getattr__(name: str) -> object:
    """Resolve a public name from the module listed in ``_LAZY_IMPORTS``."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
