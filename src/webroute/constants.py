"""Route constants initialized once, at an explicit startup step.

Module-level route templates are declared through a registry and built
when the registry freezes, never on first access::

    routes = RouteRegistry()
    FOO = routes.define("/foo/{foo_id}", name="FOO")
    BAR = routes.define("/bar/{bar_id}", name="BAR")

    routes.freeze()  # at startup

    str(FOO.value)   # "/foo/{foo_id}"
    FOO.value.join(BAR).to_fixed_route({"foo_id": "1", "bar_id": "2"})

A ``RouteConstant`` is accepted anywhere a route source is.
"""

import logging
import threading
from collections.abc import Callable, Iterator

from webroute.errors import ConfigurationError
from webroute.route import FixedRoute, ParameterizedRoute
from webroute.sources import RouteSource

logger = logging.getLogger("webroute.constants")

_UNSET = object()


class RouteConstant[R: (FixedRoute, ParameterizedRoute)]:
    """A route value built once from a zero-argument factory.

    Reading ``value`` before ``initialize()`` raises ``ConfigurationError``
    instead of building the route implicitly.
    """

    __slots__ = ("_factory", "_lock", "_value", "name")

    def __init__(self, factory: Callable[[], R], name: str | None = None) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: object = _UNSET
        self.name = name

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> R:
        value = self._value
        if value is _UNSET:
            label = self.name or "<unnamed>"
            msg = (
                f"Route constant {label} was read before it was initialized. "
                "Call initialize() or freeze its RouteRegistry at startup."
            )
            raise ConfigurationError(msg)
        return value  # type: ignore[return-value]

    def initialize(self) -> R:
        """Build the route if not built yet and return it.

        Double-checked under a lock so concurrent callers run the
        factory exactly once.
        """
        if self._value is not _UNSET:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = self._factory()
                logger.debug("Initialized route constant %s: %s", self.name, self._value)
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return f"RouteConstant({self.name!r}, uninitialized)"
        return f"RouteConstant({self.name!r}, {self._value!r})"


class RouteRegistry:
    """Collects route constants during setup and builds them on ``freeze()``.

    Usage::

        routes = RouteRegistry()
        USERS = routes.define("/users/{id}")
        STATIC = routes.define("/static", fixed=True)
        routes.freeze()
    """

    __slots__ = ("_constants", "_freeze_lock", "_frozen")

    def __init__(self) -> None:
        self._constants: list[RouteConstant] = []
        self._frozen = False
        self._freeze_lock = threading.Lock()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def define(
        self,
        source: RouteSource,
        *,
        name: str | None = None,
        fixed: bool = False,
    ) -> RouteConstant:
        """Register a route constant built from *source* at freeze time.

        *source* may itself be another constant from this registry, as
        long as it was defined earlier. Set *fixed* for a ``FixedRoute``.
        """
        if self._frozen:
            msg = (
                "Cannot define route constants after the registry is frozen. "
                "Define them at module level before calling freeze()."
            )
            raise RuntimeError(msg)
        route_type = FixedRoute if fixed else ParameterizedRoute
        constant = RouteConstant(lambda: route_type(source), name=name)
        self._constants.append(constant)
        return constant

    def freeze(self) -> None:
        """Initialize every registered constant, in definition order.

        Safe to call more than once; only the first call builds anything.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            for constant in self._constants:
                constant.initialize()
            self._frozen = True
            logger.debug("Froze route registry with %d constants", len(self._constants))

    def __iter__(self) -> Iterator[RouteConstant]:
        return iter(self._constants)

    def __len__(self) -> int:
        return len(self._constants)
