"""Tests for webroute.constants — RouteConstant and RouteRegistry."""

import threading

import pytest

from webroute.constants import RouteConstant, RouteRegistry
from webroute.errors import ConfigurationError
from webroute.route import FixedRoute, ParameterizedRoute


class TestRouteConstant:
    def test_read_before_initialize(self) -> None:
        constant = RouteConstant(lambda: ParameterizedRoute("/foo"), name="FOO")
        assert constant.initialized is False
        with pytest.raises(ConfigurationError, match="FOO"):
            _ = constant.value

    def test_initialize(self) -> None:
        constant = RouteConstant(lambda: ParameterizedRoute("/foo/{id}"))
        route = constant.initialize()
        assert constant.initialized is True
        assert constant.value is route
        assert str(route) == "/foo/{id}"

    def test_factory_runs_once(self) -> None:
        calls: list[int] = []

        def factory() -> FixedRoute:
            calls.append(1)
            return FixedRoute("/a")

        constant = RouteConstant(factory)
        first = constant.initialize()
        second = constant.initialize()
        assert first is second
        assert len(calls) == 1

    def test_concurrent_initialize_runs_factory_once(self) -> None:
        calls: list[int] = []
        barrier = threading.Barrier(8)

        def factory() -> ParameterizedRoute:
            calls.append(1)
            return ParameterizedRoute("/x")

        constant = RouteConstant(factory)
        results: list[ParameterizedRoute] = []

        def worker() -> None:
            barrier.wait()
            results.append(constant.initialize())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert all(r is results[0] for r in results)

    def test_uninitialized_constant_as_source(self) -> None:
        constant = RouteConstant(lambda: ParameterizedRoute("/bar"))
        with pytest.raises(ConfigurationError):
            ParameterizedRoute("/foo").join(constant)

    def test_as_parameterized_source(self) -> None:
        foo = RouteConstant(lambda: ParameterizedRoute("/foo/{foo_id}"))
        bar = RouteConstant(lambda: ParameterizedRoute("/bar/{bar_id}"))
        foo.initialize()
        bar.initialize()
        assert str(ParameterizedRoute(foo).join(bar)) == "/foo/{foo_id}/bar/{bar_id}"

    def test_fixed_constant_as_parameterized_source(self) -> None:
        fixed = RouteConstant(lambda: FixedRoute("/static/{x}"))
        fixed.initialize()
        route = ParameterizedRoute("/{id}").join(fixed)
        assert route.param_names == ("id",)

    def test_parameterized_constant_as_fixed_source_rejected(self) -> None:
        constant = RouteConstant(lambda: ParameterizedRoute("/{id}"))
        constant.initialize()
        with pytest.raises(TypeError):
            FixedRoute(constant)

    def test_repr(self) -> None:
        constant = RouteConstant(lambda: FixedRoute("/a"), name="A")
        assert repr(constant) == "RouteConstant('A', uninitialized)"
        constant.initialize()
        assert repr(constant) == "RouteConstant('A', FixedRoute(path='/a'))"


class TestRouteRegistry:
    def test_define_and_freeze(self) -> None:
        routes = RouteRegistry()
        foo = routes.define("/foo/{foo_id}", name="FOO")
        static = routes.define("/static/{x}", name="STATIC", fixed=True)
        assert routes.frozen is False
        assert not foo.initialized

        routes.freeze()

        assert routes.frozen is True
        assert foo.value == ParameterizedRoute("/foo/{foo_id}")
        assert static.value == FixedRoute("/static/{x}")

    def test_read_before_freeze(self) -> None:
        routes = RouteRegistry()
        foo = routes.define("/foo")
        with pytest.raises(ConfigurationError):
            _ = foo.value

    def test_define_after_freeze(self) -> None:
        routes = RouteRegistry()
        routes.freeze()
        with pytest.raises(RuntimeError, match="frozen"):
            routes.define("/late")

    def test_freeze_is_idempotent(self) -> None:
        routes = RouteRegistry()
        foo = routes.define("/foo")
        routes.freeze()
        first = foo.value
        routes.freeze()
        assert foo.value is first

    def test_constant_built_from_earlier_constant(self) -> None:
        routes = RouteRegistry()
        api = routes.define("/api/{version}")
        users = routes.define(api, name="USERS")
        routes.freeze()
        assert users.value.join("/users").path == "/api/{version}/users"

    def test_nested_routes(self) -> None:
        routes = RouteRegistry()
        foo = routes.define("/foo/{foo_id}")
        baz = routes.define("/baz/{bar_id}")
        routes.freeze()

        redirect = foo.value.join(baz).to_fixed_route({"foo_id": "1", "bar_id": "2"})
        assert redirect.path == "/foo/1/baz/2"

    def test_iteration_in_definition_order(self) -> None:
        routes = RouteRegistry()
        a = routes.define("/a")
        b = routes.define("/b")
        assert list(routes) == [a, b]
        assert len(routes) == 2

    def test_invalid_source_fails_at_freeze(self) -> None:
        routes = RouteRegistry()
        routes.define("/a/{}")
        with pytest.raises(ValueError):
            routes.freeze()
        assert routes.frozen is False
