"""Tests for wren.routing.route — Route, RouteMatch, RouteResult."""

import pytest

from wren.routing.pattern import compile_pattern
from wren.routing.route import Route, RouteMatch, RouteResult


def _handler() -> None:
    return None


class TestRoute:
    def test_creation(self) -> None:
        route = Route(pattern="/users", handler=_handler)
        assert route.pattern == "/users"
        assert route.handler is _handler
        assert route.patterns == ("/users",)
        assert route.name is None

    def test_explicit_patterns(self) -> None:
        route = Route(pattern="/a", handler=_handler, patterns=("/a", "/b"), name="ab")
        assert route.patterns == ("/a", "/b")
        assert route.name == "ab"

    def test_frozen(self) -> None:
        route = Route(pattern="/", handler=_handler)
        with pytest.raises(AttributeError):
            route.pattern = "/other"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(pattern="/users/{id}", handler=_handler)
        pattern = compile_pattern(route.pattern)
        match = RouteMatch(route=route, path_params={"id": "42"}, pattern=pattern, path="/users/42")
        assert match.route is route
        assert match.path_params == {"id": "42"}
        assert match.pattern is pattern
        assert match.path == "/users/42"

    def test_frozen(self) -> None:
        route = Route(pattern="/", handler=_handler)
        match = RouteMatch(route=route, path_params={})
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]


class TestRouteResult:
    def test_truthiness(self) -> None:
        assert bool(RouteResult.SUCCEEDED) is True
        assert bool(RouteResult.FAILED) is False

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, RouteResult.SUCCEEDED),
            (RouteResult.FAILED, RouteResult.FAILED),
            (RouteResult.SUCCEEDED, RouteResult.SUCCEEDED),
            (True, RouteResult.SUCCEEDED),
            (False, RouteResult.FAILED),
            ("done", RouteResult.SUCCEEDED),
            (0, RouteResult.FAILED),
        ],
    )
    def test_from_handler(self, value: object, expected: RouteResult) -> None:
        assert RouteResult.from_handler(value) is expected
