"""Tests for waypost.testing — route table assertions."""

import pytest

from waypost.routing.router import Router
from waypost.testing import assert_no_route, assert_routes_to


@pytest.fixture
def router() -> Router:
    return Router(
        {
            "routes": {"/user/:id": "Users->show(tab=profile)"},
            "tokens": {":id": "[0-9]+"},
        }
    )


class TestAssertRoutesTo:
    def test_passes(self, router: Router) -> None:
        route = assert_routes_to(router, "/user/1", "Users", "show", {"id": "1", "tab": "profile"})
        assert route.args["id"] == "1"

    def test_args_optional(self, router: Router) -> None:
        assert_routes_to(router, "/user/1", "Users", "show")

    def test_no_match(self, router: Router) -> None:
        with pytest.raises(AssertionError, match="No route matches"):
            assert_routes_to(router, "/user/x", "Users", "show")

    def test_wrong_target(self, router: Router) -> None:
        with pytest.raises(AssertionError, match="expected Users->edit"):
            assert_routes_to(router, "/user/1", "Users", "edit")

    def test_wrong_args(self, router: Router) -> None:
        with pytest.raises(AssertionError, match="resolved with args"):
            assert_routes_to(router, "/user/1", "Users", "show", {"id": "2"})


class TestAssertNoRoute:
    def test_passes(self, router: Router) -> None:
        assert_no_route(router, "/user/abc")

    def test_fails(self, router: Router) -> None:
        with pytest.raises(AssertionError, match="unexpectedly resolved"):
            assert_no_route(router, "/user/1")
