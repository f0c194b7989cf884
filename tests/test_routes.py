import pytest

from spa_service_generator.errors import MalformedRouteError
from spa_service_generator.generator.routes import match_route, placeholder_name


class TestMatchRoute:
    def test_placeholders_in_order(self):
        assert match_route("users/{userId}/orders/{orderId}") == ["userId", "orderId"]

    def test_empty_route(self):
        assert match_route("") == []

    def test_route_without_placeholders(self):
        assert match_route("api/orders") == []

    def test_duplicates_are_kept(self):
        assert match_route("{id}/copy/{id}") == ["id", "id"]

    def test_constraints_and_defaults_are_stripped(self):
        assert match_route("items/{id:int}/{page=1}/{slug?}/{*path}") == ["id", "page", "slug", "path"]

    def test_unbalanced_brace_raises(self):
        with pytest.raises(MalformedRouteError):
            match_route("orders/{id")

    def test_stray_closing_brace_raises(self):
        with pytest.raises(MalformedRouteError):
            match_route("orders/id}")

    def test_empty_placeholder_raises(self):
        with pytest.raises(MalformedRouteError, match="empty placeholder"):
            match_route("orders/{}")


class TestPlaceholderName:
    def test_catch_all(self):
        assert placeholder_name("**path") == "path"

    def test_optional_with_constraint(self):
        assert placeholder_name("id:int?") == "id"
