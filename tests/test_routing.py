"""
Route derivation and resolution tests.

Tests verify:
- derive_route lower-cases and collapses non-alphanumeric runs
- explicit routes win regardless of name
- derived routes are the fallback
- a miss is NOT_FOUND, never an exception
- the first match in candidate order wins on collisions
"""

import pytest

from showroom.projects.routing import (
    NOT_FOUND,
    derive_route,
    is_reserved,
    matches,
    normalize_route,
    resolve_route,
    route_for,
)


class TestDeriveRoute:
    """Tests for the shared route normalisation."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("My Cool App!", "/my-cool-app-"),
            ("Test App", "/test-app"),
            ("AI   Agent -- Pro", "/ai-agent-pro"),
            ("v2.0", "/v2-0"),
            ("already-slugged", "/already-slugged"),
            ("Café Ordering", "/caf-ordering"),
        ],
    )
    def test_derive_route(self, name, expected):
        assert derive_route(name) == expected

    def test_derive_route_keeps_digits(self):
        assert derive_route("Project 42") == "/project-42"

    def test_normalize_route_strips_leading_slash(self):
        """Admin-typed routes are stored in the same normalised form."""
        assert normalize_route("/My Project") == "/my-project"
        assert normalize_route("  my-project ") == "/my-project"

    def test_is_reserved(self):
        assert is_reserved("/api")
        assert is_reserved("/admin")
        assert is_reserved("/health")
        assert not is_reserved("/apis")
        assert not is_reserved("/my-project")


class TestResolveRoute:
    """Tests for path segment resolution."""

    def test_explicit_route_resolves_regardless_of_name(self, make_dto):
        """A project with route "/foo" is found by "foo" whatever its name."""
        project = make_dto(name="Completely Different Name", route="/foo")

        assert resolve_route("foo", [project]) is project

    def test_derived_route_fallback(self, make_dto):
        """A project without route is found by its derived slug."""
        project = make_dto(name="My Cool App!", route=None)

        assert resolve_route("my-cool-app-", [project]) is project

    def test_derived_route_still_matches_when_explicit_route_set(self, make_dto):
        project = make_dto(name="Test App", route="/custom")

        assert resolve_route("test-app", [project]) is project
        assert resolve_route("custom", [project]) is project

    def test_explicit_route_compared_verbatim(self, make_dto):
        """Stored routes are not re-normalised at lookup time."""
        project = make_dto(name="Other", route="/Foo")

        assert resolve_route("foo", [project]) is NOT_FOUND
        assert resolve_route("Foo", [project]) is project

    @pytest.mark.parametrize("segment", ["", "nope", "test_app", "TEST-APP", "test-app/extra"])
    def test_miss_returns_not_found(self, make_dto, segment):
        """Segments matching nothing resolve to NOT_FOUND without raising."""
        projects = [make_dto(name="Test App"), make_dto(name="Other", route="/other")]

        assert resolve_route(segment, projects) is NOT_FOUND

    def test_empty_candidates(self):
        assert resolve_route("anything", []) is NOT_FOUND

    def test_first_match_wins(self, make_dto):
        """Route collisions resolve to the first candidate (newest first)."""
        newer = make_dto(name="Same Name")
        older = make_dto(name="Same Name")

        assert resolve_route("same-name", [newer, older]) is newer
        assert resolve_route("same-name", [older, newer]) is older

    def test_not_found_is_falsy_singleton(self):
        assert not NOT_FOUND
        assert repr(NOT_FOUND) == "NOT_FOUND"
        assert type(NOT_FOUND)() is NOT_FOUND

    def test_matches_and_route_for(self, make_dto):
        derived = make_dto(name="Hello World")
        explicit = make_dto(name="Hello World", route="/hi")

        assert route_for(derived) == "/hello-world"
        assert route_for(explicit) == "/hi"
        assert matches(derived, "hello-world")
        assert not matches(derived, "hi")
