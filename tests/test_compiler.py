"""Tests for waypost.routing.compiler — pattern parsing and rendering."""

import pytest

from waypost.errors import ConfigurationError, PatternSyntaxError, UndeclaredTokenError
from waypost.routing.compiler import PatternCompiler, iter_tokens, parse_pattern
from waypost.routing.route import Group, Literal, TokenRef
from waypost.routing.tokens import TokenRegistry


def _compiler(tokens: dict[str, str] | None = None, default: str | None = None) -> PatternCompiler:
    return PatternCompiler(TokenRegistry(tokens), default)


class TestParsePattern:
    def test_literal(self) -> None:
        assert parse_pattern("/about") == [Literal("/about")]

    def test_empty(self) -> None:
        assert parse_pattern("") == []

    def test_token(self) -> None:
        assert parse_pattern("/user/:id") == [Literal("/user/"), TokenRef("id")]

    def test_token_between_literals(self) -> None:
        nodes = parse_pattern("/user/:id/edit")
        assert nodes == [Literal("/user/"), TokenRef("id"), Literal("/edit")]

    def test_whole_word_tokens(self) -> None:
        nodes = parse_pattern("/a/:identity/:id")
        assert [ref.name for ref in iter_tokens(nodes)] == ["identity", "id"]

    def test_optional_group(self) -> None:
        nodes = parse_pattern("/post/:id(/:slug)")
        assert nodes == [
            Literal("/post/"),
            TokenRef("id"),
            Group((Literal("/"), TokenRef("slug"))),
        ]

    def test_nested_groups(self) -> None:
        nodes = parse_pattern("/archive(/:year(/:month))")
        inner = Group((Literal("/"), TokenRef("month")))
        assert nodes == [
            Literal("/archive"),
            Group((Literal("/"), TokenRef("year"), inner)),
        ]

    def test_inline_default(self) -> None:
        nodes = parse_pattern("/post/:id(/:slug=none)")
        assert nodes[2] == Group((Literal("/"), TokenRef("slug", "none")))

    def test_empty_inline_default(self) -> None:
        assert parse_pattern("/:page=") == [Literal("/"), TokenRef("page", "")]

    def test_bare_colon_is_literal(self) -> None:
        assert parse_pattern("/a:/b") == [Literal("/a:/b")]

    def test_unmatched_close(self) -> None:
        with pytest.raises(PatternSyntaxError) as exc_info:
            parse_pattern("/post/:id)")
        assert "unmatched ')'" in str(exc_info.value)
        assert exc_info.value.pattern == "/post/:id)"

    def test_unclosed_open(self) -> None:
        with pytest.raises(PatternSyntaxError) as exc_info:
            parse_pattern("/post(/:id")
        assert "unclosed" in str(exc_info.value)

    def test_duplicate_token(self) -> None:
        with pytest.raises(PatternSyntaxError):
            parse_pattern("/:id/:id")

    def test_syntax_error_is_configuration_error(self) -> None:
        assert issubclass(PatternSyntaxError, ConfigurationError)


class TestPatternCompilerSource:
    def test_literal_anchored(self) -> None:
        assert _compiler().source("/about") == "^/about$"

    def test_token_named_group(self) -> None:
        source = _compiler({":id": "[0-9]+"}).source("/user/:id")
        assert source == "^/user/(?P<id>[0-9]+)$"

    def test_group_optional(self) -> None:
        source = _compiler({":id": "[0-9]+", ":slug": "[a-z]+"}).source("/post/:id(/:slug)")
        assert source == "^/post/(?P<id>[0-9]+)(?:/(?P<slug>[a-z]+))?$"

    def test_literal_escaped(self) -> None:
        source = _compiler().source("/feed.xml")
        assert source == r"^/feed\.xml$"

    def test_prefix_token_names_do_not_collide(self) -> None:
        compiler = _compiler({":id": "[0-9]+", ":identity": "[a-z]+"})
        source = compiler.source("/:identity/:id")
        assert source == "^/(?P<identity>[a-z]+)/(?P<id>[0-9]+)$"

    def test_undeclared_token_raises(self) -> None:
        with pytest.raises(UndeclaredTokenError) as exc_info:
            _compiler().source("/user/:id")
        assert exc_info.value.token == ":id"
        assert exc_info.value.pattern == "/user/:id"

    def test_default_constraint_fallback(self) -> None:
        source = _compiler(default="[^/]+").source("/user/:name")
        assert source == "^/user/(?P<name>[^/]+)$"

    def test_declared_token_beats_default_constraint(self) -> None:
        source = _compiler({":id": "[0-9]+"}, default="[^/]+").source("/:id")
        assert source == "^/(?P<id>[0-9]+)$"

    def test_reflects_registry_changes(self) -> None:
        tokens = TokenRegistry({":id": "[0-9]+"})
        compiler = PatternCompiler(tokens)
        assert compiler.source("/:id") == "^/(?P<id>[0-9]+)$"
        tokens.add_token(":id", "[a-z]+")
        assert compiler.source("/:id") == "^/(?P<id>[a-z]+)$"


class TestPatternCompilerCompile:
    def test_matches(self) -> None:
        regex = _compiler({":id": "[0-9]+"}).compile("/user/:id")
        match = regex.fullmatch("/user/42")
        assert match is not None
        assert match.groupdict() == {"id": "42"}

    def test_constraint_enforced(self) -> None:
        regex = _compiler({":id": "[0-9]+"}).compile("/user/:id")
        assert regex.fullmatch("/user/abc") is None

    def test_bad_constraint(self) -> None:
        with pytest.raises(PatternSyntaxError) as exc_info:
            _compiler({":id": "[0-9"}).compile("/user/:id")
        assert "constraint" in str(exc_info.value)

    def test_defaults(self) -> None:
        compiler = _compiler()
        assert compiler.defaults("/list(/:page=1(/:size=20))") == {"page": "1", "size": "20"}
        assert compiler.defaults("/list/:page") == {}
