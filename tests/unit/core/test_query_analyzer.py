"""Tests for QueryAnalyzer."""

import pytest

from cachedql.core.entities.operation import OperationRecord
from cachedql.core.exceptions import QueryParseError
from cachedql.core.services.query_analyzer import QueryAnalyzer, analyze


class TestQueryAnalyzer:
    """Tests for QueryAnalyzer.analyze."""

    def test_indexes_only_cached_operations(self, document: str) -> None:
        """Should index the two annotated operations and skip the other."""
        index = analyze(document)

        assert index == {
            "getUser": OperationRecord(
                name="getUser",
                cacheable=True,
                ttl=300,
                canonical_text=(
                    "query getUser @cached(ttl: 300) {\n"
                    "  user {\n"
                    "    id\n"
                    "    name\n"
                    "  }\n"
                    "}"
                ),
            ),
            "getPosts": OperationRecord(
                name="getPosts",
                cacheable=True,
                ttl=600,
                canonical_text=(
                    "query getPosts @cached(ttl: 600) {\n"
                    "  posts {\n"
                    "    id\n"
                    "    title\n"
                    "  }\n"
                    "}"
                ),
            ),
        }
        assert "noCacheQuery" not in index

    def test_no_cached_operations(self) -> None:
        """Should return an empty index when nothing is annotated."""
        assert analyze("query a { x } query b { y }") == {}

    def test_directive_without_ttl(self) -> None:
        """Should record ttl=None when the directive has no ttl argument."""
        index = analyze("query getUser @cached { user { id } }")

        assert index["getUser"].ttl is None
        assert index["getUser"].cacheable is True

    def test_non_integer_ttl_is_ignored(self) -> None:
        """Should treat a non-integer ttl as absent."""
        index = analyze('query getUser @cached(ttl: "60") { user { id } }')

        assert index["getUser"].ttl is None

    def test_anonymous_operation_uses_empty_name(self) -> None:
        """Should key an anonymous operation by the empty string."""
        index = analyze("query @cached(ttl: 10) { user { id } }")

        assert list(index) == [""]
        assert index[""].name == ""
        assert index[""].ttl == 10

    def test_mutation_with_directive(self) -> None:
        """Should index mutations the same way as queries."""
        index = analyze("mutation save @cached(ttl: 1) { save }")

        assert index["save"].canonical_text.startswith("mutation save @cached")

    def test_fragment_directives_are_ignored(self) -> None:
        """Should not treat fragment definitions as operations."""
        index = analyze(
            """
            query getUser { user { ...UserFields } }
            fragment UserFields on User @cached(ttl: 5) { id }
            """
        )

        assert index == {}

    def test_field_directives_are_ignored(self) -> None:
        """Should only look at operation-level directives."""
        index = analyze("query getUser { user @cached(ttl: 5) { id } }")

        assert index == {}

    def test_canonical_text_ignores_whitespace(self) -> None:
        """Should produce the same text for differently formatted queries."""
        compact = analyze("query getUser @cached(ttl: 300) { user { id name } }")
        spread = analyze(
            """
            query   getUser
              @cached( ttl : 300 )
            {
                user {   id
                  name }
            }
            """
        )

        assert compact["getUser"].canonical_text == spread["getUser"].canonical_text

    def test_duplicate_names_last_wins(self) -> None:
        """Should keep the last definition when names collide."""
        index = analyze(
            """
            query dup @cached(ttl: 1) { a }
            query dup @cached(ttl: 2) { b }
            """
        )

        assert index["dup"].ttl == 2
        assert "{\n  b\n}" in index["dup"].canonical_text

    def test_custom_directive_name(self) -> None:
        """Should look for the configured directive name."""
        analyzer = QueryAnalyzer(directive_name="cache")

        index = analyzer.analyze("query a @cache(ttl: 3) { x } query b @cached { y }")

        assert list(index) == ["a"]

    def test_parse_error(self) -> None:
        """Should raise QueryParseError for invalid documents."""
        with pytest.raises(QueryParseError):
            analyze("query getUser @cached(ttl: 300) { user { id ")

    def test_parse_error_chains_original(self) -> None:
        """Should keep the graphql-core error as the cause."""
        from graphql import GraphQLSyntaxError

        with pytest.raises(QueryParseError) as exc_info:
            analyze("not graphql")

        assert isinstance(exc_info.value.__cause__, GraphQLSyntaxError)
