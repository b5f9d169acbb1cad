"""Analyzer for @cached directives in GraphQL query documents.

Extracts, for every top-level operation of a document, whether it opted
into caching and with which TTL:

    query getUser @cached(ttl: 300) {
      user { id name }
    }

Only operation-level directives are inspected. Directives on fields,
fragments or variables are ignored.
"""

import logging

from graphql import (
    DirectiveNode,
    GraphQLSyntaxError,
    IntValueNode,
    OperationDefinitionNode,
    parse,
    print_ast,
)

from cachedql.core.entities.operation import CacheDirectiveIndex, OperationRecord
from cachedql.core.exceptions import QueryParseError

logger = logging.getLogger(__name__)

CACHED_DIRECTIVE = "cached"
TTL_ARGUMENT = "ttl"


class QueryAnalyzer:
    """Builds a CacheDirectiveIndex from query text."""

    def __init__(self, directive_name: str = CACHED_DIRECTIVE) -> None:
        """Initialize the analyzer.

        Args:
            directive_name: Name of the directive that opts an operation in.
        """
        self._directive_name = directive_name

    def analyze(self, document_text: str) -> CacheDirectiveIndex:
        """Parse a query document and index its cacheable operations.

        Args:
            document_text: The GraphQL query text.

        Returns:
            Mapping of operation name to OperationRecord, containing only
            operations annotated with the caching directive. Anonymous
            operations are keyed by "". If two operations share a name,
            the last one wins.

        Raises:
            QueryParseError: If the text is not a valid GraphQL document.
        """
        try:
            document = parse(document_text)
        except GraphQLSyntaxError as e:
            raise QueryParseError(f"Failed to parse query: {e.message}") from e

        index: CacheDirectiveIndex = {}

        for definition in document.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                continue

            directive = self._find_directive(definition)
            if directive is None:
                continue

            name = definition.name.value if definition.name else ""
            index[name] = OperationRecord(
                name=name,
                cacheable=True,
                ttl=self._get_ttl(directive),
                canonical_text=print_ast(definition),
            )

        logger.debug("Found %d cacheable operation(s)", len(index))
        return index

    def _find_directive(
        self, operation: OperationDefinitionNode
    ) -> DirectiveNode | None:
        for directive in operation.directives or ():
            if directive.name.value == self._directive_name:
                return directive
        return None

    def _get_ttl(self, directive: DirectiveNode) -> int | None:
        """Read the integer ttl argument of a directive.

        Non-integer values are treated as if the argument were absent.
        """
        for arg in directive.arguments or ():
            if arg.name.value == TTL_ARGUMENT:
                if isinstance(arg.value, IntValueNode):
                    return int(arg.value.value)
                return None
        return None


def analyze(
    document_text: str, directive_name: str = CACHED_DIRECTIVE
) -> CacheDirectiveIndex:
    """Index the cacheable operations of a query document.

    Shortcut for ``QueryAnalyzer(directive_name).analyze(document_text)``.
    """
    return QueryAnalyzer(directive_name).analyze(document_text)
