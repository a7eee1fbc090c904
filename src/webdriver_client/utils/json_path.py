"""JSON-path extraction over decoded response documents."""

from functools import lru_cache
from typing import Any

from jsonpath_ng import parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..core.exceptions import JsonPathError


@lru_cache(maxsize=64)
def compile_path(expression: str):
    """Parse a JSONPath expression, caching the compiled form."""
    try:
        return parse(expression)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise JsonPathError(expression, f"invalid expression ({e})") from e


def find_first(document: Any, expression: str) -> Any:
    """
    Return the first value matched by `expression`.

    Recursive-descent paths such as ``$..ELEMENT`` may match several nodes;
    only the first one is returned.

    Raises:
        JsonPathError: If nothing matches
    """
    matches = compile_path(expression).find(document)
    if not matches:
        raise JsonPathError(expression)
    return matches[0].value
