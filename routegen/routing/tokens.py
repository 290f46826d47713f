"""Tokenizer for ``{identifier}`` route template tokens.

Templates are scanned left to right; every brace-delimited run is a token.
Token bodies may carry inline route constraints (``{id:int}``) and an
optional marker (``{id?}``).
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

_TOKEN_PATTERN = re.compile(r"\{([^{}]*)\}")


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteToken:
    """One brace-delimited token in a template.

    Attributes:
        body: Text between the braces.
        start: Index of the opening brace.
        end: Index just past the closing brace.
    """

    body: str
    start: int
    end: int

    @property
    def name(self) -> str:
        """Parameter name without constraints or optional marker."""
        return self.body.split(":", 1)[0].rstrip("?")

    @property
    def is_optional(self) -> bool:
        return self.body.endswith("?")


def iter_tokens(template: str) -> Iterator[RouteToken]:
    """Yield tokens of a template in order of appearance."""
    for match in _TOKEN_PATTERN.finditer(template):
        yield RouteToken(body=match.group(1), start=match.start(), end=match.end())


def find_token(template: str, name: str) -> RouteToken | None:
    """Find the first token whose name is exactly name.

    Args:
        template: Template text to scan.
        name: Parameter name to look for.

    Returns:
        The first matching token, or None. Unrelated tokens before the match
        are skipped.
    """
    for token in iter_tokens(template):
        if token.name == name:
            return token
    return None


def remove_route_constraints(template: str) -> str:
    """Strip inline route constraints from every token.

    Example:
        >>> remove_route_constraints("api/v{version:apiVersion}")
        'api/v{version}'
        >>> remove_route_constraints("{id:int:min(1)?}")
        '{id?}'
    """

    def _strip(match: re.Match[str]) -> str:
        body = match.group(1)
        if ":" not in body:
            return match.group(0)
        token = RouteToken(body=body, start=match.start(), end=match.end())
        marker = "?" if token.is_optional else ""
        return f"{{{token.name}{marker}}}"

    return _TOKEN_PATTERN.sub(_strip, template)
