"""Entity key delimiter style."""

from enum import Enum


class UrlKeyDelimiter(str, Enum):
    """How entity keys are rendered in a path.

    Attributes:
        PARENTHESES: ``Orders({key})`` and ``Orders({keyA},{keyB})`` style,
            keys enclosed in parentheses and separated by commas.
        SLASH: ``Orders/{key}`` style, each key is its own path segment.
    """

    PARENTHESES = "parentheses"
    SLASH = "slash"
