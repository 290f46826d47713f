"""Route template audience."""

from enum import Enum


class GenerationKind(str, Enum):
    """Audience a route template is generated for.

    Attributes:
        SERVER: Opaque placeholders, parsed by the serving runtime's own
            value parser. Tokens are never decorated.
        CLIENT: Self-describing placeholders for client-code generators.
            Tokens carry brackets, quotes, and literal-type prefixes.

    Example:
        >>> GenerationKind.CLIENT.value
        'client'
    """

    SERVER = "server"
    CLIENT = "client"
