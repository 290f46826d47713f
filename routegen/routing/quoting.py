"""Literal quoting prefixes for client-facing templates.

A client generator needs to know how to format a literal for a token. A few
Python types are rendered as quoted literals, some with a type prefix:

    str        ->  '{name}'
    timedelta  ->  duration'{name}'
    bytes      ->  binary'{name}'
    Geography  ->  geography'{name}'
    Geometry   ->  geometry'{name}'

Lookup is an exact type match first, then a walk up the type's MRO, so any
Geography subclass (GeographyPoint, ...) resolves to the geography prefix.
The registry is built at import and never mutated; concurrent reads need no
locking.

Usage:
    from routegen.routing.quoting import get_quoting_prefix

    get_quoting_prefix(timedelta)
    # 'duration'
    get_quoting_prefix(int) is None
    # True
"""

from dataclasses import dataclass
from datetime import timedelta
from types import MappingProxyType

from routegen.domain.types import Geography, Geometry


@dataclass(frozen=True, slots=True, kw_only=True)
class QuotingRule:
    """Quoting rule for one Python type.

    Attributes:
        python_type: Type the rule is registered for.
        prefix: Literal prefix placed before the opening quote ("" for none).
        description: Human-readable note for documentation.
    """

    python_type: type
    prefix: str
    description: str


# =============================================================================
# Quoted Type Registry
# =============================================================================

QUOTED_TYPE_REGISTRY: MappingProxyType[type, QuotingRule] = MappingProxyType(
    {
        rule.python_type: rule
        for rule in (
            QuotingRule(
                python_type=str,
                prefix="",
                description="Text literal, quoted without prefix",
            ),
            QuotingRule(
                python_type=timedelta,
                prefix="duration",
                description="ISO 8601 duration literal",
            ),
            QuotingRule(
                python_type=bytes,
                prefix="binary",
                description="Base64url binary literal",
            ),
            QuotingRule(
                python_type=Geography,
                prefix="geography",
                description="Round-earth spatial literal (WKT)",
            ),
            QuotingRule(
                python_type=Geometry,
                prefix="geometry",
                description="Flat-earth spatial literal (WKT)",
            ),
        )
    }
)


def get_quoting_rule(python_type: type | None) -> QuotingRule | None:
    """Find the quoting rule for a type.

    Args:
        python_type: Type to look up (None for unknown types).

    Returns:
        The rule registered for the type itself or its nearest registered
        ancestor, or None.
    """
    if python_type is None:
        return None

    # __mro__ starts with the type itself, so exact matches win.
    for ancestor in python_type.__mro__:
        rule = QUOTED_TYPE_REGISTRY.get(ancestor)
        if rule is not None:
            return rule

    return None


def get_quoting_prefix(python_type: type | None) -> str | None:
    """Return the literal prefix for a type, or None when it is not quoted."""
    rule = get_quoting_rule(python_type)
    return rule.prefix if rule is not None else None
