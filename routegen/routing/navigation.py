"""Navigation property suffix for entity set actions.

By convention an action named after a navigation property serves that
property: ``GetOrders`` on Customers serves ``Customers({key})/Orders``.
"""

import re
from collections.abc import Sequence

# Word runs that may follow a navigation property inside an action name
# (``GetOrdersForCustomer``, ``GetInvoicesByCustomer``).
NAVIGATION_PREPOSITIONS: frozenset[str] = frozenset(
    {"For", "By", "Of", "From", "In", "On", "At", "To", "With"}
)

_WORD_RUN = re.compile(r"[A-Z][a-z0-9]*")


def find_navigation_property(
    action_name: str,
    navigation_properties: Sequence[str],
) -> str | None:
    """Find the navigation property an action serves.

    The first property (declared order) that the action name ends with wins.
    Failing that, the first property that appears in the action name as a
    whole PascalCase word run followed by a preposition word run wins
    (``GetOrdersForCustomer`` serves ``Orders``, ``GetOrdersCount`` serves
    nothing). Property names are compared case-insensitively.

    Args:
        action_name: Implementing action name.
        navigation_properties: Navigation property names in declared order.

    Returns:
        The matching property name as declared, or None.

    Examples:
        >>> find_navigation_property("GetCustomerInvoices", ["Orders", "Invoices"])
        'Invoices'
        >>> find_navigation_property("GetOrdersForCustomer", ["Orders", "Invoices"])
        'Orders'
        >>> find_navigation_property("GetOrdersCount", ["Orders"]) is None
        True
    """
    lowered = action_name.lower()

    for name in navigation_properties:
        if name and lowered.endswith(name.lower()):
            return name

    for name in navigation_properties:
        if name and _precedes_preposition(action_name, name):
            return name

    return None


def _precedes_preposition(action_name: str, name: str) -> bool:
    lowered = action_name.lower()
    target = name.lower()
    start = lowered.find(target)

    while start >= 0:
        following = _WORD_RUN.match(action_name, start + len(target))
        if following is not None and following.group() in NAVIGATION_PREPOSITIONS:
            return True
        start = lowered.find(target, start + 1)

    return False
