"""Precondition checks for the route template builder.

Malformed metadata degrades to partial output; a violated precondition is a
programmer error in the caller. Violations raise ContractViolationError only
while contract verification is enabled (debug, test runs). Otherwise they are
logged and the builder carries on.

Usage:
    from routegen.core.contracts import require

    require(bool(name), "token name must not be empty")
"""

from typing import Any

from routegen.core.config import get_settings
from routegen.core.container import get_logger
from routegen.core.errors import ContractViolationError


def require(condition: bool, message: str, /, **context: Any) -> bool:
    """Check a precondition.

    Args:
        condition: The precondition that must hold.
        message: Description of the precondition.
        **context: Structured context for the warning log.

    Returns:
        The value of condition, so callers can bail out on False.

    Raises:
        ContractViolationError: If condition is False and contract
            verification is enabled.
    """
    if condition:
        return True

    if get_settings().contracts_enabled:
        raise ContractViolationError(message)

    get_logger().warning("contract_violated", reason=message, **context)
    return False
