"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from routegen.core.errors import DomainError, ValidationError
"""

from routegen.core.errors.common_errors import (
    ContractViolationError,
    ValidationError,
)
from routegen.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "ContractViolationError",
]
