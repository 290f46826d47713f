"""Common error classes.

Error Types:
- ValidationError: Operation description failed validation (returned in Result)
- ContractViolationError: Programmer error caught by a precondition check
  (raised, only when contract verification is enabled)

Usage:
    from routegen.core.errors import ValidationError
    from routegen.core.enums import ErrorCode
    from routegen.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_OPERATION_CONTEXT,
        message="Field required",
        field="controller_name",
    ))
"""

from dataclasses import dataclass

from routegen.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Dotted location of the field that failed validation.
        details: Additional context.
    """

    field: str | None = None


class ContractViolationError(ValueError):
    """Raised when a builder precondition is violated.

    Only raised while contract verification is enabled (debug builds,
    test runs). In production the violation is logged and the builder
    continues with best-effort output.
    """

    def __init__(self, message: str) -> None:
        """Initialize contract violation error.

        Args:
            message: Description of the violated precondition.
        """
        super().__init__(message)
        self.message = message
