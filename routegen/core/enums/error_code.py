"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, UNKNOWN_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_OPERATION_CONTEXT = "invalid_operation_context"
    UNKNOWN_TYPE_NAME = "unknown_type_name"
