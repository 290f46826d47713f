"""Pydantic schemas for the JSON boundary.

Available Schemas:
    - OperationContextSchema: JSON shape of an OperationContext
    - parse_operation_context: Validate a payload into a Result
"""

from routegen.schemas.operation_context_schemas import (
    OperationContextSchema,
    parse_operation_context,
)

__all__ = ["OperationContextSchema", "parse_operation_context"]
