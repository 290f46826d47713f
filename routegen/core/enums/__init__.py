"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from routegen.core.enums import ErrorCode, Environment
"""

from routegen.core.enums.environment import Environment
from routegen.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
