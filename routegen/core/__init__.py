"""Core layer - configuration, errors, results, and shared plumbing.

Structure:
- config.py: Settings loaded from environment variables
- container.py: Application-scoped singletons (logger)
- contracts.py: Debug-only precondition checks
- enums/: Core enums (Environment, ErrorCode)
- errors/: DomainError hierarchy
- result.py: Success/Failure result types
"""
