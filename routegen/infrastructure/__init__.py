"""Infrastructure layer - Adapters for domain protocols.

Structure:
- logging/: structlog-backed LoggerProtocol implementation
"""
