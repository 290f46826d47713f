"""Domain protocols (ports).

Available Protocols:
    - LoggerProtocol: Structured logging interface
"""

from routegen.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
