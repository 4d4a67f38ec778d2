"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, ProductRepository
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.product_repository import ProductRepository
from src.domain.protocols.repository import Repository

__all__ = [
    "LoggerProtocol",
    "ProductRepository",
    "Repository",
]
