"""Infrastructure layer - Adapters for storage and logging.

This layer contains implementations of domain protocols (ports):
- Product repositories (SQLAlchemy and in-memory)
- Structured console logging

Structure:
- persistence/: Database engine, models, repositories and seed data
- logging/: structlog console adapter
- errors/, enums/: Storage error values and infrastructure error codes

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
