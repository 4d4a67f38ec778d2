"""Domain layer - Pure business logic.

This layer contains the Product entity and the protocols (ports) the
application depends on. The domain layer has NO dependencies on any
framework or infrastructure.

Structure:
- entities/: Domain entities (frozen dataclasses with identity)
- protocols/: Repository and logger interfaces

The domain layer defines WHAT the catalog is, not HOW it is stored.
"""
