"""Application layer - Use cases and orchestration.

This layer contains the product catalog use cases following the CQRS pattern:
- Commands: Write operations that change state (create/update/delete)
- Queries: Read operations that fetch data (by ID, paged listing)

Structure:
- commands/: Command dataclasses and handlers
- queries/: Query dataclasses and handlers
- cqrs/: Dispatcher, cancellation token, handler base and registry
- mapping/: Type-pair mapper and product mapping profile
- responses/: ServiceResponse / PagedResponse envelopes
- dtos/: Outward-facing product representation

The application layer orchestrates domain logic but contains no business rules.
"""
