"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, enums
and protocols (ports). The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Closed value sets (account, asset and transaction types)
- protocols/: Domain protocols (repository interfaces, service interfaces)
- errors/: Message constants per aggregate

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
