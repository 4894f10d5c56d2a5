"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy async models, engine and repositories
- security/: bcrypt password hashing and JWT access tokens
- logging/: structlog console/JSON adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
