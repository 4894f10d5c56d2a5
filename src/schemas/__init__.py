"""Request/response schemas for API endpoints.

Pydantic models for HTTP validation and serialization, kept separate
from domain entities. Response models expose ``from_entity`` helpers.
"""
