"""Application environment types.

Environments:
- DEVELOPMENT: Local development, console logs, debug mode
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Production deployment, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
