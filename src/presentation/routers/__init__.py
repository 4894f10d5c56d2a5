"""HTTP routers.

- system: unversioned root, health and config endpoints
- api.v1: versioned resource endpoints generated from the route registry
"""
