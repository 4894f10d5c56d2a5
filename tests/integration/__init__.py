"""Integration tests package.

Repository tests against a real PostgreSQL database.
"""
