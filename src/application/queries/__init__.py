"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetAccount, ListAssets). Each query has a
handler in ``handlers/``. Queries NEVER change state.
"""
