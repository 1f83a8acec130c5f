"""User directory adapter - in-memory implementation of the UserDirectory port.

Contents:
    * :class:`.simple.SimpleDataStore` - Immutable mapping-backed directory
    * :func:`.simple.new_simple_data_store` - Reference three-entry table
"""

from __future__ import annotations

from .simple import DEFAULT_USERS, SimpleDataStore, new_simple_data_store

__all__ = ["DEFAULT_USERS", "SimpleDataStore", "new_simple_data_store"]
