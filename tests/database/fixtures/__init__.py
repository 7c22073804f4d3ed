"""Test fixtures package."""

from .mock_postgres import MockPostgresConnection, MockCursor, catalog_row

__all__ = [
    "MockPostgresConnection",
    "MockCursor",
    "catalog_row",
]
