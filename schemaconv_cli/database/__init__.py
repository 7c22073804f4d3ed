"""Table introspection module for schemaconv.

This module reads a table's column metadata from a database catalog and
normalizes it into database-agnostic ``Table`` and ``Column`` models.
"""

from typing import Dict, Optional, Type
from urllib.parse import urlsplit

from ..errors import UnsupportedDatabaseError
from .models import ArrayType, Column, ColumnType, DataType, OtherType, Table
from .base import TableIntrospector, parse_full_table_name, redact_database_url
from .type_mappers import TypeMapper, PostgresTypeMapper
from .postgres import PostgresIntrospector

# URL scheme -> introspector class
INTROSPECTORS: Dict[str, Type[TableIntrospector]] = {
    "postgres": PostgresIntrospector,
    "postgresql": PostgresIntrospector,
}


def get_introspector(database_url: str, **kwargs) -> TableIntrospector:
    """Create the introspector that handles a database URL.

    Args:
        database_url: Connection URL; its scheme selects the backend
        **kwargs: Passed to the introspector constructor

    Raises:
        UnsupportedDatabaseError: If no introspector handles the scheme
    """
    scheme = urlsplit(database_url).scheme.lower()
    introspector_cls = INTROSPECTORS.get(scheme)
    if introspector_cls is None:
        raise UnsupportedDatabaseError(scheme)
    return introspector_cls(database_url, **kwargs)


def fetch_table(database_url: str, table_reference: str, default_schema: Optional[str] = None) -> Table:
    """Fetch one table's columns from the database at ``database_url``."""
    with get_introspector(database_url, default_schema=default_schema) as introspector:
        return introspector.fetch_table(table_reference)


__all__ = [
    # Data models
    "DataType",
    "ArrayType",
    "OtherType",
    "ColumnType",
    "Column",
    "Table",
    # Base classes
    "TableIntrospector",
    "parse_full_table_name",
    "redact_database_url",
    # Type mappers
    "TypeMapper",
    "PostgresTypeMapper",
    # Introspectors
    "PostgresIntrospector",
    "INTROSPECTORS",
    "get_introspector",
    "fetch_table",
]
