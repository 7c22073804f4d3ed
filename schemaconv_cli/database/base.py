"""Abstract base class for table introspection."""

import io
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, NamedTuple, Optional, TextIO, Tuple, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..errors import InvalidNullabilityEncoding, TypeNormalizationError
from .models import Column, Table
from .type_mappers import TypeMapper

logger = logging.getLogger(__name__)


def redact_database_url(database_url: str) -> str:
    """Replace passwords in a database URL with ``***``.

    libpq accepts the password in the user info (``user:pw@host``) and as a
    ``password`` query parameter; both are redacted.
    """
    parts = urlsplit(database_url)
    if parts.password is not None:
        netloc = parts.netloc.rpartition("@")
        userinfo = netloc[0].partition(":")[0]
        parts = parts._replace(netloc=f"{userinfo}:***@{netloc[2]}")

    query = parse_qsl(parts.query, keep_blank_values=True)
    if any(key == "password" for key, _ in query):
        query = [(key, "***" if key == "password" else value) for key, value in query]
        parts = parts._replace(query=urlencode(query, safe="*"))

    return urlunsplit(parts)


def parse_full_table_name(full_table_name: str, default_schema: str = "public") -> Tuple[str, str]:
    """Split ``mytable`` or ``myschema.mytable`` into ``(schema, table)``.

    Only the first ``.`` separates the schema, so ``a.b.c`` gives
    ``("a", "b.c")``. Names without a schema get ``default_schema``.
    """
    schema, sep, table = full_table_name.partition(".")
    if not sep:
        return default_schema, full_table_name
    return schema, table


class CatalogRow(NamedTuple):
    """One column's metadata as read from a catalog."""
    column_name: str
    ordinal_position: int
    is_nullable: str
    data_type: str
    udt_schema: str
    udt_name: str


class TableIntrospector(ABC):
    """Abstract base class for table introspection.

    Subclasses connect to one kind of database and read its catalog. The
    conversion of catalog rows into a ``Table`` is shared.
    """

    # Override in subclasses with the backend's default namespace
    DEFAULT_SCHEMA: str = "public"

    type_mapper: TypeMapper

    def __init__(self, default_schema: Optional[str] = None):
        self.default_schema = default_schema or self.DEFAULT_SCHEMA

    @abstractmethod
    def connect(self):
        """Establish connection to the database.

        Raises:
            ConnectionError: If the database cannot be reached
        """
        pass

    @abstractmethod
    def close(self):
        """Close the database connection."""
        pass

    @abstractmethod
    def get_catalog_rows(self, schema: str, table: str) -> List[CatalogRow]:
        """Get catalog metadata for every column of a table.

        Args:
            schema: Schema name
            table: Table name

        Returns:
            List of CatalogRow objects, ordered by ordinal position
        """
        pass

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Quote an identifier for use in a query."""
        pass

    def resolve_table_name(self, table_reference: str) -> Tuple[str, str]:
        """Split a table reference using this backend's default schema."""
        return parse_full_table_name(table_reference, self.default_schema)

    def fetch_table(self, table_reference: str) -> Table:
        """Fetch information about a table from the database.

        A reference that matches no catalog rows returns a table with no
        columns; a missing table is not distinguished from an empty one.

        Args:
            table_reference: ``table`` or ``schema.table``

        Returns:
            Table with its columns in ordinal order

        Raises:
            ConnectionError: If the database cannot be reached
            DatabaseError: If the catalog query fails
            IntrospectionError: If a catalog row cannot be converted
        """
        schema, table_name = self.resolve_table_name(table_reference)
        self.connect()
        try:
            rows = self.get_catalog_rows(schema, table_name)
        finally:
            self.close()

        if not rows:
            logger.warning("No columns found for %s.%s", schema, table_name)

        rows = sorted(rows, key=lambda row: row.ordinal_position)
        columns = [self.column_from_row(row) for row in rows]
        logger.debug("Fetched %d columns for %s.%s", len(columns), schema, table_name)
        return Table(name=table_name, columns=columns)

    def column_from_row(self, row: CatalogRow) -> Column:
        """Convert one catalog row into a Column."""
        if row.is_nullable == "YES":
            is_nullable = True
        elif row.is_nullable == "NO":
            is_nullable = False
        else:
            raise InvalidNullabilityEncoding(row.is_nullable, row.column_name)

        try:
            data_type = self.type_mapper.to_data_type(row.data_type, row.udt_schema, row.udt_name)
        except TypeNormalizationError as e:
            e.annotate_column(row.column_name)
            raise

        return Column(
            name=row.column_name,
            data_type=data_type,
            is_nullable=is_nullable,
            comment=None,
        )

    def write_select_list(self, out: TextIO, columns: Union[Table, Iterable[Column]]):
        """Write column names as quoted, comma-separated ``SELECT`` arguments."""
        if isinstance(columns, Table):
            columns = columns.columns
        first = True
        for col in columns:
            if first:
                first = False
            else:
                out.write(",")
            out.write(self.quote_identifier(col.name))

    def select_list(self, columns: Union[Table, Iterable[Column]]) -> str:
        """Return the ``SELECT`` arguments as a string."""
        buf = io.StringIO()
        self.write_select_list(buf, columns)
        return buf.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
