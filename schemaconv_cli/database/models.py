"""Database-agnostic table models produced by schema introspection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..errors import UnrecognizedDataType


class DataType(str, Enum):
    """Portable column types.

    Member values are the canonical spellings, which match the
    ``data_type`` strings PostgreSQL reports in ``information_schema``.
    """

    BIGINT = "bigint"
    BOOLEAN = "boolean"
    CHARACTER_VARYING = "character varying"
    DATE = "date"
    DOUBLE_PRECISION = "double precision"
    INTEGER = "integer"
    JSON = "json"
    JSONB = "jsonb"
    NUMERIC = "numeric"
    REAL = "real"
    SMALLINT = "smallint"
    TEXT = "text"
    TIMESTAMP_WITHOUT_TIME_ZONE = "timestamp without time zone"
    UUID = "uuid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "DataType":
        """Parse a canonical type string.

        Raises:
            UnrecognizedDataType: If ``text`` is not a canonical spelling.
        """
        try:
            return cls(text)
        except ValueError:
            raise UnrecognizedDataType(text) from None


@dataclass(frozen=True)
class ArrayType:
    """An array whose elements all have the same column type."""
    element: "ColumnType"

    def __str__(self) -> str:
        return f"{self.element}[]"


@dataclass(frozen=True)
class OtherType:
    """A backend-specific type with no portable equivalent.

    ``name`` is the backend's own type name, kept verbatim.
    """
    name: str

    def __str__(self) -> str:
        return self.name


ColumnType = Union[DataType, ArrayType, OtherType]


@dataclass(frozen=True)
class Column:
    """Represents a table column."""
    name: str
    data_type: ColumnType
    is_nullable: bool
    comment: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "data_type": str(self.data_type),
            "is_nullable": self.is_nullable,
            "comment": self.comment,
        }


@dataclass
class Table:
    """Represents a table.

    ``columns`` is in the table's physical (ordinal) order.
    """
    name: str
    columns: List[Column] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the table to a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "columns": [col.to_dict() for col in self.columns],
        }

    def get_column(self, name: str) -> Optional[Column]:
        """Find a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None
