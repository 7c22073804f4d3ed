"""Database-specific type mapping strategies."""

from abc import ABC, abstractmethod
from typing import Dict

from ..errors import UnknownArrayElementType
from .models import ArrayType, ColumnType, DataType, OtherType


class TypeMapper(ABC):
    """Abstract base class for database type mapping."""

    @abstractmethod
    def to_data_type(self, data_type: str, udt_schema: str, udt_name: str) -> ColumnType:
        """Convert a catalog type description to a column type.

        Args:
            data_type: Declared type as reported by the catalog
            udt_schema: Schema that owns the underlying type
            udt_name: Backend-internal name of the underlying type

        Raises:
            TypeNormalizationError: If the type cannot be mapped
        """
        pass


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL ``information_schema.columns`` types."""

    ARRAY = "ARRAY"
    USER_DEFINED = "USER-DEFINED"

    # Array element types are reported through udt_name, which is "_"
    # followed by the internal name of the element's base type.
    ARRAY_ELEMENT_TYPES: Dict[str, DataType] = {
        "_bool": DataType.BOOLEAN,
        "_float8": DataType.DOUBLE_PRECISION,
        "_int4": DataType.INTEGER,
        "_text": DataType.TEXT,
        "_uuid": DataType.UUID,
    }

    # Built-in types that show up in catalogs (mostly system tables) but
    # have no portable equivalent.
    OPAQUE_BUILTIN_TYPES = frozenset({
        "interval",
        "name",
        "oid",
        "regclass",
        "regtype",
    })

    def to_data_type(self, data_type: str, udt_schema: str, udt_name: str) -> ColumnType:
        """Convert a PostgreSQL column type to a column type.

        ``udt_schema`` is not used; it is accepted so every mapper sees the
        same catalog fields.
        """
        if data_type == self.ARRAY:
            try:
                element = self.ARRAY_ELEMENT_TYPES[udt_name]
            except KeyError:
                raise UnknownArrayElementType(udt_name) from None
            return ArrayType(element)
        elif data_type == self.USER_DEFINED:
            return OtherType(udt_name)
        elif data_type in self.OPAQUE_BUILTIN_TYPES:
            return OtherType(data_type)
        return DataType.parse(data_type)
