"""Error types for schemaconv."""

from typing import Optional, Dict, Any


class SchemaConvError(Exception):
    """Base exception for schemaconv errors."""

    def __init__(self, message: str, code: str = "SCHEMACONV_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConnectionError(SchemaConvError):
    """Error connecting to the database."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class DatabaseError(SchemaConvError):
    """Error while running a catalog query."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="DATABASE_ERROR", details=details)


class UnsupportedDatabaseError(SchemaConvError):
    """No introspector is registered for a database URL scheme."""

    def __init__(self, scheme: str):
        super().__init__(
            f"Unsupported database URL scheme: {scheme!r}",
            code="UNSUPPORTED_DATABASE",
            details={"scheme": scheme},
        )
        self.scheme = scheme


class IntrospectionError(SchemaConvError):
    """Error while turning catalog rows into a table."""

    def __init__(self, message: str, code: str = "INTROSPECTION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)


class InvalidNullabilityEncoding(IntrospectionError):
    """The catalog reported an is_nullable value other than YES or NO."""

    def __init__(self, value: str, column_name: Optional[str] = None):
        message = f"Unexpected is_nullable value: {value!r}"
        if column_name is not None:
            message = f"{message} (column {column_name!r})"
        super().__init__(
            message,
            code="INVALID_NULLABILITY",
            details={"value": value, "column_name": column_name},
        )
        self.value = value
        self.column_name = column_name


class TypeNormalizationError(IntrospectionError):
    """A catalog type could not be mapped onto a column type.

    Raised without a column by the type mappers. The introspector calls
    ``annotate_column`` before re-raising so the message names the column.
    """

    def __init__(self, message: str, code: str = "TYPE_NORMALIZATION_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=code, details=details)
        self.column_name: Optional[str] = None

    def annotate_column(self, column_name: str) -> None:
        """Attach the name of the column whose type failed to normalize."""
        if self.column_name is not None:
            return
        self.column_name = column_name
        self.message = f"{self.message} (column {column_name!r})"
        self.args = (self.message,)
        self.details["column_name"] = column_name


class UnknownArrayElementType(TypeNormalizationError):
    """An array column uses an element type tag we have no mapping for."""

    def __init__(self, udt_name: str):
        super().__init__(
            f"Unknown array element type: {udt_name!r}",
            code="UNKNOWN_ARRAY_ELEMENT_TYPE",
            details={"udt_name": udt_name},
        )
        self.udt_name = udt_name


class UnrecognizedDataType(TypeNormalizationError):
    """A declared type name is not part of the column type vocabulary."""

    def __init__(self, data_type: str):
        super().__init__(
            f"Unrecognized data type: {data_type!r}",
            code="UNRECOGNIZED_DATA_TYPE",
            details={"data_type": data_type},
        )
        self.data_type = data_type
