"""schemaconv - normalize database table schemas into portable column types."""

__version__ = "0.1.0"
