"""Renderers for fetched tables."""

import io
import json
from enum import Enum

from rich.console import Console
from rich.table import Table as RichTable

from .database import Table, TableIntrospector


class OutputFormat(str, Enum):
    SUMMARY = "summary"
    JSON = "json"
    SELECT_LIST = "select-list"


def render_json(table: Table) -> str:
    return json.dumps(table.to_dict(), indent=2)


def render_select_list(introspector: TableIntrospector, table: Table) -> str:
    return introspector.select_list(table)


def build_summary(table: Table) -> RichTable:
    """Build a rich table listing the columns in ordinal order."""
    summary = RichTable(title=f"Columns in {table.name}")
    summary.add_column("#", justify="right", style="dim")
    summary.add_column("Column", style="cyan")
    summary.add_column("Type", style="green")
    summary.add_column("Nullable")

    for position, col in enumerate(table.columns, start=1):
        summary.add_row(
            str(position),
            col.name,
            str(col.data_type),
            "YES" if col.is_nullable else "NO",
        )

    return summary


def render_summary(table: Table, width: int = 100) -> str:
    """Render the summary table as plain text, for writing to a file."""
    buf = io.StringIO()
    Console(file=buf, width=width, color_system=None).print(build_summary(table))
    return buf.getvalue().rstrip("\n")
