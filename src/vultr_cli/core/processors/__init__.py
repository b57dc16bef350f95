"""Output processors."""

from .table_formatter import format_cell, format_table

__all__ = ["format_cell", "format_table"]
