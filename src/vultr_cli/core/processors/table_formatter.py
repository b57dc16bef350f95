#!/usr/bin/env python3
"""Fixed-width text table rendering."""

from typing import Any, Sequence

DEFAULT_DELIMITER = "\t"


def format_cell(value: Any, width: int) -> str:
    """Render a value with str() and truncate it to the column width."""
    text = str(value)
    return text[:width]


def format_table(
    rows: Sequence[Sequence[Any]],
    widths: Sequence[int],
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Render rows as aligned columns.

    Each cell is truncated to its width hint, then padded to the widest
    cell of its column. Lines end with a newline and carry no trailing
    whitespace.

    Raises:
        ValueError: if a row does not have one value per width hint
    """
    cells = []
    for index, row in enumerate(rows):
        if len(row) != len(widths):
            raise ValueError(
                f"Row {index} has {len(row)} columns, expected {len(widths)}"
            )
        cells.append([format_cell(value, width) for value, width in zip(row, widths)])

    if not cells:
        return ""

    column_widths = [max(len(row[i]) for row in cells) for i in range(len(widths))]

    lines = []
    for row in cells:
        padded = [cell.ljust(column_widths[i]) for i, cell in enumerate(row)]
        lines.append(delimiter.join(padded).rstrip() + "\n")
    return "".join(lines)
