"""
Plain-text grid rendering in Markdown pipe-table form.

    |   NAME   |        DESCRIPTION         |
    |----------|----------------------------|
    | `note`   | The note about the action. |

Left and right borders, no top or bottom border, ``|`` as the column
separator. Column widths fit the widest cell (and the header label plus two);
cells wider than ``max_column_width`` are word-wrapped onto continuation lines.
"""

from __future__ import annotations

from typing import Optional, Sequence

from tabulate import tabulate

from describe_action.models.run_config import MAX_COLUMN_WIDTH

TABLE_FORMAT = "github"


def _overflows(rows: Sequence[Sequence[str]], max_width: int) -> bool:
    return any(
        len(line) > max_width
        for row in rows
        for cell in row
        for line in cell.splitlines()
    )


def render_grid(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    max_column_width: int = MAX_COLUMN_WIDTH,
) -> str:
    """Render ``header`` and ``rows`` as an aligned pipe table.

    Header labels are upper-cased and centred; body cells are left-aligned
    and never parsed as numbers. Every line, including the last, ends with a
    newline.
    """
    # tabulate's wrapper folds embedded newlines, so only wrap on overflow
    maxcolwidths: Optional[int] = max_column_width if _overflows(rows, max_column_width) else None

    table = tabulate(
        [list(row) for row in rows],
        headers=[label.upper() for label in header],
        tablefmt=TABLE_FORMAT,
        headersglobalalign="center",
        maxcolwidths=maxcolwidths,
        disable_numparse=True,
    )
    return table + "\n"
