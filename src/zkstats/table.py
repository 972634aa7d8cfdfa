"""Fixed-width Markdown table of notes per month."""
from __future__ import annotations

from typing import Iterable

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_YEAR_HEADER = "Year"


def render_monthly_table(counts: dict[str, int]) -> str:
    """Render *counts* ("YYYY-MM" -> n) as one row per year, one column per month.

    Only years present in *counts* get a row; gaps are not filled in. All
    month columns share one width: the wider of the month names and the
    longest count. Cells are left-aligned and every row ends with a newline.
    """
    years = sorted({key[:4] for key in counts})

    year_width = max([len(_YEAR_HEADER)] + [len(y) for y in years])
    count_width = max([1] + [len(str(n)) for n in counts.values()])
    month_width = max(max(len(m) for m in MONTHS), count_width)

    lines = [
        _row(_YEAR_HEADER, MONTHS, year_width, month_width),
        "|" + "-" * (year_width + 2) + "|"
        + "|".join("-" * (month_width + 2) for _ in MONTHS) + "|",
    ]
    for year in years:
        cells = [str(counts.get(f"{year}-{i:02d}", 0)) for i in range(1, 13)]
        lines.append(_row(year, cells, year_width, month_width))

    return "".join(line + "\n" for line in lines)


def _row(first: str, cells: Iterable[str], first_width: int, cell_width: int) -> str:
    return (
        f"| {first.ljust(first_width)} |"
        + "".join(f" {cell.ljust(cell_width)} |" for cell in cells)
    )
