import enum
import os

from .dates import shift_month
from .events import Category
from .month_grid import build_month_grid, month_cells, month_header, weekday_banner
from .shared import MONTH_WIDTH, PAGE_WIDTH, RESET, pad_visible

MONTHS_PER_ROW = 3
LEGEND_MARKER = "*" if os.name == "nt" else "●"


class ViewMode(enum.Enum):
    MONTH = "month"
    THREE = "three"
    YEAR = "year"
    TWELVE = "twelve"


def select_mode(three=False, year=False, twelve=False):
    if twelve:
        return ViewMode.TWELVE
    if year:
        return ViewMode.YEAR
    if three:
        return ViewMode.THREE
    return ViewMode.MONTH


def three_months(year, month):
    return [shift_month(year, month, delta) for delta in (-1, 0, 1)]


def twelve_months(year, month):
    return [shift_month(year, month, delta) for delta in range(12)]


def render_horizontal(grids, context):
    """Lay month grids side by side, one blank column between them."""
    if not grids:
        return []

    lines = [
        " ".join(pad_visible(grid.header, MONTH_WIDTH) for grid in grids),
        " ".join(weekday_banner(context.colors, context.week_start) for _ in grids),
    ]

    max_weeks = max(len(grid.weeks) for grid in grids)
    for week in range(max_weeks):
        row = []
        for grid in grids:
            if week < len(grid.weeks):
                row.append(pad_visible(grid.weeks[week], MONTH_WIDTH))
            else:
                row.append(" " * MONTH_WIDTH)
        lines.append(" ".join(row))
    return lines


def render_single_month(year, month, context):
    header = month_header(year, month, context.colors, full_name=True)
    lines = [header, weekday_banner(context.colors, context.week_start)]
    for row in month_cells(year, month, context):
        while row and row[-1] is None:
            row.pop()
        lines.append("".join("   " if cell is None else f"{cell} " for cell in row))
    return lines


def render_three_months(year, month, context):
    grids = [build_month_grid(y, m, context) for y, m in three_months(year, month)]
    return render_horizontal(grids, context)


def _render_rows(label_year, months, context):
    label = str(label_year)
    lines = [" " * ((PAGE_WIDTH - len(label)) // 2) + label, ""]
    for start in range(0, len(months), MONTHS_PER_ROW):
        grids = [
            build_month_grid(y, m, context)
            for y, m in months[start : start + MONTHS_PER_ROW]
        ]
        lines.extend(render_horizontal(grids, context))
        lines.append("")
    return lines


def render_year(year, context):
    return _render_rows(year, [(year, month) for month in range(1, 13)], context)


def render_twelve_months(year, month, context):
    return _render_rows(year, twelve_months(year, month), context)


def render_legend(colors):
    entries = [
        f"{colors.category(category)}{LEGEND_MARKER}{RESET} {category.value}"
        for category in Category
    ]
    return ["", "Legend:", "  ".join(entries)]


def render(mode, year, month, context):
    if mode is ViewMode.TWELVE:
        return render_twelve_months(year, month, context)
    if mode is ViewMode.YEAR:
        return render_year(year, context)
    if mode is ViewMode.THREE:
        return render_three_months(year, month, context)
    return render_single_month(year, month, context)


def run(mode, year, month, context):
    lines = render(mode, year, month, context)
    if len(context.events):
        lines.extend(render_legend(context.colors))
    for line in lines:
        print(line)
