"""
Terminal rendering for grids and point sets.

Provides two rendering approaches:
1. Grid rendering - every cell of a Grid, optionally bordered and coloured
2. Point rendering - a sparse set of points plotted inside an Area
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

import simple_chalk as chalk  # type: ignore[import-untyped]

from area import Area
from grid import Grid
from pos import Pos

__all__ = ["RenderOptions", "PALETTE", "cell_colors", "render_grid", "render_points"]

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]

PALETTE: list[Colorizer] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


@dataclass(frozen=True)
class RenderOptions:
    """Layout options shared by the renderers."""

    cell_width: int = 1  # Characters per cell; content is centred
    border: bool = True  # Draw a box around the cells
    title: str | None = None  # Centred in the top border
    top_down: bool = True  # Draw min_y first (raster order); False puts max_y on top


def cell_colors(values: Iterable[str]) -> dict[str, Colorizer]:
    """Assign palette colours to distinct cell strings, in sorted order."""
    return {value: PALETTE[i % len(PALETTE)] for i, value in enumerate(sorted(set(values)))}


def _plain(text: str) -> str:
    return text


def _frame(body: list[list[str]], options: RenderOptions) -> str:
    """Join cell strings into lines and add the optional border."""
    if not options.border:
        return "\n".join("".join(row) for row in body)

    inner_width = (len(body[0]) if body else 0) * options.cell_width
    top = "─" * inner_width
    title = f" {options.title} " if options.title else ""
    if title and len(title) <= inner_width:
        start = (inner_width - len(title)) // 2
        top = "─" * start + title + "─" * (inner_width - start - len(title))

    lines = ["┌" + top + "┐"]
    lines.extend("│" + "".join(row) + "│" for row in body)
    lines.append("└" + "─" * inner_width + "┘")
    return "\n".join(lines)


def _cell(
    content: str,
    highlighted: bool,
    colors: Mapping[str, Colorizer] | None,
    options: RenderOptions,
) -> str:
    colorize = colors.get(content, _plain) if colors is not None else _plain
    if options.cell_width > 1:
        content = content.center(options.cell_width)

    if highlighted:
        return chalk.bgWhite.black(content)
    return colorize(content)


def render_grid(
    grid: Grid,
    highlights: Iterable[Pos[int]] = (),
    colors: Mapping[str, Colorizer] | None = None,
    options: RenderOptions = RenderOptions(),
) -> str:
    """
    Render every cell of a grid, one character (or cell_width characters) per cell.

    Args:
        grid: The grid to render
        highlights: Positions drawn with a white background
        colors: Optional colouriser per formatted cell string (see cell_colors)
        options: Layout options

    Returns:
        Rendered string, rows separated by newlines
    """
    marked: set[tuple[int, int]] = {(p.x, p.y) for p in highlights}
    rows = list(enumerate(grid.rows()))
    if not options.top_down:
        rows.reverse()

    body: list[list[str]] = []
    for y, row in rows:
        body.append(
            [
                _cell(grid.format_cell(cell), (x, y) in marked, colors, options)
                for x, cell in enumerate(row)
            ]
        )

    logger.debug("render_grid: %dx%d cells, %d highlighted", grid.width, grid.height, len(marked))
    return _frame(body, options)


def render_points(
    area: Area,
    points: Iterable[Pos],
    marker: str = "#",
    empty: str = ".",
    highlights: Iterable[Pos] = (),
    options: RenderOptions = RenderOptions(),
) -> str:
    """
    Plot points inside an area; points outside the area are ignored.

    Every in-area point is drawn with marker and everything else with empty.
    """
    plotted = {(p.x, p.y) for p in area.filter_points(points)}
    marked = {(p.x, p.y) for p in highlights}

    by_row: dict[object, list[str]] = {}
    for pos in area:
        content = marker if (pos.x, pos.y) in plotted else empty
        by_row.setdefault(pos.y, []).append(_cell(content, (pos.x, pos.y) in marked, None, options))

    body = list(by_row.values())
    if not options.top_down:
        body.reverse()

    logger.debug("render_points: %d of the given points inside %s", len(plotted), area)
    return _frame(body, options)
