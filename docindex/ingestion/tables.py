"""Turn extracted tables into numbered markup fragments."""

from __future__ import annotations

import html
from typing import Iterable, List, Optional, Sequence

from bs4 import Tag

from docindex.models.document import Table
from docindex.utils.counters import RunCounters

Grid = Sequence[Sequence[Optional[str]]]


def project_from_markup(body: Optional[Tag], counters: RunCounters) -> List[Table]:
    """Every <table> element of the body, serialized verbatim, in document order."""
    if body is None:
        return []
    return [Table(id=counters.next_table(), content=str(node)) for node in body.find_all("table")]


def render_cell(cell: Optional[str]) -> str:
    return "<td>" + html.escape(cell or "", quote=False) + "</td>"


def render_grid(grid: Grid) -> str:
    rows = ["<tr>" + "".join(render_cell(cell) for cell in row) + "</tr>" for row in grid]
    return "<table>\n" + " ".join(rows) + "</table>"


def project_from_grid(grid: Grid, counters: RunCounters) -> Table:
    return Table(id=counters.next_table(), content=render_grid(grid))


def project_from_grids(grids: Iterable[Grid], counters: RunCounters) -> List[Table]:
    # Rendering is independent per grid; ids are handed out afterwards in grid order.
    rendered = [render_grid(grid) for grid in grids]
    return [Table(id=counters.next_table(), content=content) for content in rendered]
