# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from ..data import as_column, write_columns
from ..utils import format_color, format_number, quote, title_clause
from .clause import PlotClause


def prepare_histogram(
    path: str,
    values: Iterable,
    *,
    bins: int | Sequence[float] = 10,
    value_range: tuple[float, float] | None = None,
    density: bool = False,
    title: str | None = None,
    color=None,
    alpha: float = 0.5,
) -> PlotClause | None:
    """
    Bin ``values`` with numpy and write one (centre, count, width) row per bin.
    NaN values are ignored; an empty sample is skipped.
    """
    data = as_column(values, "values").astype(float)
    data = data[~np.isnan(data)]
    if data.size == 0:
        return None

    counts, edges = np.histogram(data, bins=bins, range=value_range, density=density)
    centres = (edges[:-1] + edges[1:]) / 2.0
    widths = np.diff(edges)

    body = f"{quote(path)} using 1:2:3 with boxes fs solid {format_number(alpha)}"
    if color is not None:
        body += f" lc rgb {format_color(color)}"
    body += f" {title_clause(title)}"
    write_columns(path, [centres, counts, widths])
    return PlotClause(body, axes={"x": 1, "y": 2})
