# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..data import as_column, is_numeric, resolve_x, write_columns
from ..styles import LineStyle
from ..utils import quote, title_clause
from .clause import PlotClause

MIN_POINTS = 2


def xy_using(x: np.ndarray) -> tuple[str, dict[str, int]]:
    """
    Return the ``using`` spec and the auto-range axes for an (x, y) file.
    Text x values are plotted against the row index and shown as tick labels.
    """
    if is_numeric(x):
        return "1:2", {"x": 1, "y": 2}
    return "0:2:xtic(1)", {"y": 2}


def prepare_line_plot(
    path: str,
    y: Iterable,
    x: Iterable | None = None,
    *,
    title: str | None = None,
    style: LineStyle | None = None,
    shift: float = 0.0,
) -> PlotClause | None:
    """
    Write the (x, y) scratch file for a line series and format its clause.
    Series shorter than two points are skipped and ``None`` is returned.
    """
    style = style or LineStyle()
    ys = as_column(y, "y")
    xs = resolve_x(ys, x, shift)
    if len(ys) < MIN_POINTS:
        return None

    using, axes = xy_using(xs)
    body = f"{quote(path)} using {using}{style.smooth_clause()} {style.with_clause()} {title_clause(title)}"
    write_columns(path, [xs, ys])
    return PlotClause(body, axes=axes)
