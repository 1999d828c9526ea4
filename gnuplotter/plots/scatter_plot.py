# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from typing import Iterable

from ..data import as_column, resolve_x, write_columns
from ..styles import MarkerStyle
from ..utils import quote, title_clause
from .clause import PlotClause
from .line_plot import MIN_POINTS, xy_using


def prepare_scatter(
    path: str,
    y: Iterable,
    x: Iterable | None = None,
    *,
    title: str | None = None,
    style: MarkerStyle | None = None,
    shift: float = 0.0,
) -> PlotClause | None:
    style = style or MarkerStyle()
    ys = as_column(y, "y")
    xs = resolve_x(ys, x, shift)
    if len(ys) < MIN_POINTS:
        return None

    using, axes = xy_using(xs)
    body = f"{quote(path)} using {using} {style.with_clause()} {title_clause(title)}"
    write_columns(path, [xs, ys])
    return PlotClause(body, axes=axes)
