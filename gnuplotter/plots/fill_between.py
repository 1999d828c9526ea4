# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from typing import Iterable

from ..data import as_column, check_same_length, resolve_x, write_columns
from ..utils import format_color, format_number, quote, title_clause
from .clause import PlotClause
from .line_plot import MIN_POINTS

DEFAULT_ALPHA = 0.2


def prepare_fill_between(
    path: str,
    upper: Iterable,
    lower: Iterable,
    x: Iterable | None = None,
    *,
    alpha: float = DEFAULT_ALPHA,
    color=None,
    title: str | None = None,
    shift: float = 0.0,
) -> PlotClause | None:
    """
    Write (x, upper, lower) rows and format a translucent ``filledcurves``
    clause shading the band between the two curves.
    """
    ub, lb = as_column(upper, "upper"), as_column(lower, "lower")
    check_same_length(upper=ub, lower=lb)
    xs = resolve_x(ub, x, shift)
    if len(ub) < MIN_POINTS:
        return None

    body = f"{quote(path)} using 1:2:3 with filledcurves fs transparent solid {format_number(alpha)} noborder"
    if color is not None:
        body += f" lc rgb {format_color(color)}"
    body += f" {title_clause(title)}"
    write_columns(path, [xs, ub, lb])
    return PlotClause(body, axes={"x": 1})
