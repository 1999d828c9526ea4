# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..data import as_column, check_same_length, write_columns
from ..styles import LineStyle
from ..utils import quote, title_clause
from .clause import PlotClause
from .line_plot import MIN_POINTS


def prepare_line3d(
    path: str,
    x: Iterable,
    y: Iterable,
    z: Iterable,
    *,
    title: str | None = None,
    style: LineStyle | None = None,
) -> PlotClause | None:
    """
    Write an (x, y, z) scratch file and format an ``splot`` clause for it.
    Smoothing does not apply to 3D data and is dropped from ``style``.
    """
    style = replace(style or LineStyle(), smooth=None)
    xs, ys, zs = as_column(x, "x"), as_column(y, "y"), as_column(z, "z")
    check_same_length(x=xs, y=ys, z=zs)
    if len(xs) < MIN_POINTS:
        return None

    body = f"{quote(path)} using 1:2:3 {style.with_clause()} {title_clause(title)}"
    write_columns(path, [xs, ys, zs])
    return PlotClause(body, axes={"x": 1, "y": 2, "z": 3})
