# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..data import box_groups, check_same_length, write_columns
from ..utils import build_palette, format_color, format_number, quote, tics_command
from .clause import PlotClause

OUTLIER_POINT_TYPE = 7


def prepare_box_plot(
    path: str,
    groups: Mapping[str, Iterable] | Sequence[Iterable],
    *,
    labels: Sequence[str] | None = None,
    show_xticks: bool = True,
    box_width: float = 0.5,
    color=None,
    palette: str | Sequence | None = None,
) -> PlotClause | None:
    """
    Write one column per group (padded with ``NaN``) and format one
    ``boxplot`` clause per group, the i-th box centred at x = i.

    ``color`` paints every box the same; ``palette`` assigns one colour per
    group.  With neither, gnuplot cycles its own line types.  The boxplot
    style, missing-value marker and category ticks are restored once the
    statement ends.
    """
    names, columns = box_groups(groups)
    if not columns or all(len(col) == 0 for col in columns):
        return None

    if labels is None:
        labels = names if names is not None else [str(i + 1) for i in range(len(columns))]
    check_same_length(labels=labels, groups=columns)

    if color is not None:
        colors = [format_color(color)] * len(columns)
    elif palette is not None:
        colors = [quote(c) for c in build_palette(len(columns), palette)]
    else:
        colors = [None] * len(columns)

    write_columns(path, columns)

    width = format_number(box_width)
    clauses = []
    for i, clause_color in enumerate(colors, start=1):
        source = quote(path) if i == 1 else "''"
        clause = f"{source} using ({i}):{i}:({width}) with boxplot"
        if clause_color is not None:
            clause += f" lc rgb {clause_color}"
        clauses.append(clause + " notitle")

    preamble = [
        f"set style boxplot outliers pointtype {OUTLIER_POINT_TYPE}",
        "set datafile missing 'NaN'",
    ]
    epilogue = ["unset style boxplot", "unset datafile"]
    if show_xticks:
        preamble.append(tics_command("x", labels, range(1, len(columns) + 1)))
        epilogue.append("set xtics autofreq")
    return PlotClause(", ".join(clauses), axes={}, preamble=preamble, epilogue=epilogue)
