# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

"""
Concrete plot clauses.  Each module exposes a single ``prepare_*`` function
that writes one scratch file and returns the :class:`PlotClause` referencing
it, or ``None`` when the input is too small to plot.
"""

from .box_plot import prepare_box_plot
from .clause import PlotClause
from .fill_between import prepare_fill_between
from .histogram import prepare_histogram
from .line3d_plot import prepare_line3d
from .line_plot import prepare_line_plot
from .scatter_plot import prepare_scatter

__all__ = [
    "PlotClause",
    "prepare_box_plot",
    "prepare_fill_between",
    "prepare_histogram",
    "prepare_line3d",
    "prepare_line_plot",
    "prepare_scatter",
]
