# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

"""
Drive gnuplot from Python.

:class:`PlotSession` streams commands to a ``gnuplot`` process and stages
series data in scratch files; :class:`Figure` is the plot statement being
built.  Invoke ``python -m gnuplotter`` to plot columns of a CSV file from the
command line.
"""

from .data import ShapeMismatchError, TableEmptyError
from .session import Figure, FigureClosedError, PlotSession, SessionConfig
from .styles import DashType, LineStyle, Marker, MarkerStyle, Smoothing

__all__ = [
    "DashType",
    "Figure",
    "FigureClosedError",
    "LineStyle",
    "Marker",
    "MarkerStyle",
    "PlotSession",
    "SessionConfig",
    "ShapeMismatchError",
    "Smoothing",
    "TableEmptyError",
]
