# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

"""
Style vocabulary shared by every plot clause.

Enumerations carry the gnuplot numeric codes (``dashtype``/``pointtype``);
:class:`LineStyle` and :class:`MarkerStyle` render themselves into the
``with ...`` part of a clause.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .utils import format_color, format_number


class DashType(Enum):
    SOLID = 1
    DASH = 2
    DOT = 3
    DASH_N_DOT = 4
    DASH_N_DOUBLE_DOT = 5


class Marker(Enum):
    DOT = 0
    PLUS = 1
    CROSS = 2
    STAR = 3
    SQUARE = 4
    FILLED_SQUARE = 5
    CIRCLE = 6
    FILLED_CIRCLE = 7
    TRIANGLE = 8
    FILLED_TRIANGLE = 9
    TRIANGLE_DOWN = 10
    FILLED_TRIANGLE_DOWN = 11
    DIAMOND = 12
    FILLED_DIAMOND = 13

    @classmethod
    def coerce(cls, marker: "Marker | str") -> "Marker":
        """
        Accept either a :class:`Marker` or a matplotlib-style code such as
        ``"o"``, ``"x"`` or ``"s"``.
        """
        if isinstance(marker, cls):
            return marker
        try:
            return _MARKER_CODES[marker]
        except KeyError:
            raise ValueError(f"Unknown marker code {marker!r}") from None


_MARKER_CODES = {
    ".": Marker.DOT,
    "+": Marker.PLUS,
    "x": Marker.CROSS,
    "*": Marker.STAR,
    "s": Marker.FILLED_SQUARE,
    "o": Marker.FILLED_CIRCLE,
    "^": Marker.FILLED_TRIANGLE,
    "v": Marker.FILLED_TRIANGLE_DOWN,
    "D": Marker.FILLED_DIAMOND,
}


class Smoothing(Enum):
    UNIQUE = "unique"
    CSPLINES = "csplines"
    ACSPLINES = "acsplines"
    BEZIER = "bezier"
    SBEZIER = "sbezier"


@dataclass(slots=True, frozen=True)
class LineStyle:
    color: object = None
    width: float = 1.0
    dash: DashType = DashType.SOLID
    marker: Marker | None = None
    marker_size: float = 1.0
    smooth: Smoothing | None = Smoothing.UNIQUE

    def smooth_clause(self) -> str:
        return f" smooth {self.smooth.value}" if self.smooth is not None else ""

    def with_clause(self) -> str:
        parts = ["with linespoints" if self.marker is not None else "with lines"]
        if self.dash is not DashType.SOLID:
            parts.append(f"dt {self.dash.value}")
        parts.append(f"lw {format_number(self.width)}")
        if self.color is not None:
            parts.append(f"lc rgb {format_color(self.color)}")
        if self.marker is not None:
            parts.append(f"pt {self.marker.value} ps {format_number(self.marker_size)}")
        return " ".join(parts)


@dataclass(slots=True, frozen=True)
class MarkerStyle:
    marker: Marker = Marker.FILLED_CIRCLE
    size: float = 1.0
    color: object = None

    def with_clause(self) -> str:
        parts = [f"with points pt {self.marker.value} ps {format_number(self.size)}"]
        if self.color is not None:
            parts.append(f"lc rgb {format_color(self.color)}")
        return " ".join(parts)
