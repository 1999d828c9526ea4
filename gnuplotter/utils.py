from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import matplotlib.colors as mcolors
import seaborn as sns

RANGE_PADDING = 0.05


def ensure_dir(path: str | Path) -> Path:
    """
    Create ``path`` if it does not already exist and return it as ``Path``.
    """
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def quote(text: object) -> str:
    """
    Wrap ``text`` in a gnuplot single-quoted string.  Embedded quotes are doubled.
    """
    return "'" + str(text).replace("'", "''") + "'"


def format_number(value: float | int) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{float(value):.10g}"


def format_color(color) -> str:
    """
    Convert any matplotlib colour spec (name, hex string, RGB(A) tuple) into the
    ``'#rrggbb'`` form gnuplot accepts after ``lc rgb``.
    """
    return quote(mcolors.to_hex(color))


def build_palette(n_colors: int, palette: str | Sequence = "tab10") -> list[str]:
    """
    Return ``n_colors`` hex colours drawn from a seaborn/matplotlib palette.
    The palette is cycled if more colours are requested than it holds.
    """
    colors = sns.color_palette(palette)
    return [mcolors.to_hex(colors[i % len(colors)]) for i in range(n_colors)]


def title_clause(title: str | None) -> str:
    if not title:
        return "notitle"
    return f"title {quote(title)}"


def tics_command(axis: str, labels: Sequence[str], positions: Iterable[float], rotate: float | None = None) -> str:
    entries = ", ".join(f"{quote(label)} {format_number(pos)}" for label, pos in zip(labels, positions))
    if rotate is not None:
        return f"set {axis}tics rotate by {format_number(rotate)} right ({entries})"
    return f"set {axis}tics ({entries})"


def range_commands(path: str, columns: dict[str, int], prefix: str, padding: float = RANGE_PADDING) -> list[str]:
    """
    Ask gnuplot for the min/max of each column of ``path`` and set the matching
    axis range, padded by ``padding`` times the data span on both sides.
    """
    commands = []
    for axis, column in columns.items():
        name = f"{prefix}_{axis}"
        lo, hi = f"{name}_min", f"{name}_max"
        pad = f"{format_number(padding)}*({hi} - {lo})"
        commands.append(f"stats {quote(path)} using {column} nooutput name {quote(name)}")
        commands.append(f"set {axis}range [{lo} - {pad}:{hi} + {pad}]")
    return commands
