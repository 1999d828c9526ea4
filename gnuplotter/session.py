# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

"""
Plot sessions: a pipe to a ``gnuplot`` process plus the scratch files its
plot statements read from.

A :class:`PlotSession` owns the channel and the scratch-file counter.  Every
``create_*`` call starts a new plot statement and returns a :class:`Figure`;
further series are appended through that figure, so a continuation clause can
never be sent before the statement it continues.

    with PlotSession(1200, 900) as session:
        session.set_save_path("plot.png")
        fig = session.create_plot([0.2, 0.3, 0.1], title="a")
        fig.add_scatter([0.1, 0.4, 0.2], title="b", marker="x")
        session.plot()
"""

from __future__ import annotations

import contextlib
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping, Sequence

from .data import ShapeMismatchError, as_column
from .plots import (
    PlotClause,
    prepare_box_plot,
    prepare_fill_between,
    prepare_histogram,
    prepare_line3d,
    prepare_line_plot,
    prepare_scatter,
)
from .styles import DashType, LineStyle, Marker, MarkerStyle, Smoothing
from .utils import ensure_dir, format_number, quote, range_commands, tics_command


class FigureClosedError(RuntimeError):
    """Raised when a series is added to a figure whose statement has ended."""


@dataclass(slots=True)
class SessionConfig:
    command: Sequence[str] = ("gnuplot", "-persistent")
    terminal: str = "pngcairo enhanced"
    debug_file: str | Path = "debug_plotter.txt"
    scratch_dir: str | Path = "."


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def _line_style(color, width, dash, marker, marker_size, smooth) -> LineStyle:
    return LineStyle(
        color=color,
        width=width,
        dash=DashType(dash),
        marker=None if marker is None else Marker.coerce(marker),
        marker_size=marker_size,
        smooth=None if smooth is None else Smoothing(smooth),
    )


class Figure:
    """
    The plot statement currently being built.

    The first series emitted opens the statement (``plot ...`` or ``splot ...``);
    each later one is appended as ``, <clause>``.  Once the statement has been
    ended, by :meth:`PlotSession.plot` or by any standalone command, the
    figure is closed and accepts no more series.
    """

    def __init__(self, session: "PlotSession", kind: str = "plot", *, auto_range: bool = False):
        self._session = session
        self.kind = kind
        self.auto_range = auto_range
        self.started = False
        self.closed = False
        self.epilogue: list[str] = []

    @property
    def is_open(self) -> bool:
        return not self.closed

    def _add(self, kind: str, suffix: str, prepare: Callable[..., PlotClause | None], *args, **kwargs) -> "Figure":
        if self.closed:
            raise FigureClosedError("This figure has already been rendered; start a new one with a create_* call.")
        if kind != self.kind:
            raise ValueError(f"Cannot add a '{kind}' series to a '{self.kind}' figure.")
        self._session._emit_series(self, suffix, prepare, *args, **kwargs)
        return self

    def add_plot(
        self,
        y: Iterable,
        x: Iterable | None = None,
        *,
        title: str | None = None,
        color=None,
        width: float = 1.0,
        dash: DashType | int = DashType.SOLID,
        marker: Marker | str | None = None,
        marker_size: float = 1.0,
        smooth: Smoothing | str | None = Smoothing.UNIQUE,
        shift: float = 0.0,
    ) -> "Figure":
        """
        Add a line series.  Without ``x`` the row index is used; ``shift`` is
        added to every x value.  ``color=None`` lets gnuplot pick the colour.
        """
        style = _line_style(color, width, dash, marker, marker_size, smooth)
        return self._add("plot", ".dat", prepare_line_plot, y, x, title=title, style=style, shift=shift)

    def add_scatter(
        self,
        y: Iterable,
        x: Iterable | None = None,
        *,
        title: str | None = None,
        marker: Marker | str = Marker.FILLED_CIRCLE,
        size: float = 1.0,
        color=None,
        shift: float = 0.0,
    ) -> "Figure":
        style = MarkerStyle(marker=Marker.coerce(marker), size=size, color=color)
        return self._add("plot", ".dat", prepare_scatter, y, x, title=title, style=style, shift=shift)

    def add_histogram(
        self,
        values: Iterable,
        *,
        bins: int | Sequence[float] = 10,
        value_range: tuple[float, float] | None = None,
        density: bool = False,
        title: str | None = None,
        color=None,
        alpha: float = 0.5,
    ) -> "Figure":
        return self._add(
            "plot",
            "hist.dat",
            prepare_histogram,
            values,
            bins=bins,
            value_range=value_range,
            density=density,
            title=title,
            color=color,
            alpha=alpha,
        )

    def add_line3d(
        self,
        x: Iterable,
        y: Iterable,
        z: Iterable,
        *,
        title: str | None = None,
        color=None,
        width: float = 1.0,
        dash: DashType | int = DashType.SOLID,
        marker: Marker | str | None = None,
        marker_size: float = 1.0,
    ) -> "Figure":
        style = _line_style(color, width, dash, marker, marker_size, None)
        return self._add("splot", ".dat", prepare_line3d, x, y, z, title=title, style=style)

    def fill_between(
        self,
        upper: Iterable,
        lower: Iterable,
        x: Iterable | None = None,
        *,
        alpha: float = 0.2,
        color=None,
        title: str | None = None,
        shift: float = 0.0,
    ) -> "Figure":
        """
        Shade the region between ``upper`` and ``lower`` with transparency ``alpha``.
        """
        return self._add(
            "plot",
            ".dat",
            prepare_fill_between,
            upper,
            lower,
            x,
            alpha=alpha,
            color=color,
            title=title,
            shift=shift,
        )


class PlotSession:
    """
    One conversation with a gnuplot process.

    In debug mode the commands go to ``config.debug_file`` instead of a
    process, and scratch files are kept on teardown so both can be inspected.
    If the channel cannot be opened a warning is printed and every operation
    becomes a no-op.
    """

    def __init__(
        self,
        width: int = 1200,
        height: int = 900,
        font_size: int = 20,
        debug: bool = False,
        *,
        config: SessionConfig | None = None,
    ):
        self.config = config or SessionConfig()
        self.debug = debug
        self.width = width
        self.height = height
        self.font_size = font_size

        self._scratch_dir = Path(self.config.scratch_dir)
        self._counter = 0
        self._scratch_files: list[Path] = []
        self._figure: Figure | None = None
        self._multiplot = False
        self._closed = False
        self._process: subprocess.Popen | None = None
        self._channel = self._open_channel()

        if self._channel is not None:
            ensure_dir(self._scratch_dir)
        self._write(self._terminal_command(width, height, font_size) + "\n")

    # ------------------------------------------------------------------
    # channel handling
    # ------------------------------------------------------------------

    def _open_channel(self):
        if self.debug:
            try:
                return open(self.config.debug_file, "w", encoding="utf-8")
            except OSError as exc:
                _warn(f"could not open debug file {self.config.debug_file} ({exc}); plotting disabled.")
                return None

        command = list(self.config.command)
        try:
            self._process = subprocess.Popen(command, stdin=subprocess.PIPE, text=True, encoding="utf-8")
        except OSError as exc:
            _warn(f"could not start {command[0]!r} ({exc}); plotting disabled.")
            return None
        return self._process.stdin

    def _drop_channel(self) -> None:
        channel, self._channel = self._channel, None
        # The pipe may already be broken; closing it can raise again.
        with contextlib.suppress(OSError):
            channel.close()

    def _write(self, text: str) -> None:
        if self._channel is None:
            return
        try:
            self._channel.write(text)
            self._channel.flush()
        except OSError as exc:
            _warn(f"lost connection to the renderer ({exc}); plotting disabled.")
            self._drop_channel()

    def _terminal_command(self, width: int, height: int, font_size: int) -> str:
        return f"set terminal {self.config.terminal} font ',{font_size}' size {width}, {height}"

    def _end_statement(self) -> None:
        figure = self._figure
        if figure is None or figure.closed:
            return
        if figure.started:
            self._write("\n")
        self._close_figure(figure)

    def _close_figure(self, figure: Figure) -> None:
        figure.closed = True
        if figure.started:
            for line in figure.epilogue:
                self._write(line + "\n")

    def _scratch_path(self, suffix: str) -> Path:
        return self._scratch_dir / f"{self._counter}{suffix}"

    def _emit_series(self, figure: Figure, suffix: str, prepare, *args, **kwargs) -> None:
        if self._channel is None:
            return

        path = self._scratch_path(suffix)
        ref = str(path)
        clause = prepare(ref, *args, **kwargs)
        if clause is None:
            return
        self._scratch_files.append(path)

        if not figure.started:
            lines = list(clause.preamble)
            if figure.auto_range:
                lines.extend(range_commands(ref, clause.axes, prefix=f"S{self._counter}"))
            for line in lines:
                self._write(line + "\n")
            self._write(f"{figure.kind} {clause.body}")
            figure.started = True
            figure.epilogue = list(clause.epilogue)
        else:
            self._write(f", {clause.body}")
        self._counter += 1

    def new_figure(self, kind: str = "plot", auto_range: bool = False) -> Figure:
        """
        End the current statement and return an empty figure; its first
        series opens the new ``plot`` (or ``splot``) statement.
        """
        if kind not in ("plot", "splot"):
            raise ValueError(f"kind must be 'plot' or 'splot', not {kind!r}")
        self._end_statement()
        self._figure = Figure(self, kind, auto_range=auto_range)
        return self._figure

    @property
    def is_open(self) -> bool:
        return self._channel is not None

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def scratch_files(self) -> tuple[Path, ...]:
        return tuple(self._scratch_files)

    @property
    def figure(self) -> Figure | None:
        return self._figure

    def close(self) -> None:
        """
        End any open statement, close the channel, wait for the renderer and
        remove the scratch files (kept in debug mode).
        """
        if self._closed:
            return
        self._closed = True

        self._end_statement()
        if self._multiplot:
            self.unset_multiplot()
        if self._channel is not None:
            self._drop_channel()
        if self._process is not None:
            self._process.wait()
            self._process = None

        if not self.debug:
            for path in self._scratch_files:
                path.unlink(missing_ok=True)

    def __enter__(self) -> "PlotSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # figure level commands
    # ------------------------------------------------------------------

    def command(self, text: str) -> None:
        """
        Send a raw gnuplot command, ending any open plot statement first.
        """
        self._end_statement()
        self._write(text + "\n")

    def reset(self, width: int = 1200, height: int = 900, font_size: int = 20) -> None:
        self.width, self.height, self.font_size = width, height, font_size
        self.command(self._terminal_command(width, height, font_size))

    def plot(self) -> None:
        """
        Render what has been accumulated.  The blank line ends the open
        statement, or acts as an empty command when there is none.
        """
        self._write("\n")
        if self._figure is not None and not self._figure.closed:
            self._close_figure(self._figure)

    def set_multiplot(self, rows: int = 3, cols: int = 4, title: str = "") -> None:
        self.command(f"set multiplot layout {rows}, {cols} title {quote(title)}")
        self._multiplot = True

    def unset_multiplot(self) -> None:
        self.command("unset multiplot")
        self._multiplot = False

    def set_save_path(self, path: str | Path) -> None:
        self.command(f"set output {quote(path)}")

    def set_title(self, title: str) -> None:
        self.command(f"set title {quote(title)}")

    def set_xlabel(self, label: str) -> None:
        self.command(f"set xlabel {quote(label)}")

    def set_ylabel(self, label: str) -> None:
        self.command(f"set ylabel {quote(label)}")

    def set_zlabel(self, label: str) -> None:
        self.command(f"set zlabel {quote(label)}")

    def _set_range(self, axis: str, lo: float | None, hi: float | None) -> None:
        lo_text = "*" if lo is None else format_number(lo)
        hi_text = "*" if hi is None else format_number(hi)
        self.command(f"set {axis}range [{lo_text}:{hi_text}]")

    def set_xlim(self, lo: float | None, hi: float | None) -> None:
        self._set_range("x", lo, hi)

    def set_ylim(self, lo: float | None, hi: float | None) -> None:
        self._set_range("y", lo, hi)

    def set_zlim(self, lo: float | None, hi: float | None) -> None:
        self._set_range("z", lo, hi)

    def set_logscale(self, axes: str = "y", base: float | None = None) -> None:
        cmd = f"set logscale {axes}"
        if base is not None:
            cmd += f" {format_number(base)}"
        self.command(cmd)

    def unset_logscale(self, axes: str = "y") -> None:
        self.command(f"unset logscale {axes}")

    def grid(self, on: bool = True) -> None:
        self.command("set grid" if on else "unset grid")

    def legend(self, position: str = "top right", box: bool = False) -> None:
        self.command(f"set key {position} {'box' if box else 'nobox'}")

    def hide_legend(self) -> None:
        self.command("unset key")

    def set_view(self, rot_x: float = 60, rot_z: float = 30) -> None:
        self.command(f"set view {format_number(rot_x)}, {format_number(rot_z)}")

    def _ticks(self, axis: str, labels: Sequence, positions: Iterable[float] | None, rotate: float | None) -> None:
        labels = [str(label) for label in labels]
        if positions is None:
            positions = list(range(len(labels)))
        else:
            positions = list(as_column(positions, "positions"))
            if len(positions) != len(labels):
                raise ShapeMismatchError(
                    f"{axis}ticks got {len(labels)} labels but {len(positions)} positions."
                )
        if not labels:
            self.command(f"set {axis}tics autofreq")
            return
        self.command(tics_command(axis, labels, positions, rotate))

    def xticks(self, labels: Sequence, positions: Iterable[float] | None = None, *, rotate: float | None = None) -> None:
        """
        Replace the x tick marks with ``labels``, placed at ``positions`` or at
        0, 1, 2, ... when no positions are given.
        """
        self._ticks("x", labels, positions, rotate)

    def yticks(self, labels: Sequence, positions: Iterable[float] | None = None, *, rotate: float | None = None) -> None:
        self._ticks("y", labels, positions, rotate)

    # ------------------------------------------------------------------
    # figures
    # ------------------------------------------------------------------

    def create_plot(self, y: Iterable, x: Iterable | None = None, *, auto_range: bool = False, **options) -> Figure:
        """
        Start a new figure with a line series.  ``options`` are those of
        :meth:`Figure.add_plot`; ``auto_range`` fits the axes to the data with
        a 5% margin.
        """
        return self.new_figure("plot", auto_range).add_plot(y, x, **options)

    def create_scatter(self, y: Iterable, x: Iterable | None = None, *, auto_range: bool = False, **options) -> Figure:
        return self.new_figure("plot", auto_range).add_scatter(y, x, **options)

    def create_histogram(self, values: Iterable, *, auto_range: bool = False, **options) -> Figure:
        return self.new_figure("plot", auto_range).add_histogram(values, **options)

    def create_line3d(self, x: Iterable, y: Iterable, z: Iterable, *, auto_range: bool = False, **options) -> Figure:
        return self.new_figure("splot", auto_range).add_line3d(x, y, z, **options)

    def create_box_plot(
        self,
        groups: Mapping[str, Iterable] | Sequence[Iterable],
        *,
        labels: Sequence[str] | None = None,
        show_xticks: bool = True,
        box_width: float = 0.5,
        color=None,
        palette: str | Sequence | None = None,
    ) -> Figure:
        """
        Start a new figure with one box per group.  Mapping keys (or
        ``labels``) become the category tick labels.
        """
        figure = self.new_figure("plot")
        return figure._add(
            "plot",
            "box.dat",
            prepare_box_plot,
            groups,
            labels=labels,
            show_xticks=show_xticks,
            box_width=box_width,
            color=color,
            palette=palette,
        )
