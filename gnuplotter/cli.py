from __future__ import annotations

import argparse

import pandas as pd

from .data import TableEmptyError, read_table, select_columns
from .session import PlotSession, SessionConfig


def _split_list(value: str | None) -> list[str] | None:
    if value is None:
        return None
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def _open_session(args) -> PlotSession:
    config = SessionConfig(command=(args.gnuplot, "-persistent"), debug_file=args.debug_file)
    session = PlotSession(args.width, args.height, args.font_size, args.debug, config=config)
    session.set_save_path(args.output)
    if args.title:
        session.set_title(args.title)
    if args.xlabel:
        session.set_xlabel(args.xlabel)
    if args.ylabel:
        session.set_ylabel(args.ylabel)
    if args.logy:
        session.set_logscale("y")
    if args.grid:
        session.grid()
    return session


def _xy_frame(args) -> tuple[pd.DataFrame, list[str]]:
    df = read_table(args.input)
    y_cols = _split_list(args.y) or []
    if not y_cols:
        raise TableEmptyError("No y columns requested.")
    wanted = ([args.x] if args.x else []) + y_cols
    return select_columns(df, wanted), y_cols


def _line_command(args) -> None:
    df, y_cols = _xy_frame(args)
    x = df[args.x] if args.x else None
    with _open_session(args) as session:
        figure = session.create_plot(df[y_cols[0]], x, title=y_cols[0], auto_range=args.auto_range, smooth=None)
        for col in y_cols[1:]:
            figure.add_plot(df[col], x, title=col, smooth=None)
        session.plot()


def _scatter_command(args) -> None:
    df, y_cols = _xy_frame(args)
    x = df[args.x] if args.x else None
    with _open_session(args) as session:
        figure = session.create_scatter(
            df[y_cols[0]], x, title=y_cols[0], marker=args.marker, size=args.size, auto_range=args.auto_range
        )
        for col in y_cols[1:]:
            figure.add_scatter(df[col], x, title=col, marker=args.marker, size=args.size)
        session.plot()


def _hist_command(args) -> None:
    df = select_columns(read_table(args.input), [args.column])
    with _open_session(args) as session:
        session.create_histogram(df[args.column], bins=args.bins, density=args.density, title=args.column)
        session.plot()


def _box_command(args) -> None:
    columns = _split_list(args.columns) or []
    df = select_columns(read_table(args.input), columns)
    with _open_session(args) as session:
        session.create_box_plot(df, palette=args.palette)
        session.plot()


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", required=True, help="Path to the CSV file to plot.")
    parser.add_argument("--output", default="plot.png", help="Image written by gnuplot (default: plot.png).")
    parser.add_argument("--title", help="Figure title.")
    parser.add_argument("--xlabel", help="X axis label.")
    parser.add_argument("--ylabel", help="Y axis label.")
    parser.add_argument("--logy", action="store_true", help="Use a logarithmic y axis.")
    parser.add_argument("--grid", action="store_true", help="Draw a background grid.")
    parser.add_argument("--width", type=int, default=1200, help="Canvas width in pixels.")
    parser.add_argument("--height", type=int, default=900, help="Canvas height in pixels.")
    parser.add_argument("--font-size", type=int, default=20, dest="font_size", help="Font size in points.")
    parser.add_argument("--gnuplot", default="gnuplot", help="gnuplot executable to run.")
    parser.add_argument("--debug", action="store_true", help="Write commands to --debug-file instead of gnuplot.")
    parser.add_argument("--debug-file", default="debug_plotter.txt", dest="debug_file", help="Command log used with --debug.")


def _add_xy_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--x", help="Column used as x (default: row index).")
    parser.add_argument("--y", required=True, help="Columns to plot against x (comma separated).")
    parser.add_argument("--auto-range", action="store_true", dest="auto_range", help="Fit axes to the data with a 5%% margin.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plot CSV columns with gnuplot.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    line_parser = subparsers.add_parser("line", help="Draw one line per y column.")
    _add_common_options(line_parser)
    _add_xy_options(line_parser)
    line_parser.set_defaults(func=_line_command)

    scatter_parser = subparsers.add_parser("scatter", help="Draw one point cloud per y column.")
    _add_common_options(scatter_parser)
    _add_xy_options(scatter_parser)
    scatter_parser.add_argument("--marker", default="o", help="Marker code: . + x * s o ^ v D (default: o).")
    scatter_parser.add_argument("--size", type=float, default=1.0, help="Marker size.")
    scatter_parser.set_defaults(func=_scatter_command)

    hist_parser = subparsers.add_parser("hist", help="Draw the histogram of one column.")
    _add_common_options(hist_parser)
    hist_parser.add_argument("--column", required=True, help="Column to bin.")
    hist_parser.add_argument("--bins", type=int, default=10, help="Number of bins (default: 10).")
    hist_parser.add_argument("--density", action="store_true", help="Normalise counts to a density.")
    hist_parser.set_defaults(func=_hist_command)

    box_parser = subparsers.add_parser("box", help="Draw one box per column.")
    _add_common_options(box_parser)
    box_parser.add_argument("--columns", required=True, help="Columns to compare (comma separated).")
    box_parser.add_argument("--palette", help="Seaborn palette used to colour the boxes (e.g. tab10).")
    box_parser.set_defaults(func=_box_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (TableEmptyError, ValueError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
