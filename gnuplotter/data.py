# Copyright (c) 2025 Daniele De Sensi e Saverio Pasqualoni
# Licensed under the MIT License

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Sequence

import numpy as np
import pandas as pd


class TableEmptyError(RuntimeError):
    """Raised when an input table holds no rows."""


class ShapeMismatchError(ValueError):
    """Raised when paired sequences (x/y, labels/positions, ...) differ in length."""


def as_column(values: Iterable, name: str = "values") -> np.ndarray:
    """
    Coerce ``values`` (list, tuple, numpy array, pandas Series) into a
    one-dimensional array, keeping text values as text.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        arr = values.to_numpy()
    elif isinstance(values, np.ndarray):
        arr = values
    else:
        arr = np.asarray(list(values))
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}.")
    return arr


def is_numeric(values: np.ndarray) -> bool:
    return values.dtype.kind in "biuf"


def check_same_length(**columns: Sequence) -> None:
    lengths = {name: len(col) for name, col in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        raise ShapeMismatchError(f"Sequences must have the same length ({detail}).")


def resolve_x(y: np.ndarray, x: Iterable | None, shift: float = 0.0) -> np.ndarray:
    """
    Return the x column for ``y``: the row index when ``x`` is omitted,
    otherwise ``x`` itself, with ``shift`` added in both cases.
    """
    if x is None:
        xs = np.arange(len(y))
    else:
        xs = as_column(x, "x")
        check_same_length(x=xs, y=y)
    if shift:
        if not is_numeric(xs):
            raise TypeError("shift can only be applied to numeric x values.")
        xs = xs + shift
    return xs


def write_columns(path: str | Path, columns: Sequence[np.ndarray]) -> Path:
    """
    Write ``columns`` side by side as whitespace separated rows, no header.
    Shorter columns are padded with ``NaN``.
    """
    frame = pd.DataFrame({i: pd.Series(col) for i, col in enumerate(columns)})
    frame.to_csv(path, sep=" ", header=False, index=False, na_rep="NaN", lineterminator="\n")
    return Path(path)


def box_groups(groups: Mapping[str, Iterable] | Sequence[Iterable]) -> tuple[list[str] | None, list[np.ndarray]]:
    """
    Split box plot input into (names, columns).  ``names`` is ``None`` when the
    groups were given as a plain sequence.
    """
    if isinstance(groups, Mapping):
        names = [str(name) for name in groups.keys()]
        columns = [as_column(values, name) for name, values in zip(names, groups.values())]
        return names, columns
    if isinstance(groups, pd.DataFrame):
        return [str(c) for c in groups.columns], [groups[c].dropna().to_numpy() for c in groups.columns]
    return None, [as_column(values, f"group {i}") for i, values in enumerate(groups)]


def read_table(path: str) -> pd.DataFrame:
    """
    Load a CSV file to plot from.
    """
    df = pd.read_csv(path)
    if df.empty:
        raise TableEmptyError(f"Input file {path} is empty.")
    return df


def select_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """
    Keep only ``columns``, in the requested order.
    """
    wanted = list(columns)
    missing = [col for col in wanted if col not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in input: {', '.join(missing)}")
    selected = df[wanted]
    if selected.dropna(how="all").empty:
        raise TableEmptyError("Selected columns hold no data.")
    return selected
