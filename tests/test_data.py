from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from gnuplotter.data import (
    ShapeMismatchError,
    TableEmptyError,
    as_column,
    box_groups,
    read_table,
    resolve_x,
    select_columns,
    write_columns,
)

from .conftest import rows


def test_as_column_accepts_series_and_generators():
    assert as_column(pd.Series([1, 2])).tolist() == [1, 2]
    assert as_column(v for v in (3.0, 4.0)).tolist() == [3.0, 4.0]


def test_as_column_rejects_matrices():
    with pytest.raises(ValueError):
        as_column(np.zeros((2, 2)))


def test_resolve_x_defaults_to_index():
    assert resolve_x(np.array([5.0, 6.0, 7.0]), None).tolist() == [0, 1, 2]


def test_resolve_x_shift_requires_numbers():
    with pytest.raises(TypeError):
        resolve_x(np.array([1.0, 2.0]), ["a", "b"], shift=1.0)


def test_resolve_x_length_mismatch():
    with pytest.raises(ShapeMismatchError):
        resolve_x(np.array([1.0, 2.0]), [1, 2, 3])


def test_write_columns_pads_short_columns(tmp_path):
    path = write_columns(tmp_path / "grid.dat", [np.array([1, 2, 3]), np.array([0.5])])
    assert rows(path) == ["1 0.5", "2 NaN", "3 NaN"]


def test_write_columns_quotes_text_with_spaces(tmp_path):
    path = write_columns(tmp_path / "labels.dat", [np.array(["two words", "one"]), np.array([1, 2])])
    assert rows(path) == ['"two words" 1', "one 2"]


def test_box_groups_from_mapping_and_frame():
    names, columns = box_groups({"a": [1, 2], "b": [3]})
    assert names == ["a", "b"]
    assert [c.tolist() for c in columns] == [[1, 2], [3]]

    names, columns = box_groups(pd.DataFrame({"x": [1.0, None], "y": [2.0, 3.0]}))
    assert names == ["x", "y"]
    assert [c.tolist() for c in columns] == [[1.0], [2.0, 3.0]]


def test_box_groups_from_sequence_has_no_names():
    names, columns = box_groups([[1, 2], [3, 4]])
    assert names is None
    assert len(columns) == 2


def test_read_table_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("a,b\n")
    with pytest.raises(TableEmptyError):
        read_table(str(path))


def test_select_columns_reports_missing():
    df = pd.DataFrame({"a": [1], "b": [2]})
    assert list(select_columns(df, ["b", "a"]).columns) == ["b", "a"]
    with pytest.raises(ValueError, match="c"):
        select_columns(df, ["a", "c"])
