from __future__ import annotations

import pytest

from gnuplotter.cli import main

from .conftest import rows


@pytest.fixture
def table(workdir):
    path = workdir / "data.csv"
    path.write_text("t,a,b\n0,0.2,1.0\n1,0.3,2.0\n2,0.1,3.0\n", encoding="utf-8")
    return path


def _commands(workdir) -> list[str]:
    return (workdir / "debug_plotter.txt").read_text(encoding="utf-8").splitlines()


def test_line_command(workdir, table):
    assert main(["line", "--input", str(table), "--x", "t", "--y", "a,b", "--debug", "--title", "demo", "--grid"]) == 0

    lines = _commands(workdir)
    assert "set output 'plot.png'" in lines
    assert "set title 'demo'" in lines
    assert "set grid" in lines
    assert lines[-1] == (
        "plot '0.dat' using 1:2 with lines lw 1 title 'a'"
        ", '1.dat' using 1:2 with lines lw 1 title 'b'"
    )
    assert rows(workdir / "1.dat") == ["0 1.0", "1 2.0", "2 3.0"]


def test_scatter_command_with_auto_range(workdir, table):
    main(["scatter", "--input", str(table), "--y", "a", "--marker", "s", "--size", "2", "--auto-range", "--debug"])

    lines = _commands(workdir)
    assert "stats '0.dat' using 1 nooutput name 'S0_x'" in lines
    assert lines[-1] == "plot '0.dat' using 1:2 with points pt 5 ps 2 title 'a'"


def test_hist_command(workdir, table):
    main(["hist", "--input", str(table), "--column", "b", "--bins", "2", "--logy", "--debug"])

    lines = _commands(workdir)
    assert "set logscale y" in lines
    assert lines[-1].startswith("plot '0hist.dat' using 1:2:3 with boxes")
    assert len(rows(workdir / "0hist.dat")) == 2


def test_box_command(workdir, table):
    main(["box", "--input", str(table), "--columns", "a,b", "--palette", "tab10", "--debug"])

    lines = _commands(workdir)
    assert "set xtics ('a' 1, 'b' 2)" in lines
    plot_line = next(line for line in lines if line.startswith("plot "))
    assert "lc rgb '#1f77b4'" in plot_line
    assert lines[-1] == "set xtics autofreq"


def test_missing_column_is_a_usage_error(workdir, table, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["line", "--input", str(table), "--y", "nope", "--debug"])
    assert excinfo.value.code == 2
    assert "nope" in capsys.readouterr().err


def test_empty_table_is_a_usage_error(workdir):
    path = workdir / "empty.csv"
    path.write_text("a\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["hist", "--input", str(path), "--column", "a", "--debug"])
    assert excinfo.value.code == 2
