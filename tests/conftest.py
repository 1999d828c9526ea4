from __future__ import annotations

import sys
from pathlib import Path

import pytest

from gnuplotter import PlotSession, SessionConfig

TERMINAL = "set terminal pngcairo enhanced font ',20' size 1200, 900\n"

# Drains stdin like gnuplot would, without rendering anything.
STAND_IN_RENDERER = (sys.executable, "-c", "import sys; sys.stdin.buffer.read()")


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def session(workdir: Path):
    s = PlotSession(debug=True)
    yield s
    s.close()


@pytest.fixture
def commands(workdir: Path):
    """Return a callable reading everything sent to the debug channel so far."""

    def _read() -> str:
        return (workdir / "debug_plotter.txt").read_text(encoding="utf-8")

    return _read


@pytest.fixture
def renderer_config() -> SessionConfig:
    return SessionConfig(command=STAND_IN_RENDERER)


def rows(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()
