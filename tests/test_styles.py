from __future__ import annotations

import pytest

from gnuplotter.styles import DashType, LineStyle, Marker, MarkerStyle, Smoothing
from gnuplotter.utils import build_palette, format_color, format_number, quote, range_commands, title_clause


@pytest.mark.parametrize(
    "code, marker",
    [("o", Marker.FILLED_CIRCLE), ("x", Marker.CROSS), ("s", Marker.FILLED_SQUARE), (Marker.STAR, Marker.STAR)],
)
def test_marker_codes(code, marker):
    assert Marker.coerce(code) is marker


def test_unknown_marker_code():
    with pytest.raises(ValueError, match="Unknown marker"):
        Marker.coerce("?")


def test_default_line_style():
    style = LineStyle()
    assert style.smooth_clause() == " smooth unique"
    assert style.with_clause() == "with lines lw 1"


def test_line_style_without_smoothing():
    style = LineStyle(width=1.5, dash=DashType.DOT, smooth=None)
    assert style.smooth_clause() == ""
    assert style.with_clause() == "with lines dt 3 lw 1.5"


def test_smoothing_from_string():
    assert Smoothing("csplines") is Smoothing.CSPLINES


def test_marker_style_with_rgb_tuple():
    style = MarkerStyle(marker=Marker.DIAMOND, size=0.5, color=(1.0, 0.0, 0.0))
    assert style.with_clause() == "with points pt 12 ps 0.5 lc rgb '#ff0000'"


def test_quote_doubles_single_quotes():
    assert quote("it's") == "'it''s'"


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(0.05) == "0.05"
    assert format_number(2.0) == "2"


def test_format_color_rejects_unknown_names():
    assert format_color("#ABCDEF") == "'#abcdef'"
    with pytest.raises(ValueError):
        format_color("not-a-colour")


def test_build_palette_cycles():
    colors = build_palette(12, "tab10")
    assert len(colors) == 12
    assert colors[0] == colors[10] == "#1f77b4"


def test_title_clause():
    assert title_clause(None) == "notitle"
    assert title_clause("") == "notitle"
    assert title_clause("a") == "title 'a'"


def test_range_commands_custom_padding():
    assert range_commands("d.dat", {"z": 3}, prefix="S4", padding=0.1) == [
        "stats 'd.dat' using 3 nooutput name 'S4_z'",
        "set zrange [S4_z_min - 0.1*(S4_z_max - S4_z_min):S4_z_max + 0.1*(S4_z_max - S4_z_min)]",
    ]
