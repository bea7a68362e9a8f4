import pytest

from gui.design.color_scale import (
    ACCENT_HUE,
    ACCENT_SATURATION,
    LEGEND_STEPS,
    cell_lightness,
    cell_saturation,
    cell_style,
    legend_styles,
)


def test_lightness_bounds_exact():
    assert cell_lightness(1) == 95
    assert cell_lightness(10) == 36.5


def test_lightness_strictly_decreasing():
    values = [cell_lightness(v) for v in range(1, 11)]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_saturation_grows_with_rating():
    assert cell_saturation(10) == ACCENT_SATURATION + 18
    assert cell_saturation(1) == ACCENT_SATURATION
    assert cell_saturation(10, base_saturation=50) == 68


def test_missing_style_is_neutral_with_border():
    style = cell_style(None)
    assert style.missing is True
    assert style.fill == "#F8F9FA"
    assert style.border_color == "#E9ECEF"
    assert style.border_width == 1
    assert style.css() == "#F8F9FA"


def test_computed_style_has_no_border():
    style = cell_style(10)
    assert style.border_width == 0
    assert style.border_color == "transparent"
    assert style.hue == ACCENT_HUE
    assert style.css() == "hsl(168, 94%, 36.5%)"
    assert cell_style(1).css() == "hsl(168, 76%, 95%)"


@pytest.mark.parametrize("raw,expected", [(0, 1), (-4, 1), (15, 10), (6.5, 7), (6.4, 6)])
def test_values_clamped_and_rounded(raw, expected):
    assert cell_style(raw) == cell_style(expected)


def test_legend_uses_identical_mapping():
    legend = legend_styles()
    assert len(legend) == len(LEGEND_STEPS) == 5
    assert legend == [cell_style(v) for v in (2, 4, 6, 8, 10)]


def test_custom_hue_family():
    style = cell_style(4, hue=210, base_saturation=60)
    assert style.css() == "hsl(210, 66%, 75.5%)"


def test_hex_conversion():
    assert cell_style(None).to_hex() == "#f8f9fa"
    hex_color = cell_style(10).to_hex()
    assert hex_color.startswith("#") and len(hex_color) == 7
    assert hex_color != cell_style(1).to_hex()


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_rating_renders_as_missing(value):
    style = cell_style(value)
    assert style.missing is True
    assert style.css() == "#F8F9FA"
