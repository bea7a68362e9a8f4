import pytest

from gui.design import color_mixing as cm


def test_parse_and_roundtrip_variants():
    assert cm.parse_hex("#fff") == (255, 255, 255, 255)
    assert cm.parse_hex("#000") == (0, 0, 0, 255)
    assert cm.parse_hex("#ff0000") == (255, 0, 0, 255)
    assert cm.parse_hex("#ff000080") == (255, 0, 0, 128)
    r, g, b, a = cm.parse_hex("#12abef33")
    assert cm.to_hex(r, g, b, a, include_alpha=True) == "#12abef33"


def test_parse_invalid():
    with pytest.raises(ValueError):
        cm.parse_hex("123456")
    with pytest.raises(ValueError):
        cm.parse_hex("#12345")


def test_hsl_primaries():
    assert cm.hsl_to_hex(0, 100, 50) == "#ff0000"
    assert cm.hsl_to_hex(120, 100, 50) == "#00ff00"
    assert cm.hsl_to_hex(0, 0, 100) == "#ffffff"


def test_hsl_out_of_range_percentages_clamped():
    assert cm.hsl_to_hex(168, 140, 50) == cm.hsl_to_hex(168, 100, 50)
    assert cm.hsl_to_hex(360, 100, 50) == cm.hsl_to_hex(0, 100, 50)
