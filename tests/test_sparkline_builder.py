from gui.services.sparkline import SparklineBuilder


def test_sparkline_empty():
    b = SparklineBuilder()
    assert b.build([]) == ""


def test_sparkline_scale_ends():
    b = SparklineBuilder()
    out = b.build([1, 10])
    assert out == SparklineBuilder._RAMP[0] + SparklineBuilder._RAMP[-1]  # type: ignore


def test_sparkline_gaps_render_blank():
    b = SparklineBuilder()
    out = b.build([1, None, 10])
    assert len(out) == 3
    assert out[1] == " "


def test_sparkline_all_missing():
    b = SparklineBuilder()
    assert b.build([None] * 4) == "    "


def test_sparkline_clamps_out_of_range():
    b = SparklineBuilder()
    assert b.build([15, -2]) == b.build([10, 1])


def test_sparkline_increasing_sequence():
    b = SparklineBuilder()
    out = b.build(range(1, 11))
    assert len(out) == 10
    ramp = SparklineBuilder._RAMP  # type: ignore
    idx = [ramp.index(ch) for ch in out]
    assert idx == sorted(idx)


def test_sparkline_non_finite_is_gap():
    b = SparklineBuilder()
    out = b.build([1, float("nan"), float("inf")])
    assert out[1:] == SparklineBuilder.GAP * 2
