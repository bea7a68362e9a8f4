from gui.charting.sequences import display_value, index_from_x, metric_average


def test_index_from_x_clamps_to_window():
    assert index_from_x(-5, 290, 30) == 0
    assert index_from_x(1000, 290, 30) == 29
    assert index_from_x(10, 290, 30) == 1


def test_index_from_x_rounds_half_up():
    assert index_from_x(145, 290, 30) == 15


def test_index_from_x_degenerate():
    assert index_from_x(50, 0, 30) == 0
    assert index_from_x(50, 100, 1) == 0


def test_average_ignores_missing_days():
    assert metric_average([7, None, 8]) == 7.5
    assert metric_average([6.5, 7.2, 7.8]) == 7.2


def test_average_of_nothing_is_none():
    assert metric_average([None, None]) is None
    assert metric_average([]) is None


def test_display_value_prefers_active_day():
    values = [7, None, 9]
    assert display_value(values, None) == 8.0
    assert display_value(values, 2) == 9
    assert display_value(values, 1) is None


def test_average_and_display_skip_non_finite():
    values = [7, float("inf"), 8, float("nan")]
    assert metric_average(values) == 7.5
    assert display_value(values, 1) is None
    assert metric_average([float("inf")]) is None
