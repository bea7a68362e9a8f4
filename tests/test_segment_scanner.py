from gui.charting.segments import scan_segments
from gui.charting.types import Segment


def _covered(segments):
    out = []
    for s in segments:
        out.extend(s.indices())
    return out


def test_scenario_gap_before_and_after_pair():
    assert scan_segments([7, None, 8, 9, None]) == [Segment(0, 0), Segment(2, 3)]


def test_all_missing_yields_no_segments():
    assert scan_segments([None] * 30) == []
    assert scan_segments([]) == []


def test_no_gaps_yields_single_segment():
    segs = scan_segments([5] * 30)
    assert segs == [Segment(0, 29)]
    assert segs[0].length == 30


def test_leading_and_trailing_gaps():
    assert scan_segments([None, None, 4, 4, None]) == [Segment(2, 3)]
    assert scan_segments([None, 1]) == [Segment(1, 1)]


def test_segments_cover_exactly_present_indices():
    patterns = [
        [1, None, 2, None, 3],
        [None, 5, 5, 5, None, None, 6, 6],
        [10, 10, None, None, None, 1],
        [None, None, 2, 3, 4, None, 7, None, 9, 9],
    ]
    for values in patterns:
        segs = scan_segments(values)
        present = [i for i, v in enumerate(values) if v is not None]
        covered = _covered(segs)
        assert covered == present  # ordered, disjoint, nothing missing included
        for a, b in zip(segs, segs[1:]):
            assert a.end + 1 < b.start  # a gap always separates segments


def test_zero_rating_is_present_not_missing():
    # 0 is out of range but it is a value; only None is a gap
    assert scan_segments([0, 0]) == [Segment(0, 1)]
