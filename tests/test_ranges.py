import pytest

from fbdl.ranges import MultiRange, SingleRange


@pytest.mark.parametrize(
    "left, right, want",
    [
        (0, 1, 1),
        (0, 14, 4),
        (0, 15, 4),
        (0, 16, 5),
        (130, 255, 8),
        (245, 256, 9),
    ],
)
def test_single_range_width(left, right, want):
    assert SingleRange(left, right).width() == want


@pytest.mark.parametrize(
    "ranges, want",
    [
        ([SingleRange(0, 1), SingleRange(0, 15)], 4),
        ([SingleRange(0, 1023), SingleRange(400, 510)], 10),
        ([SingleRange(0, 7), SingleRange(10, 36), SingleRange(40, 250)], 8),
    ],
)
def test_multi_range_width(ranges, want):
    assert MultiRange(ranges).width() == want


def test_multi_range_empty():
    mr = MultiRange()
    assert mr.is_empty()
    assert mr.width() == 0
    assert not MultiRange([SingleRange(0, 1)]).is_empty()


def test_single_range_negative_right():
    with pytest.raises(ValueError):
        SingleRange(-5, -1).width()