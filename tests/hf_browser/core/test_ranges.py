from __future__ import annotations

import pytest

from hf_browser.core.exceptions import NoDataError
from hf_browser.core.ranges import AxisRange, RangePolicy, ViewRange, compute_full_range, padded_range
from hf_browser.core.series import Point, SeriesGroup


def _group(label, coords):
    return SeriesGroup(label=label, points=tuple(Point(x=x, y=y, meta={}) for x, y in coords))


def test_full_range_pads_five_percent_of_span():
    groups = [_group("Survived", [(60.0, 38.0)]), _group("Died", [(70.0, 20.0)])]

    rng = compute_full_range(groups)

    assert rng.x.lo == pytest.approx(59.5)
    assert rng.x.hi == pytest.approx(70.5)
    assert rng.y.lo == pytest.approx(19.1)
    assert rng.y.hi == pytest.approx(38.9)


def test_degenerate_axis_uses_unit_pad():
    rng = compute_full_range([_group("Died", [(5.0, 7.0)])])

    assert (rng.x.lo, rng.x.hi) == (4.0, 6.0)
    assert (rng.y.lo, rng.y.hi) == (6.0, 8.0)


def test_empty_groups_raise_no_data():
    with pytest.raises(NoDataError):
        compute_full_range([])
    with pytest.raises(NoDataError):
        compute_full_range([_group("Died", [])])
    with pytest.raises(NoDataError):
        padded_range([])


def test_y_to_zero_policy_is_opt_in():
    groups = [_group("Survived", [(1.0, 10.0), (2.0, 30.0)])]

    default = compute_full_range(groups)
    clamped = compute_full_range(groups, RangePolicy(y_to_zero=True))

    assert default.y.lo == pytest.approx(9.0)
    assert clamped.y.lo == 0.0
    assert clamped.y.hi == default.y.hi
    assert clamped.x == default.x


def test_y_to_zero_ignored_for_negative_data():
    groups = [_group("Survived", [(1.0, -5.0), (2.0, 5.0)])]
    clamped = compute_full_range(groups, RangePolicy(y_to_zero=True))
    assert clamped.y.lo == pytest.approx(-5.5)


def test_axis_range_rejects_degenerate_interval():
    with pytest.raises(ValueError):
        AxisRange(1.0, 1.0)
    with pytest.raises(ValueError):
        AxisRange(2.0, 1.0)
    with pytest.raises(ValueError):
        AxisRange(float("-inf"), 1.0)


def test_view_range_dict_roundtrip():
    rng = ViewRange(x=AxisRange(59.5, 70.5), y=AxisRange(19.1, 38.9))
    assert ViewRange.from_dict(rng.to_dict()) == rng
