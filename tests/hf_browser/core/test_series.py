from __future__ import annotations

import pytest

from hf_browser.core.exceptions import SchemaError
from hf_browser.core.filter_engine import filter_records
from hf_browser.core.filter_state import AxisSelection, FilterConfig
from hf_browser.core.series import build_series, count_points


def _scenario_records():
    return [
        {"sex_label": "Female", "death_label": "Survived", "age": 60.0, "ejection_fraction": 38.0},
        {"sex_label": "Male", "death_label": "Died", "age": 70.0, "ejection_fraction": 20.0},
    ]


AXES = AxisSelection(x="age", y="ejection_fraction")


def test_groups_by_outcome_in_first_seen_order():
    groups = build_series(_scenario_records(), AXES)

    assert [g.label for g in groups] == ["Survived", "Died"]
    assert [(p.x, p.y) for p in groups[0].points] == [(60.0, 38.0)]
    assert [(p.x, p.y) for p in groups[1].points] == [(70.0, 20.0)]


def test_first_seen_order_follows_input():
    records = list(reversed(_scenario_records()))
    groups = build_series(records, AXES)
    assert [g.label for g in groups] == ["Died", "Survived"]


def test_filtered_out_category_is_absent_not_empty():
    cfg = FilterConfig(
        allowed_sex=frozenset({"Female"}),
        allowed_outcome=frozenset({"Survived", "Died"}),
    )
    filtered = filter_records(_scenario_records(), cfg)
    groups = build_series(filtered, AXES)

    assert len(filtered) == 1
    assert [g.label for g in groups] == ["Survived"]


def test_points_with_absent_or_non_numeric_values_are_dropped():
    records = _scenario_records() + [
        {"sex_label": "Male", "death_label": "Died", "age": None, "ejection_fraction": 30.0},
        {"sex_label": "Male", "death_label": "Died", "age": 65.0, "ejection_fraction": "n/a"},
        {"sex_label": "Male", "death_label": "Died", "age": 66.0},
        {"sex_label": "Male", "death_label": "Died", "age": "67", "ejection_fraction": "35"},
    ]
    groups = build_series(records, AXES)

    died = next(g for g in groups if g.label == "Died")
    assert died.xs == [70.0, 67.0]
    assert died.ys == [20.0, 35.0]
    assert count_points(groups) == 3


def test_category_with_no_plottable_points_has_no_group():
    records = [
        {"sex_label": "Female", "death_label": "Survived", "age": None, "ejection_fraction": 38.0},
        {"sex_label": "Male", "death_label": "Died", "age": 70.0, "ejection_fraction": 20.0},
    ]
    groups = build_series(records, AXES)
    assert [g.label for g in groups] == ["Died"]


def test_category_order_counts_records_without_a_point():
    records = [
        {"sex_label": "Male", "death_label": "Died", "age": None, "ejection_fraction": 30.0},
        {"sex_label": "Female", "death_label": "Survived", "age": 60.0, "ejection_fraction": 38.0},
        {"sex_label": "Male", "death_label": "Died", "age": 70.0, "ejection_fraction": 20.0},
    ]
    groups = build_series(records, AXES)

    assert [g.label for g in groups] == ["Died", "Survived"]
    assert groups[0].xs == [70.0]


def test_points_carry_hover_metadata():
    point = build_series(_scenario_records(), AXES)[0].points[0]

    assert point.meta["outcome"] == "Survived"
    assert point.meta["sex"] == "Female"
    assert point.meta["age"] == 60.0
    assert point.meta["ejection_fraction"] == 38.0
    assert point.meta["x_field"] == "age"
    assert point.meta["y_field"] == "ejection_fraction"


def test_build_series_is_deterministic():
    records = _scenario_records() * 5
    assert build_series(records, AXES) == build_series(records, AXES)


def test_non_numeric_axis_raises_schema_error():
    with pytest.raises(SchemaError):
        build_series(_scenario_records(), AxisSelection(x="sex_label", y="age"))
    with pytest.raises(SchemaError):
        build_series(_scenario_records(), AxisSelection(x="age", y="not_a_field"))
