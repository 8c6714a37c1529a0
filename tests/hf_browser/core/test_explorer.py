from __future__ import annotations

import pytest

from hf_browser.core import explorer as explorer_module
from hf_browser.core.explorer import Explorer
from hf_browser.core.filter_state import AxisSelection, ExploreState, FilterConfig
from hf_browser.core.exceptions import LoadError
from hf_browser.core.record_store import RecordStore


class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, groups, display_range, labels):
        self.calls.append((groups, display_range, labels))


def _make_store():
    rows = [
        {"sex_label": "Female", "death_label": "Survived", "age": 60.0, "ejection_fraction": 38.0,
         "time": 10.0, "anaemia": 0, "diabetes": 0, "high_blood_pressure": 0, "smoking": 0},
        {"sex_label": "Male", "death_label": "Died", "age": 70.0, "ejection_fraction": 20.0,
         "time": 30.0, "anaemia": 1, "diabetes": 0, "high_blood_pressure": 0, "smoking": 0},
    ]
    store = RecordStore(loader=lambda source, schema: tuple(rows))
    store.load("hf.csv")
    return store


def _state(revision=0, sex=("Female", "Male"), x="age", y="ejection_fraction", flags=()):
    return ExploreState(
        filters=FilterConfig(
            allowed_sex=frozenset(sex),
            allowed_outcome=frozenset({"Survived", "Died"}),
            required_flags=frozenset(flags),
        ),
        axes=AxisSelection(x=x, y=y),
        revision=revision,
    )


def test_apply_renders_scenario_a():
    sink = RecordingSink()
    ex = Explorer(_make_store(), sink=sink)

    result = ex.apply(_state())

    assert result is not None
    assert [g.label for g in result.groups] == ["Survived", "Died"]
    assert ex.view_state.display_range == result.full_range
    assert ex.view_state.full_range.x.lo == pytest.approx(59.5)
    assert ex.view_state.full_range.x.hi == pytest.approx(70.5)
    assert ex.status.message == "Displayed 2 points (filtered)."

    assert len(sink.calls) == 1
    groups, display_range, labels = sink.calls[0]
    assert display_range == result.full_range
    assert labels == ("age", "ejection fraction")


def test_no_data_skips_render_and_keeps_view_state():
    sink = RecordingSink()
    ex = Explorer(_make_store(), sink=sink)
    ex.apply(_state(revision=0))
    ex.zoom_in()
    before = ex.view_state
    n_calls = len(sink.calls)

    result = ex.apply(_state(revision=1, sex=()))

    assert result is None
    assert ex.view_state is before
    assert len(sink.calls) == n_calls
    assert ex.status.level == "warning"
    assert len(ex.store) == 2


def test_schema_error_fails_soft():
    sink = RecordingSink()
    ex = Explorer(_make_store(), sink=sink)

    assert ex.apply(_state(x="sex_label")) is None
    assert ex.status.is_error
    assert sink.calls == []

    # a following valid pass still succeeds
    assert ex.apply(_state(revision=1)) is not None


def test_stale_snapshot_is_dropped():
    sink = RecordingSink()
    ex = Explorer(_make_store(), sink=sink)

    ex.apply(_state(revision=5, sex=("Female",)))
    assert ex.apply(_state(revision=3)) is None

    assert ex.last_revision == 5
    assert len(sink.calls) == 1
    assert [g.label for g in ex.result.groups] == ["Survived"]


def test_zoom_rerenders_without_refiltering(monkeypatch):
    sink = RecordingSink()
    ex = Explorer(_make_store(), sink=sink)
    ex.apply(_state())
    groups_before = ex.result.groups

    def fail(*args, **kwargs):
        raise AssertionError("zoom must not run the pipeline")

    monkeypatch.setattr(explorer_module, "run_pipeline", fail)

    ex.zoom(0.8)
    ex.zoom(0.8)
    ex.reset_zoom()

    assert len(sink.calls) == 4
    assert all(call[0] is groups_before for call in sink.calls)
    # Scenario D: reset lands exactly on the last full range
    assert ex.view_state.display_range == ex.result.full_range
    assert sink.calls[-1][1] == ex.result.full_range


def test_axis_change_resets_zoom():
    ex = Explorer(_make_store(), sink=RecordingSink())
    ex.apply(_state(revision=0))
    ex.zoom_in()
    assert ex.view_state.is_zoomed

    ex.apply(_state(revision=1, y="time"))

    assert not ex.view_state.is_zoomed
    assert ex.view_state.display_range == ex.result.full_range


def test_zoom_before_first_render_is_noop():
    ex = Explorer(_make_store(), sink=RecordingSink())
    assert ex.zoom_in() is None
    assert ex.reset_zoom() is None


def test_load_failure_reported_on_status():
    def failing(source, schema):
        raise LoadError(LoadError.REASON_MALFORMED, "Cannot parse bad.csv", str(source))

    ex = Explorer(_make_store(), sink=RecordingSink())
    ex.store._loader = failing

    assert ex.load("bad.csv") is False
    assert ex.status.is_error
    assert len(ex.store) == 2
