import plotly.graph_objs as go

from hf_browser.core.filter_state import AxisSelection
from hf_browser.core.ranges import compute_full_range
from hf_browser.core.series import build_series
from hf_browser.views.base_view import BaseView
from hf_browser.views.scatter_view import ScatterView


def _make_groups():
    records = [
        {"sex_label": "Female", "death_label": "Survived", "age": 60.0, "ejection_fraction": 38.0},
        {"sex_label": "Male", "death_label": "Died", "age": 70.0, "ejection_fraction": 20.0},
        {"sex_label": "Male", "death_label": "Survived", "age": 50.0, "ejection_fraction": 55.0},
    ]
    return build_series(records, AxisSelection(x="age", y="ejection_fraction"))


def test_scatter_view_one_trace_per_group():
    groups = _make_groups()
    full = compute_full_range(groups)

    fig = ScatterView().render_figure(groups, full, ("age", "ejection fraction"))

    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ["Survived", "Died"]
    for trace in fig.data:
        assert trace.type == "scatter"
        assert trace.mode == "markers"

    survived = fig.data[0]
    assert list(survived.x) == [60.0, 50.0]
    assert list(survived.y) == [38.0, 55.0]
    assert [c[0] for c in survived.customdata] == ["Female", "Male"]
    assert "sex: %{customdata[0]}" in survived.hovertemplate


def test_scatter_view_uses_display_range_and_labels():
    groups = _make_groups()
    full = compute_full_range(groups)

    fig = ScatterView().render_figure(groups, full, ("age", "ejection fraction"))

    assert list(fig.layout.xaxis.range) == full.x.as_list()
    assert list(fig.layout.yaxis.range) == full.y.as_list()
    assert fig.layout.xaxis.title.text == "age"
    assert fig.layout.yaxis.title.text == "ejection fraction"


def test_view_as_sink_keeps_last_figure():
    groups = _make_groups()
    view = ScatterView()
    assert view.figure is None

    view(groups, compute_full_range(groups), ("x", "y"))

    assert isinstance(view.figure, go.Figure)
    assert len(view.figure.data) == 2


def test_message_figure():
    fig = BaseView.message_figure("No data to display.", "Try clearing a filter.")
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    assert "No data to display." in fig.layout.annotations[0].text
