from __future__ import annotations

from typing import Iterable, List, Optional

from dash import html

from hf_browser.core.filter_state import AxisSelection, ExploreState, FilterConfig
from hf_browser.core.record_store import Status
from hf_browser.core.schema import Schema, field_label


def axis_options(schema: Schema) -> List[dict]:
    return [{"label": field_label(f), "value": f} for f in schema.numeric_fields]


def choice_options(values: Iterable[str]) -> List[dict]:
    return [{"label": f" {v}", "value": v} for v in values]


def condition_options(schema: Schema) -> List[dict]:
    return [
        {"label": f" {field_label(flag).capitalize()}", "value": flag}
        for flag in schema.flag_names
    ]


def build_explore_state(
        schema: Schema,
        sex: Optional[Iterable[str]],
        outcome: Optional[Iterable[str]],
        conditions: Optional[Iterable[str]],
        x: Optional[str],
        y: Optional[str],
        revision: int,
) -> ExploreState:
    """
    Turn raw control values into a fresh ExploreState.

    Values outside the schema vocabulary are dropped. Axis values are passed
    through as-is; the pipeline rejects invalid ones with a SchemaError.
    """
    sex = [s for s in (sex or []) if s in schema.sex_values]
    outcome = [o for o in (outcome or []) if o in schema.outcome_values]
    flags = [c for c in (conditions or []) if c in schema.condition_flags]

    return ExploreState(
        filters=FilterConfig(
            allowed_sex=frozenset(sex),
            allowed_outcome=frozenset(outcome),
            required_flags=frozenset(flags),
        ),
        axes=AxisSelection(x=x, y=y),
        revision=revision,
    )


_STATUS_CLASS = {
    "info": "hf-status hf-status-ok",
    "warning": "hf-status hf-status-warn",
    "error": "hf-status hf-status-error",
}


def status_span(status: Status) -> html.Span:
    return html.Span(
        [html.Strong("Status: "), status.message],
        className=_STATUS_CLASS.get(status.level, _STATUS_CLASS["info"]),
    )
