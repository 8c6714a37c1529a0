from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State

from hf_browser.ui.helpers import build_explore_state
from hf_browser.ui.ids import IDs

if TYPE_CHECKING:
    from hf_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_revision(previous: dict[str, Any] | None) -> int:
    if not previous:
        return 0
    try:
        return int(previous.get("revision", -1)) + 1
    except (TypeError, ValueError):
        return 0


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> ExploreState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.EXPLORE_STATE, "data"),
        Input(IDs.Control.SEX_SELECT, "value"),
        Input(IDs.Control.OUTCOME_SELECT, "value"),
        Input(IDs.Control.CONDITION_SELECT, "value"),
        Input(IDs.Control.X_SELECT, "value"),
        Input(IDs.Control.Y_SELECT, "value"),
        State(IDs.Store.EXPLORE_STATE, "data"),
    )
    def sync_explore_state_from_ui(sex_val, outcome_val, cond_val, x_val, y_val, previous):
        """
        Every control change produces a fresh snapshot with the next revision.
        Nothing is carried over from the previous snapshot except the counter.
        """
        state = build_explore_state(
            ctx.schema,
            sex=sex_val,
            outcome=outcome_val,
            conditions=cond_val,
            x=x_val,
            y=y_val,
            revision=next_revision(previous),
        )
        logger.debug(
            "explore_state_changed",
            extra={"trigger": dash.ctx.triggered_id, "revision": state.revision},
        )
        return state.to_dict()
