from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output, Patch, State, exceptions, html

from hf_browser.core.explorer import Explorer
from hf_browser.core.filter_state import ExploreState
from hf_browser.core.record_store import Status
from hf_browser.core.view_state import ViewState
from hf_browser.ui.helpers import status_span
from hf_browser.ui.ids import IDs
from hf_browser.views.base_view import BaseView
from hf_browser.views.scatter_view import ScatterView

if TYPE_CHECKING:
    from hf_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

ZOOM_IN = "in"
ZOOM_OUT = "out"
ZOOM_RESET = "reset"

_ZOOM_BY_TRIGGER = {
    IDs.Control.ZOOM_IN_BTN: ZOOM_IN,
    IDs.Control.ZOOM_OUT_BTN: ZOOM_OUT,
    IDs.Control.ZOOM_RESET_BTN: ZOOM_RESET,
}


# -----------------------------------------------------------------------------
# Pure helpers (no Dash context needed; unit-tested directly)
# -----------------------------------------------------------------------------
def _restore_view(vs_data: Optional[dict[str, Any]]) -> Tuple[Optional[ViewState], int]:
    if not vs_data or not vs_data.get("view"):
        return None, -1
    try:
        return ViewState.from_dict(vs_data["view"]), int(vs_data.get("revision", -1))
    except (KeyError, TypeError, ValueError):
        logger.warning("Discarding invalid stored view state", extra={"view_state": vs_data})
        return None, -1


def _view_data(view: ViewState, revision: int) -> dict[str, Any]:
    return {"view": view.to_dict(), "revision": revision}


def render_explore_state(
        ctx: AppConfig,
        es_data: Optional[dict[str, Any]],
        vs_data: Optional[dict[str, Any]],
) -> Tuple[Optional[go.Figure], Optional[dict[str, Any]], Status]:
    """
    One pipeline pass for the stored control snapshot.

    :return: (figure, new view-state data, status). figure is None when the
             snapshot is older than the one already drawn; view-state data is
             None whenever the previous view state must be kept.
    """
    if not ctx.store.is_loaded:
        return BaseView.message_figure("No dataset loaded."), None, ctx.store.status

    if es_data is None:
        return BaseView.message_figure("No axes selected."), None, Status("warning", "No axes selected.")

    state = ExploreState.from_dict(es_data)
    view, last_revision = _restore_view(vs_data)

    sink = ScatterView()
    explorer = Explorer(
        ctx.store,
        sink=sink,
        policy=ctx.range_policy,
        view_state=view,
        last_revision=last_revision,
    )

    if explorer.is_stale(state):
        return None, None, explorer.status

    result = explorer.apply(state)
    if result is None:
        return BaseView.message_figure(explorer.status.message), None, explorer.status

    return sink.figure, _view_data(explorer.view_state, explorer.last_revision), explorer.status


def apply_zoom(command: str, vs_data: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Apply a zoom command to the stored view state.

    :return: new view-state data, or None if there is nothing to zoom yet
    """
    view, revision = _restore_view(vs_data)
    if view is None:
        return None

    if command == ZOOM_IN:
        view = view.zoom_in()
    elif command == ZOOM_OUT:
        view = view.zoom_out()
    elif command == ZOOM_RESET:
        view = view.reset_zoom()
    else:
        raise ValueError(f"Unknown zoom command '{command}'")

    return _view_data(view, revision)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main figure: ExploreState / zoom buttons -> figure + ViewState
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.EXPLORE_STATE, "data"),
        Input(IDs.Control.ZOOM_IN_BTN, "n_clicks"),
        Input(IDs.Control.ZOOM_OUT_BTN, "n_clicks"),
        Input(IDs.Control.ZOOM_RESET_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_main_graph(es_data, _zoom_in, _zoom_out, _zoom_reset, vs_data):
        triggered_id = dash.ctx.triggered_id

        # Zoom only touches the axis window; the data is not re-filtered
        command = _ZOOM_BY_TRIGGER.get(triggered_id)
        if command is not None:
            new_vs = apply_zoom(command, vs_data)
            if new_vs is None:
                raise exceptions.PreventUpdate

            display = ViewState.from_dict(new_vs["view"]).display_range
            patched = Patch()
            patched["layout"]["xaxis"]["range"] = display.x.as_list()
            patched["layout"]["yaxis"]["range"] = display.y.as_list()
            return patched, new_vs, dash.no_update

        try:
            figure, new_vs, status = render_explore_state(ctx, es_data, vs_data)
        except Exception:
            logger.exception("Error in update_main_graph", extra={"explore_state": es_data})
            return (
                BaseView.message_figure(
                    "Something went wrong while rendering this view.",
                    "If this keeps happening, grab the logs and open an issue.",
                ),
                dash.no_update,
                html.Span([html.Strong("Status: "), "Internal error."], className="hf-status hf-status-error"),
            )

        if figure is None:
            raise exceptions.PreventUpdate

        return figure, new_vs if new_vs is not None else dash.no_update, status_span(status)
