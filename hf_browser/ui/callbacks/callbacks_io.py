from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import pandas as pd
import plotly.graph_objs as go
from dash import Input, Output, State, dcc, exceptions

from hf_browser.core.exceptions import HfBrowserError
from hf_browser.core.filter_state import ExploreState
from hf_browser.core.pipeline import run_pipeline
from hf_browser.export.figure_export import export_filename, figure_to_bytes
from hf_browser.ui.ids import IDs

if TYPE_CHECKING:
    from hf_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

_FORMAT_BY_TRIGGER = {
    IDs.Control.EXPORT_PNG_BTN: "png",
    IDs.Control.EXPORT_PDF_BTN: "pdf",
}


def filtered_frame(ctx: AppConfig, es_data: Optional[dict[str, Any]]) -> pd.DataFrame:
    """
    The rows behind the current plot as a DataFrame, columns in schema order.

    :raises HfBrowserError: (NoDataError / SchemaError) when there is nothing to export
    """
    state = ExploreState.from_dict(es_data or {})
    result = run_pipeline(ctx.store.records, state.filters, state.axes, ctx.schema, ctx.range_policy)
    return pd.DataFrame([dict(r) for r in result.filtered], columns=list(ctx.schema.field_names))


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Image / PDF export of the figure currently on screen
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_IMAGE, "data"),
        Output(IDs.Control.EXPORT_STATUS, "children"),
        Input(IDs.Control.EXPORT_PNG_BTN, "n_clicks"),
        Input(IDs.Control.EXPORT_PDF_BTN, "n_clicks"),
        State(IDs.Control.MAIN_GRAPH, "figure"),
        State(IDs.Store.EXPLORE_STATE, "data"),
        prevent_initial_call=True,
    )
    def export_current_figure(_png_clicks, _pdf_clicks, figure_data, es_data):
        image_format = _FORMAT_BY_TRIGGER.get(dash.ctx.triggered_id)
        if image_format is None or not figure_data or not es_data:
            raise exceptions.PreventUpdate

        axes = ExploreState.from_dict(es_data).axes
        filename = export_filename(axes.x or "x", axes.y or "y", image_format)

        try:
            content = figure_to_bytes(go.Figure(figure_data), image_format)
        except Exception:
            logger.exception("Figure export failed", extra={"format": image_format})
            return dash.no_update, f"Export to {image_format.upper()} failed."

        logger.info("Figure exported", extra={"export_file": filename, "format": image_format})
        return dcc.send_bytes(content, filename), f"Exported {filename}"

    # ---------------------------------------------------------
    # CSV download of the filtered rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.EXPLORE_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, es_data):
        if not n_clicks or not es_data:
            raise exceptions.PreventUpdate

        try:
            df = filtered_frame(ctx, es_data)
        except HfBrowserError as e:
            logger.info("Nothing to download", extra={"error": str(e)})
            raise exceptions.PreventUpdate

        axes = ExploreState.from_dict(es_data).axes
        return dcc.send_data_frame(df.to_csv, f"heart_failure_{axes.x}_vs_{axes.y}.csv", index=False)
