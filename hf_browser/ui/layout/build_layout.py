from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from hf_browser.ui.helpers import status_span
from hf_browser.ui.ids import IDs
from hf_browser.ui.layout.build_filter_panel import build_filter_panel
from hf_browser.ui.layout.build_navbar import build_navbar
from hf_browser.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from hf_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    navbar = build_navbar(ctx.global_config)
    filter_panel = build_filter_panel(ctx.store, ctx.schema, ctx.global_config)
    plot_panel = build_plot_panel()

    return dbc.Container(
        fluid=True,
        className="hf-root",
        children=[
            navbar,

            # Per-tab stores; nothing is persisted across sessions
            dcc.Store(id=IDs.Store.EXPLORE_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(plot_panel, md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
            html.Div(
                status_span(ctx.store.status),
                id=IDs.Control.STATUS_BAR,
                className="hf-status-bar mt-2",
            ),
        ],
    )
