from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from hf_browser.config.model import GlobalConfig
from hf_browser.core.record_store import RecordStore
from hf_browser.core.schema import Schema
from hf_browser.ui.helpers import axis_options, choice_options, condition_options
from hf_browser.ui.ids import IDs


def build_filter_panel(store: RecordStore, schema: Schema, global_config: GlobalConfig) -> dbc.Card:
    source_name = global_config.data_file.name

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(
                            source_name,
                            id=IDs.Control.SIDEBAR_DATASET_NAME,
                            className="card-title",
                        ),
                        html.P(
                            f"{len(store)} patients" if store.is_loaded else "No dataset loaded",
                            id=IDs.Control.SIDEBAR_DATASET_META,
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),

                    html.Label("X axis", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.X_SELECT,
                        options=axis_options(schema),
                        value=global_config.default_x,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label("Y axis", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.Y_SELECT,
                        options=axis_options(schema),
                        value=global_config.default_y,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Hr(),

                    html.Label("Sex", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.SEX_SELECT,
                        options=choice_options(schema.sex_values),
                        value=list(schema.sex_values),
                        inline=True,
                        className="mb-3",
                    ),
                    html.Label("Outcome", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.OUTCOME_SELECT,
                        options=choice_options(schema.outcome_values),
                        value=list(schema.outcome_values),
                        inline=True,
                        className="mb-3",
                    ),
                    html.Label("Require condition", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.CONDITION_SELECT,
                        options=condition_options(schema),
                        value=[],
                        switch=True,
                    ),
                ]
            ),
        ],
        className="hf-sidebar",
    )
