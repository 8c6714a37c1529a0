from __future__ import annotations

import dash_bootstrap_components as dbc

from dash import dcc, html

from hf_browser.ui.ids import IDs


def build_plot_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Plot"),
                        dbc.ButtonGroup(
                            [
                                dbc.Button("Zoom in", id=IDs.Control.ZOOM_IN_BTN, size="sm", outline=True),
                                dbc.Button("Zoom out", id=IDs.Control.ZOOM_OUT_BTN, size="sm", outline=True),
                                dbc.Button("Reset zoom", id=IDs.Control.ZOOM_RESET_BTN, size="sm", outline=True),
                            ],
                            className="ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "650px"},
                            config={"responsive": True, "displaylogo": False},
                        ),
                    ),
                    html.Div(
                        [
                            html.Span(id=IDs.Control.EXPORT_STATUS, className="text-muted me-auto"),
                            dbc.Button(
                                "Export PNG",
                                id=IDs.Control.EXPORT_PNG_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 me-2",
                            ),
                            dbc.Button(
                                "Export PDF",
                                id=IDs.Control.EXPORT_PDF_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_IMAGE),
                            dbc.Button(
                                "Download data (CSV)",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
                className="hf-main-body",
            ),
        ],
        className="hf-maincard",
    )
