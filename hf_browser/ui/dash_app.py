from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from hf_browser.config.loader import load_global_config
from hf_browser.core.record_store import RecordStore
from hf_browser.core.schema import DEFAULT_SCHEMA
from hf_browser.ui.layout.build_layout import build_layout
from hf_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from hf_browser.ui.callbacks.callbacks_render import register_render_callbacks
from hf_browser.ui.callbacks.callbacks_io import register_io_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the dataset once; a failed load leaves an empty store and an
    #    error status that the UI shows instead of a plot
    store = RecordStore(DEFAULT_SCHEMA)
    store.load(global_config.data_file)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        store=store,
        schema=DEFAULT_SCHEMA,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_rows": len(store), "status": store.status.message},
    )
    return app
