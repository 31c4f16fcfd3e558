from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from profile_browser.config.loader import load_global_config
from profile_browser.core.profile_data import load_profile_table
from profile_browser.data.readers import get_cat_colors, read_single_col_file
from profile_browser.ui.callbacks import (
    register_control_callbacks,
    register_link_callbacks,
    register_render_callbacks,
)
from profile_browser.ui.config import AppConfig
from profile_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load profile + optional gene categories and gene order
    profile = load_profile_table(global_config.main_input)

    category_colors = {}
    if global_config.gene_category is not None:
        category_colors = get_cat_colors(global_config.gene_category) or {}

    gene_order = read_single_col_file(global_config.gene_order)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        profile=profile,
        category_colors=category_colors,
        gene_order=gene_order,
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
    register_control_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_link_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_rows": len(profile)},
    )
    return app
