from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from profile_browser.core.profile_data import available_variables
from profile_browser.ui.ids import IDs
from profile_browser.ui.layout.build_control_panel import build_control_panel
from profile_browser.ui.layout.build_navbar import build_navbar
from profile_browser.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from profile_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    control_panel = build_control_panel(
        ctx.global_config,
        available_variables(ctx.profile),
        ctx.category_colors,
        ctx.gene_order,
    )

    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            build_navbar(ctx.global_config),

            dcc.Store(id=IDs.Store.GENE_ORDER, storage_type="session", data=ctx.gene_order_store()),
            dcc.Store(id=IDs.Store.PROFILE_STATE, storage_type="session"),

            dbc.Row(
                [
                    dbc.Col(control_panel, md=3, className="mt-3"),
                    dbc.Col(build_plot_panel(), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
