from __future__ import annotations

from typing import Dict, List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from profile_browser.config.model import GlobalConfig
from profile_browser.core.ordering import OrderPolicy
from profile_browser.ui.ids import IDs
from profile_browser.ui.widgets import create_plot_size, create_slider_cutoff, create_text_size


def _category_legend(category_colors: Dict[str, str]) -> html.Div:
    if not category_colors:
        return html.Div()
    return html.Div(
        [html.Label("Gene categories", className="form-label")]
        + [
            dbc.Badge(category, color=colour, className="me-1 mb-1")
            for category, colour in category_colors.items()
        ],
        className="mb-3",
    )


def build_control_panel(
        global_config: GlobalConfig,
        var_ids: tuple[str, str],
        category_colors: Dict[str, str],
        gene_order: Optional[List[str]] = None,
) -> dbc.Card:
    var1_id, var2_id = var_ids
    # A gene order preloaded from the config is selected from the start
    order_type = OrderPolicy.USER_DEFINED if gene_order else OrderPolicy.NATURAL
    order_status = f"{len(gene_order)} genes loaded from config." if gene_order else None

    return dbc.Card(
        [
            dbc.CardHeader("Plot options", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("X-axis", className="form-label"),
                    dbc.RadioItems(
                        id=IDs.Control.X_AXIS_SELECT,
                        options=[
                            {"label": "Taxa", "value": "taxa"},
                            {"label": "Genes", "value": "genes"},
                        ],
                        value=global_config.default_x_axis,
                        inline=True,
                        className="mb-3",
                    ),
                    html.Label("Dot zoom", className="form-label"),
                    dcc.Slider(
                        id=IDs.Control.DOT_ZOOM,
                        min=-1,
                        max=3,
                        step=0.1,
                        value=global_config.default_zoom,
                        marks={-1: "-1", 0: "0", 1: "1", 2: "2", 3: "3"},
                        className="mb-3",
                    ),
                    html.Label("Order genes", className="form-label"),
                    dbc.RadioItems(
                        id=IDs.Control.ORDER_TYPE_SELECT,
                        options=[
                            {"label": "Input order", "value": OrderPolicy.NATURAL.value},
                            {"label": "Alphabetically", "value": OrderPolicy.ALPHABETICAL.value},
                            {"label": "By a sorted list", "value": OrderPolicy.USER_DEFINED.value},
                        ],
                        value=order_type.value,
                        className="mb-2",
                    ),
                    dcc.Upload(
                        id=IDs.Control.GENE_ORDER_UPLOAD,
                        children=html.Div(["Drop or ", html.A("select"), " a gene list"]),
                        className="pb-upload mb-1",
                    ),
                    html.Small(
                        order_status,
                        id=IDs.Control.GENE_ORDER_STATUS,
                        className="text-muted d-block mb-3",
                    ),
                    html.Hr(),
                    create_slider_cutoff(
                        IDs.Control.VAR1_CUTOFF, f"Cutoff {var1_id or 'var1'}", 0.0, 1.0, var1_id
                    ),
                    create_slider_cutoff(
                        IDs.Control.VAR2_CUTOFF, f"Cutoff {var2_id or 'var2'}", 0.0, 1.0, var2_id
                    ),
                    dbc.Button(
                        "Reset cutoffs",
                        id=IDs.Control.RESET_CUTOFFS_BTN,
                        n_clicks=0,
                        color="secondary",
                        outline=True,
                        size="sm",
                        className="mb-2",
                    ),
                    html.Hr(),
                    html.Div(
                        [
                            create_plot_size(IDs.Control.PLOT_WIDTH, "Width (px)", None),
                            create_plot_size(IDs.Control.PLOT_HEIGHT, "Height (px)", None),
                        ],
                        className="d-flex",
                    ),
                    html.Div(
                        [
                            create_text_size(IDs.Control.X_TEXT_SIZE, "X-axis label size", 8),
                            create_text_size(IDs.Control.Y_TEXT_SIZE, "Y-axis label size", 8),
                        ],
                        className="d-flex",
                    ),
                    _category_legend(category_colors),
                ]
            ),
        ],
        className="pb-sidebar",
    )
