from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from profile_browser.ui.ids import IDs


def build_plot_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Profile"), className="p-2"),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mb-2"),
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=html.Div(
                            dcc.Graph(id=IDs.Control.MAIN_GRAPH, config={"responsive": False}),
                            style={"overflow": "auto", "maxHeight": "85vh"},
                        ),
                    ),
                    html.Hr(),
                    dcc.Markdown(
                        id=IDs.Control.DB_LINK,
                        children="Click a dot to get a link to the ortholog's database entry.",
                        dangerously_allow_html=True,
                    ),
                ],
                className="pb-main-body",
            ),
        ],
        className="pb-maincard",
    )
