from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html


def build_navbar(global_config) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "PhyloProfile Browser")
    subtitle = getattr(global_config, "subtitle", "Phylogenetic profile explorer")

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pb-navbar",
    )
