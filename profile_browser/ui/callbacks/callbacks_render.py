from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import pandas as pd
import plotly.graph_objs as go
from dash import Input, Output

from profile_browser.core.ordering import SORTED_GENES_KEY
from profile_browser.core.profile_state import ProfileState
from profile_browser.ui.ids import IDs
from profile_browser.views.profile_view import UNCLASSIFIED_ATTR, ProfileView

if TYPE_CHECKING:
    from profile_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering the profile.", details)


def build_profile_state(
        x_axis: Optional[str],
        dot_zoom: Optional[float],
        order_type: Optional[str],
        gene_order: Optional[dict[str, Any]],
        var1_cutoff,
        var2_cutoff,
        width: Optional[float],
        height: Optional[float],
        x_text_size: Optional[int],
        y_text_size: Optional[int],
) -> ProfileState:
    """Pure helper: collect raw control values into a ProfileState."""
    sorted_genes = None
    if isinstance(gene_order, dict):
        sorted_genes = gene_order.get(SORTED_GENES_KEY)

    return ProfileState.from_dict(
        {
            "x_axis": x_axis,
            "dot_zoom": dot_zoom,
            "order_type": order_type,
            "sorted_genes": sorted_genes,
            "var1_cutoff": var1_cutoff,
            "var2_cutoff": var2_cutoff,
            "width": width,
            "height": height,
            "x_text_size": x_text_size,
            "y_text_size": y_text_size,
        }
    )


def render_profile(ctx: AppConfig, state: ProfileState) -> tuple[go.Figure, str]:
    view = ProfileView(ctx.profile)

    logger.info(
        "render_start",
        extra={"view_id": view.id, "order_type": state.order_type, "x_axis": state.x_axis},
    )

    data = view.compute_data(state)
    if isinstance(data, pd.DataFrame) and data.empty:
        return (
            _message_figure(
                "No data to display.",
                "The current cutoffs or gene order removed every ortholog. "
                "Try widening the cutoffs or uploading a different gene list.",
            ),
            "0 genes shown.",
        )

    n_unclassified = len(data.attrs.get(UNCLASSIFIED_ATTR, []))
    status = f"{data['geneID'].nunique()} genes x {data['ncbiID'].nunique()} taxa shown."
    if n_unclassified:
        status += f" {n_unclassified} gene(s) are not in the uploaded order and are hidden."

    return view.render_figure(data, state), status


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Store.PROFILE_STATE, "data"),
        Input(IDs.Control.X_AXIS_SELECT, "value"),
        Input(IDs.Control.DOT_ZOOM, "value"),
        Input(IDs.Control.ORDER_TYPE_SELECT, "value"),
        Input(IDs.Store.GENE_ORDER, "data"),
        Input(IDs.Control.VAR1_CUTOFF, "value"),
        Input(IDs.Control.VAR2_CUTOFF, "value"),
        Input(IDs.Control.PLOT_WIDTH, "value"),
        Input(IDs.Control.PLOT_HEIGHT, "value"),
        Input(IDs.Control.X_TEXT_SIZE, "value"),
        Input(IDs.Control.Y_TEXT_SIZE, "value"),
    )
    def update_main_graph(
            x_axis, dot_zoom, order_type, gene_order,
            var1_cutoff, var2_cutoff, width, height, x_text_size, y_text_size,
    ):
        try:
            state = build_profile_state(
                x_axis, dot_zoom, order_type, gene_order,
                var1_cutoff, var2_cutoff, width, height, x_text_size, y_text_size,
            )
        except (TypeError, ValueError):
            logger.exception("Invalid control values in main graph callback")
            return _error_figure("Internal error: invalid plot settings."), "", dash.no_update

        try:
            fig, status = render_profile(ctx, state)
        except Exception:
            logger.exception(
                "Error in update_main_graph",
                extra={"profile_state": state.to_dict()},
            )
            return (
                _error_figure(
                    "The app hit an unexpected error. "
                    "If this keeps happening, grab the logs and open an issue."
                ),
                "",
                dash.no_update,
            )

        return fig, status, state.to_dict()
