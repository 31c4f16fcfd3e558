from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, State

from profile_browser.core.layout import adapt_plot_size
from profile_browser.core.ordering import SORTED_GENES_KEY
from profile_browser.core.profile_data import available_variables, profile_counts
from profile_browser.core.profile_state import ProfileState
from profile_browser.data.readers import decode_upload, parse_single_col_text
from profile_browser.ui.callbacks.callbacks_render import build_profile_state
from profile_browser.ui.ids import IDs
from profile_browser.ui.widgets import update_slider_cutoff
from profile_browser.views.profile_view import ProfileView

if TYPE_CHECKING:
    from profile_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

SLIDER_PROPS = ("value", "min", "max", "step")


def parse_gene_order_upload(
        contents: Optional[str],
        filename: Optional[str],
) -> Tuple[Optional[dict[str, Any]], str]:
    """
    Pure helper: turn a dcc.Upload payload into the gene-order store value
    and a status message.
    """
    text = decode_upload(contents)
    if text is None:
        return None, "No gene list uploaded."

    genes = parse_single_col_text(text)
    if not genes:
        return None, f"{filename or 'Uploaded file'} contains no gene IDs."

    logger.info(
        "Gene order uploaded",
        extra={"upload_filename": filename, "n_genes": len(genes)},
    )
    return {SORTED_GENES_KEY: genes}, f"{len(genes)} genes loaded from {filename or 'upload'}."


def suggest_plot_size(ctx: AppConfig, state: ProfileState) -> Tuple[Optional[int], Optional[int]]:
    """
    Pure helper: (width, height) for the size inputs, or (None, None) if too large.

    Counts come from the data the profile view would plot, so genes hidden by
    the uploaded order do not take up rows.
    """
    data = ProfileView(ctx.profile).compute_data(state)
    taxon_count, gene_count = profile_counts(data)
    layout = adapt_plot_size(taxon_count, gene_count, state.x_axis, state.dot_zoom)
    if layout is None:
        return None, None
    return round(layout.width), round(layout.height)


def _slider_outputs(var_id: str) -> list:
    props = update_slider_cutoff([0.0, 1.0], var_id)
    if props is dash.no_update:
        return [dash.no_update] * len(SLIDER_PROPS)
    return [props[p] for p in SLIDER_PROPS]


def register_control_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.GENE_ORDER, "data"),
        Output(IDs.Control.GENE_ORDER_STATUS, "children"),
        Input(IDs.Control.GENE_ORDER_UPLOAD, "contents"),
        State(IDs.Control.GENE_ORDER_UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def store_gene_order(contents, filename):
        return parse_gene_order_upload(contents, filename)

    @app.callback(
        Output(IDs.Control.PLOT_WIDTH, "value"),
        Output(IDs.Control.PLOT_HEIGHT, "value"),
        Input(IDs.Control.X_AXIS_SELECT, "value"),
        Input(IDs.Control.DOT_ZOOM, "value"),
        Input(IDs.Control.ORDER_TYPE_SELECT, "value"),
        Input(IDs.Store.GENE_ORDER, "data"),
        Input(IDs.Control.VAR1_CUTOFF, "value"),
        Input(IDs.Control.VAR2_CUTOFF, "value"),
    )
    def update_plot_size(x_axis, dot_zoom, order_type, gene_order, var1_cutoff, var2_cutoff):
        state = build_profile_state(
            x_axis, dot_zoom, order_type, gene_order,
            var1_cutoff, var2_cutoff, None, None, None, None,
        )
        width, height = suggest_plot_size(ctx, state)
        if width is None:
            return dash.no_update, dash.no_update
        return width, height

    var1_id, var2_id = available_variables(ctx.profile)

    @app.callback(
        [Output(IDs.Control.VAR1_CUTOFF, p) for p in SLIDER_PROPS]
        + [Output(IDs.Control.VAR2_CUTOFF, p) for p in SLIDER_PROPS],
        Input(IDs.Control.RESET_CUTOFFS_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_cutoffs(_n_clicks):
        return _slider_outputs(var1_id) + _slider_outputs(var2_id)
