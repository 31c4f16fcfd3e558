from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from profile_browser.core.base_view import BaseView
from profile_browser.core.layout import MAX_ITEMS, AxisOrientation, adapt_plot_size
from profile_browser.core.ordering import OrderSpec, order_levels, sort_gene_ids
from profile_browser.core.profile_data import (
    GENE_COL,
    TAXON_COL,
    filter_by_cutoffs,
    profile_counts,
)
from profile_browser.core.profile_state import ProfileState
from profile_browser.data.text_utils import scale01

logger = logging.getLogger(__name__)

UNCLASSIFIED_ATTR = "unclassified_genes"
MIN_DOT_SIZE = 0.2


class ProfileView(BaseView):
    """
    Phylogenetic profile dot plot:
    - one axis: genes (ordered by the selected order policy)
    - other axis: taxa (in input order)
    - dot-size: var1 scaled into [MIN_DOT_SIZE, 1] (1 when the table has no var1)
    - dot-color: var2, if present
    """

    id = "profile"
    label = "Profile"

    def compute_data(self, state: ProfileState) -> pd.DataFrame:
        df = filter_by_cutoffs(self.profile, state.var1_cutoff, state.var2_cutoff)
        if df.empty:
            return pd.DataFrame()

        spec = (
            OrderSpec(sorted_genes=tuple(state.sorted_genes))
            if state.sorted_genes is not None
            else None
        )
        ordered = sort_gene_ids(df, state.order_type, spec, column=GENE_COL)
        unclassified = ordered.attrs.get(UNCLASSIFIED_ATTR, [])

        # Unclassified genes have no level, so they have no row on the plot
        data = ordered.dropna(subset=[GENE_COL]).copy()
        if unclassified:
            logger.info(
                "Hiding unclassified genes from profile plot",
                extra={"n_unclassified": len(unclassified)},
            )

        taxa = order_levels(data[TAXON_COL].tolist()).levels
        data[TAXON_COL] = pd.Categorical(data[TAXON_COL], categories=list(taxa), ordered=True)

        data = data.sort_values([GENE_COL, TAXON_COL]).reset_index(drop=True)
        data.attrs[UNCLASSIFIED_ATTR] = list(unclassified)
        return data

    def render_figure(self, data: pd.DataFrame, state: ProfileState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No data to show")

        taxon_count, gene_count = profile_counts(data)
        layout = adapt_plot_size(
            taxon_count=taxon_count,
            gene_count=gene_count,
            axis=state.x_axis,
            zoom=state.dot_zoom,
        )
        if layout is None:
            return self.empty_figure(
                f"Too many genes or taxa to render ({gene_count} genes, {taxon_count} taxa; "
                f"limit is {MAX_ITEMS - 1} each)"
            )

        plot_df = data.copy()
        present = set(plot_df[GENE_COL])
        gene_order = [str(g) for g in plot_df[GENE_COL].cat.categories if g in present]
        taxon_order = [str(t) for t in plot_df[TAXON_COL].cat.categories]
        plot_df[GENE_COL] = plot_df[GENE_COL].astype(str)
        plot_df[TAXON_COL] = plot_df[TAXON_COL].astype(str)

        if "var1" in plot_df.columns:
            # Rows with a missing var1 get the smallest dot
            scaled = np.nan_to_num(scale01(plot_df["var1"].to_numpy(dtype=float)), nan=0.0)
            plot_df["dotSize"] = MIN_DOT_SIZE + (1.0 - MIN_DOT_SIZE) * scaled
        else:
            plot_df["dotSize"] = 1.0
        color_col = "var2" if "var2" in plot_df.columns else None

        if AxisOrientation.parse(state.x_axis) is AxisOrientation.TAXA_ON_X:
            x_col, y_col = TAXON_COL, GENE_COL
        else:
            x_col, y_col = GENE_COL, TAXON_COL

        hover_cols = [c for c in ("orthoID", "var1", "var2") if c in plot_df.columns]

        fig = px.scatter(
            plot_df,
            x=x_col,
            y=y_col,
            size="dotSize",
            color=color_col,
            size_max=max(4.0, 12 * (1 + state.dot_zoom)),
            color_continuous_scale=state.color_scale,
            category_orders={GENE_COL: gene_order, TAXON_COL: taxon_order},
            hover_data=hover_cols,
        )

        title = None
        unclassified = data.attrs.get(UNCLASSIFIED_ATTR, [])
        if unclassified:
            title = f"{len(unclassified)} gene(s) not in the uploaded order are hidden"

        fig.update_layout(
            title=title,
            height=state.height or layout.height,
            width=state.width or layout.width,
            margin=dict(l=40, r=40, b=40, t=60),
            xaxis_title="Taxa" if x_col == TAXON_COL else "Genes",
            yaxis_title="Genes" if y_col == GENE_COL else "Taxa",
        )
        fig.update_xaxes(tickangle=-60, tickfont=dict(size=state.x_text_size), side="top")
        fig.update_yaxes(tickfont=dict(size=state.y_text_size), autorange="reversed")

        return fig
