from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State

from profile_browser.core.layout import AxisOrientation
from profile_browser.core.profile_data import GENE_COL, ORTHO_COL, TAXON_COL
from profile_browser.data.text_utils import check_bionf_format, substr_left, substr_right
from profile_browser.links.db_links import LinkType, db_link_html
from profile_browser.ui.ids import IDs

if TYPE_CHECKING:
    from profile_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _ncbi_number(taxon: str) -> str:
    """Strip the "ncbi" prefix of a taxon ID (ncbi9606 -> 9606)."""
    if substr_left(taxon, 4) == "ncbi":
        return substr_right(taxon, len(taxon) - 4)
    return taxon


def _protein_id(ortho_id: str, gene: str, taxon: str) -> str:
    # BIONF ortholog IDs carry the protein ID in the third field
    if check_bionf_format(ortho_id, gene, _ncbi_number(taxon)):
        return ortho_id.split("|")[2]
    return ortho_id


def link_for_click(ctx: AppConfig, click_data: Optional[dict[str, Any]], x_axis: str) -> str:
    """
    Pure helper: database links for the orthologs behind a clicked dot.

    Falls back to the gene (group) ID when the profile has no orthoID column.
    """
    if not click_data or not click_data.get("points"):
        return "Click a dot to get a link to the ortholog's database entry."

    point = click_data["points"][0]
    if AxisOrientation.parse(x_axis) is AxisOrientation.TAXA_ON_X:
        taxon, gene = point.get("x"), point.get("y")
    else:
        gene, taxon = point.get("x"), point.get("y")

    profile = ctx.profile
    rows = profile[(profile[GENE_COL] == str(gene)) & (profile[TAXON_COL] == str(taxon))]

    cfg = ctx.global_config
    if ORTHO_COL in rows.columns and not rows.empty:
        ids = list(dict.fromkeys(
            _protein_id(o, str(gene), str(taxon)) for o in rows[ORTHO_COL].dropna().astype(str)
        ))
        link_type = LinkType.GENE
    else:
        ids = [str(gene)]
        link_type = LinkType.GROUP

    snippets = [db_link_html(i, cfg.db_source, link_type, cfg.db_version) for i in ids]
    snippets = [s for s in snippets if s]
    if not snippets:
        logger.warning(
            "No database link available",
            extra={"gene": gene, "taxon": taxon, "db_source": cfg.db_source},
        )
        return f"No {cfg.db_source} link available for **{gene}** in **{taxon}**."
    return "\n".join(snippets)


def register_link_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DB_LINK, "children"),
        Input(IDs.Control.MAIN_GRAPH, "clickData"),
        State(IDs.Control.X_AXIS_SELECT, "value"),
        prevent_initial_call=True,
    )
    def show_db_link(click_data, x_axis):
        return link_for_click(ctx, click_data, x_axis)
