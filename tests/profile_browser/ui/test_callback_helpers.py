from __future__ import annotations

import base64
from pathlib import Path

import pandas as pd
import plotly.graph_objs as go

from profile_browser.config.model import GlobalConfig
from profile_browser.ui.callbacks.callbacks_controls import parse_gene_order_upload, suggest_plot_size
from profile_browser.ui.callbacks.callbacks_links import link_for_click
from profile_browser.ui.callbacks.callbacks_render import build_profile_state, render_profile
from profile_browser.ui.config import AppConfig


def _make_ctx(db_source: str = "UniProt", with_ortho: bool = True) -> AppConfig:
    profile = pd.DataFrame(
        {
            "geneID": ["g1", "g1", "g2"],
            "ncbiID": ["t1", "t2", "t1"],
            "orthoID": ["P1", "P2", "P3"],
            "var1": [0.9, 0.2, 0.5],
        }
    )
    if not with_ortho:
        profile = profile.drop(columns=["orthoID"])
    return AppConfig(
        config_root=Path("config"),
        global_config=GlobalConfig(
            ui_title="Test",
            main_input=Path("profile.tsv"),
            db_source=db_source,
        ),
        profile=profile,
    )


def _upload(text: str) -> str:
    return "data:text/plain;base64," + base64.b64encode(text.encode()).decode("ascii")


def test_parse_gene_order_upload():
    data, status = parse_gene_order_upload(_upload("g2\ng1\ng2\n"), "order.txt")

    assert data == {"sortedGenes": ["g2", "g1"]}
    assert "2 genes" in status


def test_parse_gene_order_upload_empty():
    data, status = parse_gene_order_upload(_upload("\n"), "order.txt")
    assert data is None
    assert "no gene IDs" in status

    data, _ = parse_gene_order_upload(None, None)
    assert data is None


def test_suggest_plot_size():
    ctx = _make_ctx()
    state = build_profile_state("taxa", 0, "none", None, None, None, None, None, None, None)
    zoomed = build_profile_state("taxa", 2, "none", None, None, None, None, None, None, None)

    assert suggest_plot_size(ctx, state) == (600, 600)
    # zoom 2: (200 + 24) * 3 = 672, +300
    assert suggest_plot_size(ctx, zoomed) == (972, 972)


def test_suggest_plot_size_skips_genes_hidden_by_uploaded_order():
    ctx = _make_ctx()
    ctx.profile = pd.DataFrame(
        {
            "geneID": [f"g{i}" for i in range(100)],
            "ncbiID": ["t1"] * 100,
            "orthoID": [f"P{i}" for i in range(100)],
            "var1": [0.5] * 100,
        }
    )
    state = build_profile_state(
        "taxa", 0, "user defined", {"sortedGenes": ["g1", "g2"]},
        None, None, None, None, None, None,
    )

    assert suggest_plot_size(ctx, state) == (600, 600)

    fig, status = render_profile(ctx, state)
    assert fig.layout.height == 600
    assert "98 gene(s)" in status


def test_suggest_plot_size_counts_all_genes_under_natural_order():
    ctx = _make_ctx()
    ctx.profile = pd.DataFrame(
        {
            "geneID": [f"g{i}" for i in range(100)],
            "ncbiID": ["t1"] * 100,
        }
    )
    state = build_profile_state("taxa", 0, "none", None, None, None, None, None, None, None)

    # height: 200 + 12 * 100 = 1400, +300
    assert suggest_plot_size(ctx, state) == (600, 1700)


def test_build_profile_state_reads_gene_order_store():
    state = build_profile_state(
        "genes", -0.2, "user defined", {"sortedGenes": ["g2"]},
        [0.1, 0.9], [1, 1], None, None, 10, None,
    )

    assert state.x_axis == "genes"
    assert state.sorted_genes == ["g2"]
    assert state.var1_cutoff == (0.1, 0.9)
    assert state.x_text_size == 10
    assert state.y_text_size == 8


def test_render_profile_reports_hidden_genes():
    ctx = _make_ctx()
    state = build_profile_state(
        "taxa", 0, "user defined", {"sortedGenes": ["g2"]},
        None, None, None, None, None, None,
    )

    fig, status = render_profile(ctx, state)

    assert isinstance(fig, go.Figure)
    assert "1 genes x 1 taxa" in status
    assert "hidden" in status


def test_render_profile_no_data_message():
    ctx = _make_ctx()
    state = build_profile_state(
        "taxa", 0, "none", None, [0.95, 1.0], None, None, None, None, None,
    )

    fig, status = render_profile(ctx, state)

    assert status == "0 genes shown."
    assert "No data to display." in fig.layout.annotations[0].text


def test_link_for_click_uses_ortholog_ids():
    ctx = _make_ctx()
    click = {"points": [{"x": "t1", "y": "g1"}]}

    md = link_for_click(ctx, click, "taxa")

    assert "https://www.uniprot.org/uniprot/P1" in md
    assert "P2" not in md


def test_link_for_click_genes_on_x_without_ortholog_column():
    ctx = _make_ctx(db_source="OMA", with_ortho=False)
    click = {"points": [{"x": "g2", "y": "t1"}]}

    md = link_for_click(ctx, click, "genes")

    assert "https://omabrowser.org/oma/omagroup/g2/members/" in md


def test_link_for_click_unknown_source_and_no_click():
    ctx = _make_ctx(db_source="Ensembl")

    assert "No Ensembl link" in link_for_click(ctx, {"points": [{"x": "t1", "y": "g1"}]}, "taxa")
    assert "Click a dot" in link_for_click(ctx, None, "taxa")


def test_link_for_click_extracts_protein_from_bionf_ids():
    ctx = _make_ctx()
    ctx.profile.loc[0, "orthoID"] = "g1|HUMAN@t1@qfo|Q9XYZ1|1"

    md = link_for_click(ctx, {"points": [{"x": "t1", "y": "g1"}]}, "taxa")

    assert "https://www.uniprot.org/uniprot/Q9XYZ1" in md


def test_link_for_click_strips_ncbi_prefix_for_bionf_ids():
    ctx = _make_ctx()
    ctx.profile.loc[0, "ncbiID"] = "ncbi9606"
    ctx.profile.loc[0, "orthoID"] = "g1|HUMAN@9606@qfo|Q9XYZ1|1"

    md = link_for_click(ctx, {"points": [{"x": "ncbi9606", "y": "g1"}]}, "taxa")

    assert "https://www.uniprot.org/uniprot/Q9XYZ1" in md
