from __future__ import annotations

import logging

import pandas as pd
import pytest

from profile_browser.core.ordering import (
    GeneOrder,
    OrderPolicy,
    OrderSpec,
    order_levels,
    sort_gene_ids,
)


def _make_profile() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "geneID": ["g1", "g1", "g2", "g3"],
            "ncbiID": ["t1", "t2", "t1", "t2"],
            "var1": [0.1, 0.2, 0.3, 0.4],
        }
    )


def test_natural_order_is_first_occurrence_without_duplicates():
    records = ["b", "a", "b", "c", "a"]

    order = order_levels(records, OrderPolicy.NATURAL)

    assert order.levels == ("b", "a", "c")
    assert order.unclassified == ()


def test_natural_order_is_repeatable():
    records = ["x3", "x1", "x2", "x1"]
    assert order_levels(records) == order_levels(list(records))


def test_empty_records_give_empty_levels():
    assert order_levels([], OrderPolicy.NATURAL).levels == ()
    assert order_levels([], OrderPolicy.USER_DEFINED, None).levels == ()


def test_alphabetical_order_sorts_distinct_ids():
    order = order_levels(["g10", "g2", "g1", "g2"], OrderPolicy.ALPHABETICAL)
    assert order.levels == ("g1", "g10", "g2")


def test_user_defined_uses_sorted_genes_verbatim():
    spec = OrderSpec(sorted_genes=("g2", "g1"))

    order = order_levels(["g1", "g1", "g2", "g3"], OrderPolicy.USER_DEFINED, spec)

    assert order.levels == ("g2", "g1")
    assert order.unclassified == ("g3",)
    assert "g3" not in order


def test_user_defined_keeps_ids_absent_from_records():
    spec = OrderSpec(sorted_genes=("g9", "g1"))

    order = order_levels(["g1"], OrderPolicy.USER_DEFINED, spec)

    assert order.levels == ("g9", "g1")
    assert len(order) == 2


def test_user_defined_without_spec_falls_back_to_natural():
    records = ["g3", "g1", "g3", "g2"]

    assert order_levels(records, OrderPolicy.USER_DEFINED, None) == order_levels(
        records, OrderPolicy.NATURAL, None
    )


def test_user_defined_spec_without_sorted_genes_falls_back():
    spec = OrderSpec.from_mapping({"more": ["g1"]})
    assert spec.sorted_genes is None

    order = order_levels(["g2", "g1"], "user defined", spec)

    assert order == GeneOrder(levels=("g2", "g1"))


def test_spec_is_ignored_under_natural_policy():
    spec = OrderSpec(sorted_genes=("g2", "g1"))
    assert order_levels(["g1", "g2"], OrderPolicy.NATURAL, spec).levels == ("g1", "g2")


def test_unknown_policy_string_falls_back_to_natural():
    assert OrderPolicy.parse("by profile similarity") is OrderPolicy.NATURAL
    assert order_levels(["b", "a"], "by profile similarity").levels == ("b", "a")


def test_unclassified_genes_are_logged(caplog):
    spec = OrderSpec(sorted_genes=("g1",))

    with caplog.at_level(logging.WARNING, logger="profile_browser.core.ordering"):
        order_levels(["g1", "g2"], OrderPolicy.USER_DEFINED, spec)

    assert any("unclassified" in r.getMessage() for r in caplog.records)


def test_order_spec_from_mapping():
    assert OrderSpec.from_mapping(None) is None
    spec = OrderSpec.from_mapping({"sortedGenes": ["a", "b"]})
    assert spec.sorted_genes == ("a", "b")
    assert spec.to_dict() == {"sortedGenes": ["a", "b"]}
    assert OrderSpec().to_dict() == {}


def test_sort_gene_ids_natural_sets_ordered_categories():
    df = _make_profile()

    out = sort_gene_ids(df, OrderPolicy.NATURAL)

    assert isinstance(out["geneID"].dtype, pd.CategoricalDtype)
    assert out["geneID"].cat.ordered
    assert list(out["geneID"].cat.categories) == ["g1", "g2", "g3"]
    assert out.attrs["unclassified_genes"] == []


def test_sort_gene_ids_user_defined_marks_unclassified_rows():
    df = _make_profile()

    out = sort_gene_ids(df, OrderPolicy.USER_DEFINED, OrderSpec(sorted_genes=("g2", "g1")))

    assert list(out["geneID"].cat.categories) == ["g2", "g1"]
    assert out["geneID"].isna().sum() == 1
    assert out.attrs["unclassified_genes"] == ["g3"]
    # every row is kept
    assert len(out) == len(df)


@pytest.mark.filterwarnings("error")
def test_sort_gene_ids_unclassified_rows_build_without_warnings():
    df = pd.DataFrame(
        {
            "geneID": [f"g{i}" for i in range(100)],
            "ncbiID": ["t1"] * 100,
        }
    )

    out = sort_gene_ids(df, "user defined", OrderSpec(sorted_genes=("g1", "g2")))

    assert list(out["geneID"].cat.categories) == ["g1", "g2"]
    assert out["geneID"].notna().sum() == 2
    assert len(out.attrs["unclassified_genes"]) == 98


def test_sort_gene_ids_does_not_mutate_input():
    df = _make_profile()
    before = df.copy()

    sort_gene_ids(df, OrderPolicy.ALPHABETICAL)

    pd.testing.assert_frame_equal(df, before)


def test_sort_gene_ids_relevels_existing_categorical():
    df = _make_profile()
    df["geneID"] = pd.Categorical(df["geneID"], categories=["g3", "g2", "g1"])

    out = sort_gene_ids(df, OrderPolicy.NATURAL)

    assert list(out["geneID"].cat.categories) == ["g1", "g2", "g3"]
    assert list(out["geneID"]) == ["g1", "g1", "g2", "g3"]


def test_sort_gene_ids_without_column_returns_copy():
    df = pd.DataFrame({"other": [1, 2]})
    out = sort_gene_ids(df)
    pd.testing.assert_frame_equal(out, df)
