from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterable, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

logger = logging.getLogger(__name__)

SORTED_GENES_KEY = "sortedGenes"


class OrderPolicy(str, Enum):
    """
    How distinct gene IDs are sequenced on the gene axis.

    Values match the labels used by the order-type radio buttons, so a raw
    UI value can be passed straight to OrderPolicy(...).
    """
    NATURAL = "none"
    ALPHABETICAL = "alphabetically"
    USER_DEFINED = "user defined"

    @classmethod
    def parse(cls, value: Union[str, "OrderPolicy", None]) -> "OrderPolicy":
        if isinstance(value, OrderPolicy):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unknown order policy %r, using natural order", value)
            return cls.NATURAL


@dataclass(frozen=True)
class OrderSpec:
    """
    Externally supplied gene order (e.g. an uploaded single-column file).

    sorted_genes is None when the source carried no 'sortedGenes' entry.
    """
    sorted_genes: Optional[Tuple[Hashable, ...]] = None

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> Optional["OrderSpec"]:
        if raw is None:
            return None
        genes = raw.get(SORTED_GENES_KEY) if isinstance(raw, Mapping) else None
        if genes is None:
            return cls()
        return cls(sorted_genes=tuple(genes))

    def to_dict(self) -> dict[str, Any]:
        if self.sorted_genes is None:
            return {}
        return {SORTED_GENES_KEY: list(self.sorted_genes)}


@dataclass(frozen=True)
class GeneOrder:
    """
    Ordered category levels for the gene axis.

    - levels: distinct IDs in display order (may include IDs with no records)
    - unclassified: distinct input IDs that have no level under the policy
    """
    levels: Tuple[Hashable, ...]
    unclassified: Tuple[Hashable, ...] = ()

    def __contains__(self, gene_id: object) -> bool:
        return gene_id in self.levels

    def __len__(self) -> int:
        return len(self.levels)


def _distinct(records: Iterable[Hashable]) -> Tuple[Hashable, ...]:
    # dict keeps insertion order, so this is first-occurrence order
    return tuple(dict.fromkeys(records))


def order_levels(
        records: Sequence[Hashable],
        policy: Union[OrderPolicy, str] = OrderPolicy.NATURAL,
        spec: Optional[OrderSpec] = None,
) -> GeneOrder:
    """
    Compute the display order of gene IDs.

    - NATURAL: distinct IDs in first-occurrence order
    - ALPHABETICAL: distinct IDs sorted by their string form
    - USER_DEFINED: spec.sorted_genes verbatim; falls back to NATURAL when
      spec is missing or carries no sorted_genes

    Under USER_DEFINED, IDs present in records but absent from sorted_genes
    are reported as unclassified rather than given a level.
    """
    policy = OrderPolicy.parse(policy)
    observed = _distinct(records)

    if policy is OrderPolicy.ALPHABETICAL:
        return GeneOrder(levels=tuple(sorted(observed, key=str)))

    if policy is OrderPolicy.USER_DEFINED:
        if spec is None or spec.sorted_genes is None:
            logger.debug("No sortedGenes supplied, falling back to natural order")
            return GeneOrder(levels=observed)

        levels = _distinct(spec.sorted_genes)
        wanted = set(levels)
        unclassified = tuple(g for g in observed if g not in wanted)
        if unclassified:
            # TODO: confirm with product owner whether these should be appended instead of dropped
            logger.warning(
                "Gene IDs missing from the user-defined order are unclassified",
                extra={
                    "n_unclassified": len(unclassified),
                    "unclassified": [str(g) for g in unclassified[:20]],
                },
            )
        return GeneOrder(levels=levels, unclassified=unclassified)

    return GeneOrder(levels=observed)


def sort_gene_ids(
        data: pd.DataFrame,
        policy: Union[OrderPolicy, str] = OrderPolicy.NATURAL,
        spec: Optional[OrderSpec] = None,
        column: str = "geneID",
) -> pd.DataFrame:
    """
    Return a copy of data with `column` turned into an ordered Categorical.

    Rows whose ID is unclassified keep a missing category; their IDs are
    listed in result.attrs["unclassified_genes"].
    """
    out = data.copy()
    if column not in out.columns:
        return out

    values = out[column]
    if isinstance(values.dtype, pd.CategoricalDtype):
        values = values.astype(object)

    order = order_levels(values.dropna().tolist(), policy, spec)
    levels = list(order.levels)

    # Unclassified and missing IDs map to code -1 (missing category)
    codes = pd.Index(levels, dtype=object).get_indexer(values)
    out[column] = pd.Categorical.from_codes(codes, categories=levels, ordered=True)
    out.attrs["unclassified_genes"] = list(order.unclassified)
    return out
