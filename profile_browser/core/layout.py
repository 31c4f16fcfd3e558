from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

MAX_ITEMS = 10000
UNIT_SIZE = 12
BASE_SIZE = 200
MIN_SIZE = 300
SIZE_OFFSET = 300


class AxisOrientation(str, Enum):
    TAXA_ON_X = "taxa"
    GENES_ON_X = "genes"

    @classmethod
    def parse(cls, value: Union[str, "AxisOrientation"]) -> "AxisOrientation":
        # Anything other than "taxa" puts genes on the x-axis
        if isinstance(value, AxisOrientation):
            return value
        return cls.TAXA_ON_X if value == cls.TAXA_ON_X.value else cls.GENES_ON_X


@dataclass(frozen=True)
class LayoutRequest:
    taxon_count: int
    gene_count: int
    axis: AxisOrientation = AxisOrientation.TAXA_ON_X
    zoom: float = 0.0


@dataclass(frozen=True)
class LayoutResult:
    """
    Canvas size for the profile plot.

    row_count is the number of items on the y-axis (genes when taxa are on x).
    """
    row_count: int
    height: float
    width: float


def _zoomed_size(n_items: int, zoom: float) -> float:
    size = (BASE_SIZE + UNIT_SIZE * n_items) * (1 + zoom)
    if zoom < -0.5:
        size += 500
    elif zoom < 0:
        size += 200
    return max(size, MIN_SIZE) + SIZE_OFFSET


def compute_layout(request: LayoutRequest) -> Optional[LayoutResult]:
    """
    Adapt the plot size to the number of genes and taxa.

    Returns None when either count reaches MAX_ITEMS; callers should show a
    "too large to render" message instead of a plot.
    """
    if request.taxon_count >= MAX_ITEMS or request.gene_count >= MAX_ITEMS:
        return None

    if AxisOrientation.parse(request.axis) is AxisOrientation.TAXA_ON_X:
        h, w = request.gene_count, request.taxon_count
    else:
        h, w = request.taxon_count, request.gene_count

    return LayoutResult(
        row_count=h,
        height=_zoomed_size(h, request.zoom),
        width=_zoomed_size(w, request.zoom),
    )


def adapt_plot_size(
        taxon_count: int = 0,
        gene_count: int = 0,
        axis: Union[AxisOrientation, str] = AxisOrientation.TAXA_ON_X,
        zoom: float = 0.0,
) -> Optional[LayoutResult]:
    return compute_layout(
        LayoutRequest(
            taxon_count=taxon_count,
            gene_count=gene_count,
            axis=AxisOrientation.parse(axis),
            zoom=float(zoom),
        )
    )
