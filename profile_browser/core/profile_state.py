from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ProfileState:
    """
    Represents the current user selection for the profile plot.

    Fields:

    - x_axis: "taxa" or "genes", which entity goes on the x-axis
    - dot_zoom: signed zoom factor from the zoom slider
    - order_type: gene order policy label ("none", "alphabetically", "user defined")
    - sorted_genes: uploaded gene order, None if nothing was uploaded

    - var1_cutoff / var2_cutoff: inclusive [min, max] range for each variable
    - x_text_size / y_text_size: tick label font sizes
    - width / height: plot size overrides, None means use the computed layout
    """

    x_axis: str = "taxa"
    dot_zoom: float = 0.0
    order_type: str = "none"
    sorted_genes: Optional[List[str]] = None

    var1_cutoff: Tuple[float, float] = (0.0, 1.0)
    var2_cutoff: Tuple[float, float] = (0.0, 1.0)

    x_text_size: int = 8
    y_text_size: int = 8

    width: Optional[float] = None
    height: Optional[float] = None

    color_scale: str = "viridis"

    def to_dict(self) -> Dict[str, Any]:
        raw = asdict(self)
        raw["var1_cutoff"] = list(self.var1_cutoff)
        raw["var2_cutoff"] = list(self.var2_cutoff)
        return raw

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ProfileState:
        sorted_genes = data.get("sorted_genes")
        return cls(
            x_axis=data.get("x_axis") or "taxa",
            dot_zoom=float(data.get("dot_zoom") or 0.0),
            order_type=data.get("order_type") or "none",
            sorted_genes=list(sorted_genes) if sorted_genes is not None else None,
            var1_cutoff=_cutoff(data.get("var1_cutoff")),
            var2_cutoff=_cutoff(data.get("var2_cutoff")),
            x_text_size=int(data.get("x_text_size") or 8),
            y_text_size=int(data.get("y_text_size") or 8),
            width=data.get("width"),
            height=data.get("height"),
            color_scale=data.get("color_scale", "viridis"),
        )


def _cutoff(value: Any) -> Tuple[float, float]:
    if not value:
        return (0.0, 1.0)
    if isinstance(value, (int, float)):
        return (float(value), 1.0)
    lo, hi = value[0], value[-1]
    return (float(lo), float(hi))
