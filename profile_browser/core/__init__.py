"""
Core domain layer: gene ordering, plot layout sizing, profile data and
the view base class
"""

from .ordering import GeneOrder, OrderPolicy, OrderSpec, order_levels, sort_gene_ids
from .layout import AxisOrientation, LayoutRequest, LayoutResult, adapt_plot_size, compute_layout
from .profile_state import ProfileState
from .base_view import BaseView

__all__ = [
    "GeneOrder",
    "OrderPolicy",
    "OrderSpec",
    "order_levels",
    "sort_gene_ids",
    "AxisOrientation",
    "LayoutRequest",
    "LayoutResult",
    "adapt_plot_size",
    "compute_layout",
    "ProfileState",
    "BaseView",
]
