from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        GENE_ORDER = "gene-order"
        PROFILE_STATE = "profile-state"

    class Control:
        # Plot options
        X_AXIS_SELECT = "x-axis-select"
        DOT_ZOOM = "dot-zoom"
        ORDER_TYPE_SELECT = "order-type-select"
        GENE_ORDER_UPLOAD = "gene-order-upload"
        GENE_ORDER_STATUS = "gene-order-status"

        # Cutoffs
        VAR1_CUTOFF = "var1-cutoff"
        VAR2_CUTOFF = "var2-cutoff"
        RESET_CUTOFFS_BTN = "reset-cutoffs-btn"

        # Size inputs
        PLOT_WIDTH = "plot-width"
        PLOT_HEIGHT = "plot-height"
        X_TEXT_SIZE = "x-text-size"
        Y_TEXT_SIZE = "y-text-size"

        # Graph + links
        MAIN_GRAPH = "main-graph"
        DB_LINK = "db-link"

        # Status bar
        STATUS_BAR = "status-bar"
