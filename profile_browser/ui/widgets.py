from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import dash
from dash import dcc, html

CUTOFF_STEP = 0.025
SLIDER_WIDTH = 200


def _cutoff_marks(lo: float, hi: float) -> Dict[float, str]:
    return {lo: f"{lo:g}", hi: f"{hi:g}"}


def create_slider_cutoff(
        id: str,
        title: str,
        start: float,
        stop: float,
        var_id: Optional[str],
) -> Optional[html.Div]:
    """
    Range slider for a variable cutoff.

    - var_id is None: nothing to render yet
    - var_id == "": the profile has no such variable, render a fixed 1..1 slider
    - otherwise: 0..1 slider preset to [start, stop]
    """
    if var_id is None:
        return None

    if var_id == "":
        slider = dcc.RangeSlider(
            id=id,
            min=1,
            max=1,
            step=CUTOFF_STEP,
            value=[1, 1],
            marks=_cutoff_marks(1, 1),
            disabled=True,
        )
    else:
        slider = dcc.RangeSlider(
            id=id,
            min=0,
            max=1,
            step=CUTOFF_STEP,
            value=[start, stop],
            marks=_cutoff_marks(0, 1),
            tooltip={"placement": "bottom"},
        )

    return html.Div(
        [html.Label(title, className="form-label"), slider],
        style={"width": f"{SLIDER_WIDTH}px"},
        className="mb-3",
    )


def update_slider_cutoff(new_value: Sequence[float], var_id: Optional[str]) -> Any:
    """
    New properties for a cutoff slider, as a dict of prop -> value.

    Returns dash.no_update when the variable is absent, so callbacks can
    pass the result straight through.
    """
    if not var_id:
        return dash.no_update
    return {
        "value": list(new_value),
        "min": 0,
        "max": 1,
        "step": CUTOFF_STEP,
    }


def _numeric_input(
        id: str,
        title: str,
        value: Optional[float],
        min_value: int,
        max_value: int,
        step: int,
        width: int,
) -> html.Div:
    return html.Div(
        [
            html.Label(title, className="form-label", htmlFor=id),
            dcc.Input(
                id=id,
                type="number",
                min=min_value,
                max=max_value,
                step=step,
                value=value,
                debounce=True,
                className="form-control form-control-sm",
            ),
        ],
        style={"width": f"{width}px"},
        className="me-2 mb-2",
    )


def create_plot_size(id: str, title: str, value: Optional[float], width: int = 100) -> html.Div:
    """Numeric input for a plot dimension in pixels (100-3200, step 50)."""
    return _numeric_input(id, title, value, 100, 3200, 50, width)


def create_text_size(id: str, title: str, value: Optional[int], width: int = 100) -> html.Div:
    """Numeric input for a font size in points (3-99)."""
    return _numeric_input(id, title, value, 3, 99, 1, width)
