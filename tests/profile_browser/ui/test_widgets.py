from __future__ import annotations

import dash
from dash import dcc, html

from profile_browser.ui.widgets import (
    create_plot_size,
    create_slider_cutoff,
    create_text_size,
    update_slider_cutoff,
)


def _find(component, cls):
    children = component.children if isinstance(component.children, list) else [component.children]
    return next(c for c in children if isinstance(c, cls))


def test_slider_cutoff_without_variable_id_is_none():
    assert create_slider_cutoff("var1-cutoff", "Cutoff", 0.0, 1.0, None) is None


def test_slider_cutoff_for_absent_variable_is_fixed():
    widget = create_slider_cutoff("var2-cutoff", "Cutoff var2", 0.0, 1.0, "")
    slider = _find(widget, dcc.RangeSlider)

    assert slider.id == "var2-cutoff"
    assert slider.min == 1
    assert slider.max == 1
    assert slider.value == [1, 1]
    assert slider.disabled is True


def test_slider_cutoff_for_variable():
    widget = create_slider_cutoff("var1-cutoff", "Cutoff var1", 0.25, 0.75, "var1")
    slider = _find(widget, dcc.RangeSlider)

    assert isinstance(widget, html.Div)
    assert widget.style == {"width": "200px"}
    assert slider.min == 0
    assert slider.max == 1
    assert slider.step == 0.025
    assert slider.value == [0.25, 0.75]


def test_update_slider_cutoff():
    assert update_slider_cutoff([0.1, 0.9], "") is dash.no_update
    assert update_slider_cutoff([0.1, 0.9], None) is dash.no_update
    assert update_slider_cutoff((0.1, 0.9), "var1") == {
        "value": [0.1, 0.9],
        "min": 0,
        "max": 1,
        "step": 0.025,
    }


def test_plot_size_input():
    widget = create_plot_size("plot-width", "Width", 800)
    field = _find(widget, dcc.Input)

    assert field.type == "number"
    assert (field.min, field.max, field.step) == (100, 3200, 50)
    assert field.value == 800
    assert widget.style == {"width": "100px"}


def test_text_size_input():
    widget = create_text_size("x-text-size", "X labels", 8, width=150)
    field = _find(widget, dcc.Input)

    assert (field.min, field.max, field.step) == (3, 99, 1)
    assert field.value == 8
    assert widget.style == {"width": "150px"}
