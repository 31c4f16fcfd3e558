from __future__ import annotations

from profile_browser.core.profile_state import ProfileState


def test_profile_state_to_from_dict_roundtrip():
    st = ProfileState(
        x_axis="genes",
        dot_zoom=-0.3,
        order_type="user defined",
        sorted_genes=["g2", "g1"],
        var1_cutoff=(0.2, 0.9),
        var2_cutoff=(0.0, 0.5),
        x_text_size=10,
        y_text_size=12,
        width=800.0,
        height=900.0,
        color_scale="plasma",
    )

    raw = st.to_dict()
    rebuilt = ProfileState.from_dict(raw)

    assert rebuilt == st
    assert raw["var1_cutoff"] == [0.2, 0.9]


def test_profile_state_from_dict_fills_defaults():
    st = ProfileState.from_dict({"x_axis": None, "dot_zoom": None, "var1_cutoff": None})

    assert st == ProfileState()
