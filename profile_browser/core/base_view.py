from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pandas as pd
import plotly.graph_objs as go

from .profile_state import ProfileState


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the data given the current ProfileState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, profile: pd.DataFrame):
        self.profile = profile

    @abstractmethod
    def compute_data(self, state: ProfileState) -> Any:
        """
        Compute the data given the current ProfileState
        :param state: the current ProfileState - cutoffs, order and axis the user picked
        :return: data: a dataframe ready for plotting
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: ProfileState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by compute_data()
        :param state: the current ProfileState
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
