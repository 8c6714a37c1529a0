from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

import plotly.graph_objs as go

from hf_browser.core.ranges import ViewRange
from hf_browser.core.series import SeriesGroup


class BaseView(ABC):
    """
    Abstract base class for plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'render_figure' - turn a (series, range, labels) snapshot into a Plotly figure

    A view is a render sink: calling it renders the snapshot and keeps the
    result on 'figure'. It never feeds anything back into the core.
    """

    id: str = None
    label: str = None

    def __init__(self) -> None:
        self.figure: Optional[go.Figure] = None

    def __call__(
            self,
            groups: Sequence[SeriesGroup],
            display_range: ViewRange,
            labels: Tuple[str, str],
    ) -> None:
        self.figure = self.render_figure(groups, display_range, labels)

    @abstractmethod
    def render_figure(
            self,
            groups: Sequence[SeriesGroup],
            display_range: ViewRange,
            labels: Tuple[str, str],
    ) -> go.Figure:
        """
        Render the figure for a snapshot
        :param groups: the series produced by the pipeline
        :param display_range: the axis window to show
        :param labels: (x label, y label)
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    @staticmethod
    def message_figure(title: str, details: Optional[str] = None) -> go.Figure:
        """
        Standardised 'no data' / error figure used by all views.
        """
        fig = go.Figure()
        text = title if details is None else f"{title}<br><br>{details}"
        fig.add_annotation(
            text=text,
            showarrow=False,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
        )
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
        return fig
