from __future__ import annotations

from typing import Dict, Sequence, Tuple

import plotly.graph_objs as go

from hf_browser.core.ranges import ViewRange
from hf_browser.core.series import SeriesGroup
from hf_browser.views.base_view import BaseView

OUTCOME_COLOURS: Dict[str, str] = {
    "Survived": "#1f77b4",
    "Died": "#d62728",
}


class ScatterView(BaseView):
    """
    Outcome-coloured scatter plot

    - X/Y from the selected numeric fields
    - One marker trace per outcome group, in group order
    - Axis ranges fixed to the display range (the core owns zoom)
    """

    id = "scatter"
    label = "Scatter Plot"

    def render_figure(
            self,
            groups: Sequence[SeriesGroup],
            display_range: ViewRange,
            labels: Tuple[str, str],
    ) -> go.Figure:
        x_label, y_label = labels

        fig = go.Figure()
        for group in groups:
            fig.add_trace(
                go.Scatter(
                    x=group.xs,
                    y=group.ys,
                    mode="markers",
                    name=group.label,
                    marker=dict(
                        size=10,
                        opacity=0.85,
                        color=OUTCOME_COLOURS.get(group.label),
                    ),
                    customdata=[[p.meta.get("sex"), p.meta.get("outcome")] for p in group.points],
                    hovertemplate=(
                        f"<b>{group.label}</b><br>"
                        f"{x_label}: %{{x}}<br>"
                        f"{y_label}: %{{y}}<br>"
                        "sex: %{customdata[0]}<br>"
                        "<extra></extra>"
                    ),
                )
            )

        fig.update_layout(
            margin=dict(l=70, r=30, t=20, b=70),
            xaxis=dict(title=dict(text=x_label), zeroline=False, range=display_range.x.as_list()),
            yaxis=dict(title=dict(text=y_label), zeroline=False, range=display_range.y.as_list()),
            legend=dict(orientation="h", y=-0.15),
            dragmode="zoom",
        )
        return fig
