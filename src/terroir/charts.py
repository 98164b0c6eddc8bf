"""Plotly figures for derived flavor profiles and match scores."""

from typing import Sequence

import plotly.graph_objects as go

from terroir.constants import FlavorAttributes, UIConstants
from terroir.schema import FlavorProfile, Scored


def flavor_radar_chart(profile: FlavorProfile, title: str = "Derived Flavor Profile") -> go.Figure:
    """
    Radar chart of a flavor profile on the 1-5 scale.

    Args:
        profile: Profile to draw
        title: Chart title

    Returns:
        Plotly Figure with a single closed Scatterpolar trace
    """
    categories = [UIConstants.FEATURE_LABELS[name] for name in FlavorAttributes.feature_columns()]
    values = profile.to_array().tolist()

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=values + [values[0]],
        theta=categories + [categories[0]],
        fill='toself',
        fillcolor=UIConstants.RADAR_FILL_COLOR,
        line=dict(color=UIConstants.RADAR_LINE_COLOR, width=2),
        name=title,
    ))

    fig.update_layout(
        polar=dict(
            radialaxis=dict(
                visible=True,
                range=[0, 5],
                tickmode='linear',
                tick0=0,
                dtick=1,
            ),
        ),
        showlegend=False,
        title=dict(text=f'<b>{title}</b>', x=0.5, xanchor='center'),
        height=420,
    )
    return fig


def score_bar_chart(scored: Sequence[Scored], title: str) -> go.Figure:
    """Horizontal bars of match scores, best match on top."""
    names = [item.entity.name for item in scored]
    scores = [item.score for item in scored]

    fig = go.Figure(go.Bar(
        x=scores[::-1],
        y=names[::-1],
        orientation='h',
        marker_color=UIConstants.BAR_COLOR,
        text=[f"{s:.0f}%" for s in scores[::-1]],
        textposition='outside',
    ))
    fig.update_layout(
        title=dict(text=f'<b>{title}</b>', x=0.5, xanchor='center'),
        xaxis=dict(range=[0, 110], title='Match score'),
        height=60 + 40 * max(len(scored), 1),
    )
    return fig


__all__ = ['flavor_radar_chart', 'score_bar_chart']
