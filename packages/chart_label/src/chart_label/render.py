"""Plotly adapter: draw a chart label as a figure annotation."""

from __future__ import annotations

import html

import plotly.graph_objects as go

from chart_label.label import ChartLabel, RenderedLabel

BODY_FONT = "Arial, Helvetica, sans-serif"


def label_annotation(rendered: RenderedLabel, x: float = 0.0, y: float = 1.0) -> dict:
    """Build kwargs for ``fig.add_annotation`` from a rendered label.

    Paper coordinates, anchored top-left. Leading padding becomes a right
    shift, top padding a downward shift. Trailing and bottom padding are
    ignored: with a top-left anchor they do not move the text.

    Label text is HTML-escaped, so ``<`` and ``&`` in titles or legends show
    literally instead of being read as Plotly markup.

    Usage:
        fig.add_annotation(**label_annotation(label.render()))
    """
    text = html.escape(rendered.text, quote=False)
    if rendered.bold:
        text = f"<b>{text}</b>"
    return dict(
        text=text,
        xref="paper",
        yref="paper",
        x=x,
        y=y,
        xanchor="left",
        yanchor="top",
        xshift=rendered.padding.leading,
        yshift=-rendered.padding.top,
        showarrow=False,
        font=dict(family=BODY_FONT, size=rendered.size, color=rendered.color),
    )


def add_label(fig: go.Figure, label: ChartLabel, x: float = 0.0, y: float = 1.0) -> go.Figure:
    """Add the label's current state to *fig* and return it."""
    fig.add_annotation(**label_annotation(label.render(), x=x, y=y))
    return fig
