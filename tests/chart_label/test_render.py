"""Tests for chart_label.render -- Plotly annotations."""

from __future__ import annotations

import plotly.graph_objects as go

from chart_label.label import ChartLabel, RenderedLabel
from chart_label.label_config import LabelConfig
from chart_label.render import BODY_FONT, add_label, label_annotation
from chart_label.styling import EdgeInsets, LabelType


def _rendered(**overrides) -> RenderedLabel:
    base = dict(
        text="Weekly steps",
        size=32.0,
        padding=EdgeInsets(16.0, 8.0, 0.0, 8.0),
        color="rgba(0, 0, 0, 1.0)",
    )
    base.update(overrides)
    return RenderedLabel(**base)


class TestLabelAnnotation:
    def test_bold_text(self):
        ann = label_annotation(_rendered())
        assert ann["text"] == "<b>Weekly steps</b>"

    def test_plain_text_when_not_bold(self):
        ann = label_annotation(_rendered(bold=False))
        assert ann["text"] == "Weekly steps"

    def test_font(self):
        ann = label_annotation(_rendered())
        assert ann["font"] == dict(family=BODY_FONT, size=32.0, color="rgba(0, 0, 0, 1.0)")

    def test_padding_to_shifts(self):
        ann = label_annotation(_rendered())
        assert ann["xshift"] == 8.0
        assert ann["yshift"] == -16.0

    def test_paper_anchor(self):
        ann = label_annotation(_rendered(), x=0.5, y=0.9)
        assert (ann["xref"], ann["yref"]) == ("paper", "paper")
        assert (ann["x"], ann["y"]) == (0.5, 0.9)
        assert ann["xanchor"] == "left"
        assert ann["showarrow"] is False


class TestAddLabel:
    def test_adds_annotation(self, label):
        fig = add_label(go.Figure(), label)
        assert len(fig.layout.annotations) == 1
        assert fig.layout.annotations[0].text == "<b>Weekly steps</b>"

    def test_reflects_current_text(self, label, chart_value, config):
        config.set_legend_display(True)
        chart_value.update(3.14159, "Mon", True)
        fig = add_label(go.Figure(), label)
        assert fig.layout.annotations[0].text == "<b>3.1: Mon</b>"

    def test_multiple_labels(self, chart_value, config):
        fig = go.Figure()
        with ChartLabel("t", LabelType.TITLE, chart_value=chart_value, config=config) as title:
            with ChartLabel("l", LabelType.LEGEND, chart_value=chart_value, config=config) as legend:
                add_label(fig, title)
                add_label(fig, legend, y=0.9)
        sizes = [a.font.size for a in fig.layout.annotations]
        assert sizes == [32, 14]


class TestEscaping:
    def test_markup_in_text_is_escaped(self):
        ann = label_annotation(_rendered(text="Steps <5k & rising"))
        assert ann["text"] == "<b>Steps &lt;5k &amp; rising</b>"

    def test_legend_tag_not_passed_as_markup(self, chart_value):
        cfg = LabelConfig(title="Steps <5k & rising", delimiter=" ", show_legend=True)
        with ChartLabel("x", chart_value=chart_value, config=cfg) as lbl:
            chart_value.update(3.0, "<i>Mon", True)
            ann = label_annotation(lbl.render())
        assert ann["text"] == "<b>3.0 &lt;i&gt;Mon</b>"
        assert "<i>" not in ann["text"]

    def test_escaped_without_bold(self):
        ann = label_annotation(_rendered(text="a<b", bold=False))
        assert ann["text"] == "a&lt;b"

    def test_idle_title_escaped_on_figure(self, chart_value):
        cfg = LabelConfig(title="Steps <5k & rising")
        with ChartLabel("x", chart_value=chart_value, config=cfg) as lbl:
            fig = add_label(go.Figure(), lbl)
        assert fig.layout.annotations[0].text == "<b>Steps &lt;5k &amp; rising</b>"


class TestPaddingMapping:
    def test_trailing_and_bottom_do_not_shift(self):
        a = label_annotation(_rendered(padding=EdgeInsets(16.0, 8.0, 0.0, 8.0)))
        b = label_annotation(_rendered(padding=EdgeInsets(16.0, 8.0, 30.0, 40.0)))
        assert (a["xshift"], a["yshift"]) == (b["xshift"], b["yshift"])
