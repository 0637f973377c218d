"""Shared fixtures for chart_label tests."""

from __future__ import annotations

import pytest

from chart_label.chart_value import ChartValue
from chart_label.label import ChartLabel
from chart_label.label_config import LabelConfig


@pytest.fixture()
def chart_value() -> ChartValue:
    """Idle chart: no data point selected."""
    return ChartValue()


@pytest.fixture()
def config() -> LabelConfig:
    """Config with a title, ': ' delimiter and legend display off."""
    return LabelConfig(title="Weekly steps", delimiter=": ", show_legend=False)


@pytest.fixture()
def label(chart_value: ChartValue, config: LabelConfig) -> ChartLabel:
    """Title label bound to the chart_value and config fixtures."""
    lbl = ChartLabel("Fallback", chart_value=chart_value, config=config)
    yield lbl
    lbl.close()
