"""Reactive chart labels: a title that shows the touched data point's value."""

from chart_label.chart_value import ChartValue
from chart_label.colors import ColorResolver, ThemeColorResolver
from chart_label.exceptions import ChartLabelError, ConfigError
from chart_label.label import ChartLabel, RenderedLabel
from chart_label.label_config import LabelConfig
from chart_label.observable import Observable, Subscription
from chart_label.render import add_label, label_annotation
from chart_label.settings import LabelSettings
from chart_label.styling import (
    ColorRole,
    CustomLabelType,
    EdgeInsets,
    LabelStyle,
    LabelType,
    label_style,
)

__all__ = [
    "ChartLabel",
    "ChartLabelError",
    "ChartValue",
    "ColorResolver",
    "ColorRole",
    "ConfigError",
    "CustomLabelType",
    "EdgeInsets",
    "LabelConfig",
    "LabelSettings",
    "LabelStyle",
    "LabelType",
    "Observable",
    "RenderedLabel",
    "Subscription",
    "ThemeColorResolver",
    "add_label",
    "label_annotation",
    "label_style",
]
