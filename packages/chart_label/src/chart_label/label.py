"""Reactive chart label: a title that turns into the touched data point's value."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from chart_label.chart_value import ChartValue
from chart_label.colors import ColorResolver, ThemeColorResolver, resolve_color
from chart_label.label_config import LabelConfig
from chart_label.observable import Observable
from chart_label.styling import AnyLabelType, EdgeInsets, LabelStyle, LabelType, label_style

DEFAULT_VALUE_FORMAT = "%.01f"


@dataclass(frozen=True)
class RenderedLabel:
    """Everything a host needs to draw the label at one moment.

    Fields:
        text: Display text.
        size: Font size in points.
        padding: Edge padding around the text.
        color: Resolved color string.
        bold: Labels always render in a bold weight.
        fills_width: True while no data point is selected; the label is then
            pushed to the leading edge and the rest of the row left empty.
    """

    text: str
    size: float
    padding: EdgeInsets
    color: str
    bold: bool = True
    fills_width: bool = True


class ChartLabel:
    """A chart label bound to a chart's ``ChartValue`` and ``LabelConfig``.

    Shows ``config.title`` while the chart is idle and the formatted value of
    the selected data point while the user interacts with the chart.

    Args:
        title: Fallback title. Stored but not used for display; the shown
            title always comes from ``config``.
        label_type: Preset ``LabelType`` or a ``CustomLabelType``.
        value_format: printf-style pattern applied to ``current_value``.
        chart_value: Interaction state of the owning chart.
        config: Label configuration of the owning chart.
        color_resolver: Resolves semantic colors; defaults to the light theme.
    """

    def __init__(
        self,
        title: str,
        label_type: AnyLabelType = LabelType.TITLE,
        value_format: str = DEFAULT_VALUE_FORMAT,
        *,
        chart_value: ChartValue,
        config: LabelConfig,
        color_resolver: ColorResolver | None = None,
    ) -> None:
        self._title = title
        self._label_type = label_type
        self._value_format = value_format
        self._chart_value = chart_value
        self._config = config
        self._color_resolver = color_resolver or ThemeColorResolver()
        self._style = label_style(label_type)

        self._text = config.title
        self._value_sub = chart_value.subscribe(self._on_chart_value_change)
        self._config_sub = config.subscribe(self._on_config_change)
        self._closed = False

    # -- Read-only state ----------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @property
    def label_type(self) -> AnyLabelType:
        return self._label_type

    @property
    def value_format(self) -> str:
        return self._value_format

    @property
    def style(self) -> LabelStyle:
        return self._style

    @property
    def text(self) -> str:
        return self._text

    # -- Notification handlers ---------------------------------------------

    def _on_chart_value_change(self, _source: Observable) -> None:
        value = self._chart_value
        config = self._config
        if not value.interaction_in_progress:
            self._set_text(config.title)
        elif value.current_text and config.show_legend:
            self._set_text(self._formatted_value() + config.delimiter + value.current_text)
        else:
            self._set_text(self._formatted_value())

    def _on_config_change(self, _source: Observable) -> None:
        # No delimiter and no legend toggle on this path.
        value = self._chart_value
        if value.interaction_in_progress:
            self._set_text(self._formatted_value() + value.current_text)
        else:
            self._set_text(self._config.title)

    def _formatted_value(self) -> str:
        return self._value_format % self._chart_value.current_value

    def _set_text(self, text: str) -> None:
        if text != self._text:
            logger.debug("Label text: {old!r} -> {new!r}", old=self._text, new=text)
        self._text = text

    # -- Rendering ----------------------------------------------------------

    def render(self) -> RenderedLabel:
        """Snapshot the label for drawing."""
        return RenderedLabel(
            text=self._text,
            size=self._style.size,
            padding=self._style.padding,
            color=resolve_color(self._style.color, self._color_resolver),
            bold=True,
            fills_width=not self._chart_value.interaction_in_progress,
        )

    # -- Lifecycle ----------------------------------------------------------

    def close(self) -> None:
        """Stop following the chart. Safe to call more than once."""
        if self._closed:
            return
        self._chart_value.unsubscribe(self._value_sub)
        self._config.unsubscribe(self._config_sub)
        self._closed = True

    def __enter__(self) -> ChartLabel:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ChartLabel(text={self._text!r}, label_type={self._label_type!r})"
