"""Chart-wide label configuration that can change after the chart is built."""

from __future__ import annotations

from chart_label.observable import Observable


class LabelConfig(Observable):
    """Title, legend delimiter and legend toggle shared by a chart's labels.

    Every setter publishes a change notification, even when the new value
    equals the old one.

    Args:
        title: Text shown while no data point is selected.
        delimiter: Text placed between a data point's value and its legend.
        show_legend: If False, a data point's legend is never appended, even
            when the chart data carries one.
    """

    def __init__(self, title: str = "", delimiter: str = " ", show_legend: bool = False) -> None:
        super().__init__()
        self._title = title
        self._delimiter = delimiter
        self._show_legend = show_legend

    @property
    def title(self) -> str:
        return self._title

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def show_legend(self) -> bool:
        return self._show_legend

    def set_title(self, title: str) -> None:
        self._title = title
        self.notify()

    def set_legend_display(self, show: bool) -> None:
        self._show_legend = show
        self.notify()

    def set_legend_delimiter(self, delimiter: str) -> None:
        self._delimiter = delimiter
        self.notify()

    def __repr__(self) -> str:
        return (
            f"LabelConfig(title={self._title!r}, delimiter={self._delimiter!r}, "
            f"show_legend={self._show_legend!r})"
        )
