"""Interaction state of a chart, published to labels."""

from __future__ import annotations

from chart_label.observable import Observable


class ChartValue(Observable):
    """The data point the user is currently touching, if any.

    Owned by the chart's interaction tracking. Labels only read it.
    ``current_value`` and ``current_text`` are meaningful for display only
    while ``interaction_in_progress`` is True.
    """

    def __init__(
        self,
        current_value: float = 0.0,
        current_text: str = "",
        interaction_in_progress: bool = False,
    ) -> None:
        super().__init__()
        self._current_value = float(current_value)
        self._current_text = current_text
        self._interaction_in_progress = interaction_in_progress

    @property
    def current_value(self) -> float:
        return self._current_value

    @property
    def current_text(self) -> str:
        return self._current_text

    @property
    def interaction_in_progress(self) -> bool:
        return self._interaction_in_progress

    def set_value(self, value: float, text: str = "") -> None:
        """Select a data point value and its legend text."""
        self._current_value = float(value)
        self._current_text = text
        self.notify()

    def set_interaction(self, in_progress: bool) -> None:
        self._interaction_in_progress = in_progress
        self.notify()

    def update(self, value: float, text: str, interaction_in_progress: bool) -> None:
        """Apply a full snapshot with a single notification."""
        self._current_value = float(value)
        self._current_text = text
        self._interaction_in_progress = interaction_in_progress
        self.notify()

    def reset(self) -> None:
        """End the interaction and clear the selected point."""
        self.update(0.0, "", False)

    def __repr__(self) -> str:
        return (
            f"ChartValue(current_value={self._current_value!r}, "
            f"current_text={self._current_text!r}, "
            f"interaction_in_progress={self._interaction_in_progress!r})"
        )
