"""Exception hierarchy for chart_label."""

from typing import Any


class ChartLabelError(Exception):
    """Base exception for all chart_label errors."""

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}

    def __repr__(self) -> str:
        if self.detail:
            return f"{type(self).__name__}({self!s}, detail={self.detail})"
        return f"{type(self).__name__}({self!s})"


class ConfigError(ChartLabelError):
    """Invalid or missing label configuration."""
