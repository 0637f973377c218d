"""Color resolution for semantic text roles.

The label core only knows ``ColorRole``; hosts supply a resolver that turns
a role into a concrete color string. ``ThemeColorResolver`` ships palettes
modelled on the platform label colors so labels render without a host.
"""

from __future__ import annotations

from typing import Protocol

from chart_label.exceptions import ConfigError
from chart_label.styling import ColorRole

# -- Palettes (rgba strings, accepted by Plotly) ----------------------------

LIGHT_PALETTE = {
    ColorRole.PRIMARY_TEXT: "rgba(0, 0, 0, 1.0)",
    ColorRole.SECONDARY_TEXT: "rgba(60, 60, 67, 0.6)",
}

DARK_PALETTE = {
    ColorRole.PRIMARY_TEXT: "rgba(255, 255, 255, 1.0)",
    ColorRole.SECONDARY_TEXT: "rgba(235, 235, 245, 0.6)",
}

PALETTES = {
    "light": LIGHT_PALETTE,
    "dark": DARK_PALETTE,
}


class ColorResolver(Protocol):
    def __call__(self, role: ColorRole) -> str: ...


class ThemeColorResolver:
    """Resolve roles against the light or dark palette."""

    def __init__(self, appearance: str = "light") -> None:
        if appearance not in PALETTES:
            raise ConfigError(
                f"Unknown appearance: {appearance!r}",
                detail={"allowed": sorted(PALETTES)},
            )
        self.appearance = appearance
        self._palette = PALETTES[appearance]

    def __call__(self, role: ColorRole) -> str:
        return self._palette[ColorRole(role)]


def resolve_color(color: ColorRole | str, resolver: ColorResolver) -> str:
    """Resolve a role through *resolver*; literal color strings pass through."""
    if isinstance(color, ColorRole):
        return resolver(color)
    return color
