"""Label types and the font size, padding and color each one implies.

Single source of truth for preset label styling. A label's style is a pure
function of its type; custom types carry their own style.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorRole(str, Enum):
    """Semantic text colors resolved by the hosting environment."""

    PRIMARY_TEXT = "primary_text"
    SECONDARY_TEXT = "secondary_text"


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0


class LabelType(str, Enum):
    """Preset label kinds. Values match the YAML/CLI spelling."""

    TITLE = "title"
    SUB_TITLE = "subTitle"
    LARGE_TITLE = "largeTitle"
    LEGEND = "legend"


@dataclass(frozen=True)
class CustomLabelType:
    """A label kind with explicit styling.

    ``color`` is either a role resolved at render time or a literal color
    string passed through unchanged.
    """

    size: float
    padding: EdgeInsets
    color: ColorRole | str


AnyLabelType = LabelType | CustomLabelType


@dataclass(frozen=True)
class LabelStyle:
    """Font size, padding and color of a label."""

    size: float
    padding: EdgeInsets
    color: ColorRole | str


# -- Presets ----------------------------------------------------------------

PRESET_STYLES: dict[LabelType, LabelStyle] = {
    LabelType.TITLE: LabelStyle(
        size=32.0,
        padding=EdgeInsets(top=16.0, leading=8.0, bottom=0.0, trailing=8.0),
        color=ColorRole.PRIMARY_TEXT,
    ),
    LabelType.SUB_TITLE: LabelStyle(
        size=24.0,
        padding=EdgeInsets(top=8.0, leading=8.0, bottom=0.0, trailing=8.0),
        color=ColorRole.PRIMARY_TEXT,
    ),
    LabelType.LARGE_TITLE: LabelStyle(
        size=38.0,
        padding=EdgeInsets(top=24.0, leading=8.0, bottom=0.0, trailing=8.0),
        color=ColorRole.PRIMARY_TEXT,
    ),
    LabelType.LEGEND: LabelStyle(
        size=14.0,
        padding=EdgeInsets(top=4.0, leading=8.0, bottom=0.0, trailing=8.0),
        color=ColorRole.SECONDARY_TEXT,
    ),
}


def label_style(label_type: AnyLabelType) -> LabelStyle:
    """Return the style for a preset or custom label type."""
    if isinstance(label_type, CustomLabelType):
        return LabelStyle(size=label_type.size, padding=label_type.padding, color=label_type.color)
    return PRESET_STYLES[LabelType(label_type)]
