"""Type definitions for focus tracking and helper visibility."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class FocusMarker(Enum):
    """Non-geometric focus states recorded per application.

    UNKNOWN: no focus event has been seen for the application yet.
    NO_TARGET: the focused element is not eligible for the helper
        (not editable text, or a document frame root).
    """
    UNKNOWN = auto()
    NO_TARGET = auto()


class HelperVisibility(Enum):
    """Visibility of the external helper as last commanded.

    State Transitions:
    HIDDEN -> SHOWN: eligible target focused and pointer available
    SHOWN -> SHOWN: eligible target focused again (hide, then show)
    any -> HIDDEN: ineligible target focused
    """
    HIDDEN = auto()
    SHOWN = auto()


@dataclass(frozen=True)
class Rect:
    """Screen-space bounding box of an eligible focused element.

    Attributes:
        x: Left edge in desktop coordinates
        y: Top edge in desktop coordinates
        width: Width in pixels
        height: Height in pixels
    """
    x: int
    y: int
    width: int
    height: int


# Registry value: a Rect for eligible elements, otherwise a FocusMarker
FocusTarget = Union[Rect, FocusMarker]
