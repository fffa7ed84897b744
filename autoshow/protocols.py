"""Protocol definitions for the collaborators of the visibility controller.

This module defines structural interfaces using Python's Protocol for duck typing.
"""

from typing import Optional, Protocol, Tuple


class HelperCommands(Protocol):
    """Command interface of the external input helper.

    Both calls block until the helper command returns. Their outcome is not
    reported back: the controller treats them as fire-and-forget.
    """

    def show(self) -> None:
        """Ask the helper to show its window."""
        ...

    def hide(self) -> None:
        """Ask the helper to hide its window."""
        ...


class PointerSource(Protocol):
    """Source of the current pointer position."""

    def position(self) -> Optional[Tuple[int, int]]:
        """Return the pointer position in screen coordinates.

        Returns:
            (x, y) tuple, or None when the position cannot be determined
        """
        ...
