"""Locates the helper's display window in the X window tree."""

import logging
from typing import Any, Optional

from Xlib.error import XError

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_CLASS = "cellwriter"


class WindowLocator:
    """Depth-bounded search for the helper window.

    A window matches when the instance part of its WM_CLASS equals the
    helper's class name and its WM_HINTS say it does not take keyboard input.
    The helper relies on the accessibility bus instead of input focus, which
    tells its display surface apart from input-accepting windows of the same
    application, such as a settings dialog.

    Args:
        class_name: WM_CLASS instance name of the helper
    """

    def __init__(self, class_name: str = DEFAULT_WINDOW_CLASS) -> None:
        self._class_name = class_name

    @property
    def class_name(self) -> str:
        return self._class_name

    def locate(self, root: Any, max_depth: int) -> Optional[Any]:
        """Search the tree under root in pre-order and return the first match.

        Invariant: a window at distance d from root is examined only when
        d <= max_depth, so locate(root, 0) examines root alone.

        Args:
            root: Xlib window the search starts from
            max_depth: How many levels below root may be searched

        Returns:
            The matching Xlib window, or None if none is found
        """
        if root is None:
            return None
        if self.is_helper_window(root):
            return root
        if max_depth <= 0:
            return None

        try:
            children = root.query_tree().children
        except XError as e:
            logger.debug("WindowLocator: query_tree failed for %s: %s", root, e)
            return None

        for child in children:
            found = self.locate(child, max_depth - 1)
            if found is not None:
                return found
        return None

    def is_helper_window(self, window: Any) -> bool:
        """Return True if window is the helper's non-input display window."""
        try:
            wm_class = window.get_wm_class()
            if not wm_class or wm_class[0] != self._class_name:
                return False

            hints = window.get_wm_hints()
        except XError as e:
            # Windows may be destroyed while the tree is walked
            logger.debug("WindowLocator: window %s vanished: %s", window, e)
            return False

        if hints is None:
            return False
        return not hints.input
