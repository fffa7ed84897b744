import logging
from typing import Any, Optional, Tuple, Type

from Xlib.error import ConnectionClosedError, XError

# Raised by python-xlib when the pointer query fails or the display went away
POINTER_QUERY_ERRORS: Tuple[Type[BaseException], ...] = (XError, ConnectionClosedError, OSError)


class PointerSampler:
    """An abstraction over pynput's mouse Controller for dependency injection.

    Args:
        controller: Object with a ``position`` attribute; a pynput mouse
            Controller when None
        query_errors: Exception types that mean the pointer cannot be queried
            right now. Anything else propagates.

    Example:
        >>> sampler = PointerSampler()
        >>> sampler.position()
        (640, 480)
    """

    def __init__(
        self,
        controller: Any = None,
        query_errors: Tuple[Type[BaseException], ...] = POINTER_QUERY_ERRORS
    ) -> None:
        if controller is None:
            # pynput connects to the display on import
            from pynput.mouse import Controller
            from pynput._util.xorg import X11Error
            controller = Controller()
            query_errors = query_errors + (X11Error,)
        self._mouse = controller
        self._query_errors = query_errors

    def position(self) -> Optional[Tuple[int, int]]:
        """Return the pointer position, or None when it cannot be queried."""
        try:
            x, y = self._mouse.position
        except self._query_errors as e:
            logging.debug(f"PointerSampler: pointer query failed: {e}")
            return None

        if x is None or y is None:
            return None
        return int(x), int(y)
