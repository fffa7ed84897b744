import logging
from typing import Any, Optional

from Xlib import display as xlib_display
from Xlib.error import DisplayError

from autoshow.errors import DisplayUnavailableError

logger = logging.getLogger(__name__)


class DisplayConnection:
    """Owns the X display connection used for window lookup.

    The connection receives no events of interest; its queue is drained
    whenever the socket becomes readable so it stays responsive.
    """

    def __init__(self, display: Any) -> None:
        self._display = display
        self._closed = False

    @classmethod
    def open(cls, name: Optional[str] = None) -> 'DisplayConnection':
        """Connect to the X display.

        Args:
            name: Display name such as ":0"; None uses $DISPLAY

        Raises:
            DisplayUnavailableError: If the connection cannot be opened
        """
        try:
            display = xlib_display.Display(name)
        except DisplayError as e:
            raise DisplayUnavailableError(f"Can't connect to display: {e}") from e

        logger.info("DisplayConnection: connected to %s", display.get_display_name())
        return cls(display)

    @property
    def root(self) -> Any:
        """Root window of the default screen."""
        return self._display.screen().root

    def fileno(self) -> int:
        return self._display.fileno()

    def drain(self) -> int:
        """Discard every pending X event.

        Returns:
            Number of events discarded
        """
        count = 0
        while self._display.pending_events():
            self._display.next_event()
            count += 1
        return count

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._display.close()

    def __enter__(self) -> 'DisplayConnection':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
