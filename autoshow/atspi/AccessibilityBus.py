"""
AccessibilityBus - scoped access to the AT-SPI event registry.

Listeners registered through the bus are remembered and deregistered
together when the subscriptions() context exits, whatever the exit path.
The accessibility bus must not keep references to listeners of a process
that is shutting down.
"""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Mapping, Tuple, Type

from autoshow.errors import AccessibilityUnavailableError

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class AccessibilityBus:
    """
    Wrapper around pyatspi.Registry.

    Besides the registry, the bus carries the AT-SPI values the focus
    subsystem needs, so that code can run against injected stand-ins.

    Attributes:
        registry: pyatspi.Registry or an object with the same interface
        document_frame_role: pyatspi.ROLE_DOCUMENT_FRAME
        desktop_coords: pyatspi.DESKTOP_COORDS
        bus_errors: Exception types raised for objects gone from the bus
    """

    def __init__(
        self,
        registry: Any,
        document_frame_role: Any = None,
        desktop_coords: Any = None,
        bus_errors: Tuple[Type[BaseException], ...] = ()
    ) -> None:
        self.registry = registry
        self.document_frame_role = document_frame_role
        self.desktop_coords = desktop_coords
        self.bus_errors = bus_errors
        self._registered: List[Tuple[Listener, str]] = []
        self._running = False

    @classmethod
    def connect(cls) -> 'AccessibilityBus':
        """Import pyatspi and check that the desktop is reachable.

        Raises:
            AccessibilityUnavailableError: If pyatspi cannot be loaded or the
                accessibility bus does not answer
        """
        try:
            import pyatspi
            from gi.repository import GLib
        except (ImportError, ValueError) as e:
            raise AccessibilityUnavailableError(f"AT-SPI not available: {e}") from e

        try:
            pyatspi.Registry.getDesktop(0)
        except GLib.GError as e:
            raise AccessibilityUnavailableError(f"AT-SPI not available: {e}") from e

        return cls(
            pyatspi.Registry,
            document_frame_role=pyatspi.ROLE_DOCUMENT_FRAME,
            desktop_coords=pyatspi.DESKTOP_COORDS,
            bus_errors=(GLib.GError,)
        )

    @property
    def registered(self) -> List[Tuple[Listener, str]]:
        return list(self._registered)

    @property
    def is_running(self) -> bool:
        return self._running

    def register(self, listener: Listener, event_type: str) -> None:
        self.registry.registerEventListener(listener, event_type)
        self._registered.append((listener, event_type))
        logger.debug("AccessibilityBus: registered listener for %s", event_type)

    def deregister_all(self) -> None:
        """Deregister every listener registered through this bus, newest first."""
        while self._registered:
            listener, event_type = self._registered.pop()
            try:
                self.registry.deregisterEventListener(listener, event_type)
            except Exception as e:
                logger.warning("AccessibilityBus: failed to deregister %s: %s", event_type, e)
            else:
                logger.debug("AccessibilityBus: deregistered listener for %s", event_type)

    @contextmanager
    def subscriptions(self, listeners: Mapping[str, Listener]) -> Iterator['AccessibilityBus']:
        """Register listeners for the duration of the with block.

        Args:
            listeners: Listener callable per event class
        """
        try:
            for event_type, listener in listeners.items():
                self.register(listener, event_type)
            yield self
        finally:
            self.deregister_all()

    def run(self) -> None:
        """Run the GLib main loop until stop() is called."""
        self._running = True
        try:
            self.registry.start()
        finally:
            self._running = False

    def stop(self) -> None:
        if not self._running:
            return
        self.registry.stop()
