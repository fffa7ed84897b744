"""Routes accessibility and X events to the focus session.

The dispatcher owns a dispatch table mapping AT-SPI event classes to
handler methods. One listener callable is built per event class so the
same objects can later be deregistered from the bus.
"""

import logging
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple, Type

from autoshow.focus.FocusSession import FocusSession

logger = logging.getLogger(__name__)

DEFAULT_FOCUS_EVENT = "focus:"
DEFAULT_ACTIVATE_EVENT = "window:activate"

_STATE_CHANGED_PREFIX = "object:state-changed"

Handler = Callable[[Any, int], None]


class EventDispatcher:
    """Dispatches focus-changed, window-activated and X readiness events.

    Accessibility events are only handled after their source application
    identifier has been resolved; events that are not application-scoped
    are dropped.

    Args:
        session: FocusSession receiving the routed events
        display: DisplayConnection drained whenever its socket is readable
        focus_event: AT-SPI event class reporting focus changes
        activate_event: AT-SPI event class reporting window activation
        bus_errors: Exception types raised when an accessible object is
            no longer reachable on the bus (GLib.GError)
    """

    def __init__(
        self,
        session: FocusSession,
        display: Any,
        focus_event: str = DEFAULT_FOCUS_EVENT,
        activate_event: str = DEFAULT_ACTIVATE_EVENT,
        bus_errors: Tuple[Type[BaseException], ...] = ()
    ) -> None:
        if focus_event == activate_event:
            raise ValueError(f"Focus and activate event classes must differ: {focus_event}")

        self._session = session
        self._display = display
        self._bus_errors = bus_errors

        self._handlers: Dict[str, Handler] = {
            focus_event: self._on_focus,
            activate_event: self._on_activate,
        }
        self._listeners: Dict[str, Callable[[Any], None]] = {
            event_class: partial(self.dispatch, event_class)
            for event_class in self._handlers
        }

    @property
    def listeners(self) -> Dict[str, Callable[[Any], None]]:
        """Listener callable per event class, ready for bus registration."""
        return dict(self._listeners)

    def dispatch(self, event_class: str, event: Any) -> None:
        """Route one accessibility event to the handler of its event class.

        Args:
            event_class: Event class the listener was registered for
            event: pyatspi event with source, type and detail fields
        """
        handler = self._handlers.get(event_class)
        if handler is None:
            logger.debug("EventDispatcher: no handler for %s", event_class)
            return

        app_id = self.resolve_application_id(event)
        if app_id is None:
            logger.debug("EventDispatcher: dropped %s without source application", event_class)
            return

        handler(event, app_id)

    def resolve_application_id(self, event: Any) -> Optional[int]:
        """Return the identifier of the application that emitted event.

        Returns:
            Application identifier, or None if the event has no source or the
            source application cannot be reached
        """
        source = getattr(event, "source", None)
        if source is None:
            return None

        try:
            application = source.getApplication()
            if application is None:
                return None
            return int(application.id)
        except self._bus_errors as e:
            logger.debug("EventDispatcher: application lookup failed: %s", e)
            return None

    def on_display_readable(self, source: Any = None, condition: Any = None) -> bool:
        """Drain pending X events; signature matches a GLib IO watch callback.

        Returns:
            True so the watch stays installed
        """
        self._display.drain()
        return True

    def _on_focus(self, event: Any, app_id: int) -> None:
        # object:state-changed:focused also reports focus loss
        if str(getattr(event, "type", "")).startswith(_STATE_CHANGED_PREFIX) and not event.detail1:
            return
        self._session.focus_changed(app_id, event.source)

    def _on_activate(self, event: Any, app_id: int) -> None:
        self._session.window_activated(app_id)
