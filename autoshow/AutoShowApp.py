"""Orchestrates the AT-SPI bus, the X display and the focus session.

AutoShowApp owns ApplicationState, the AccessibilityBus, the
DisplayConnection, the FocusSession and the EventDispatcher. It checks
every startup precondition before subscribing to events and releases
subscriptions and the display on every exit path.
"""

import logging
import signal
from typing import Any, Callable, Dict, List, Optional

from autoshow.ApplicationState import ApplicationState, RunState
from autoshow.atspi.AccessibilityBus import AccessibilityBus
from autoshow.controllers.VisibilityController import VisibilityController
from autoshow.errors import HelperWindowNotFoundError
from autoshow.focus.EventDispatcher import EventDispatcher
from autoshow.focus.FocusRegistry import FocusRegistry
from autoshow.focus.FocusSession import FocusSession
from autoshow.focus.GeometryProber import GeometryProber
from autoshow.helper.HelperProcess import HelperProcess
from autoshow.helper.PointerSampler import PointerSampler
from autoshow.protocols import HelperCommands, PointerSource
from autoshow.settings import DEFAULT_CONFIG
from autoshow.x11.DisplayConnection import DisplayConnection
from autoshow.x11.WindowLocator import WindowLocator

logger = logging.getLogger(__name__)

_TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class AutoShowApp:
    """Runs focus tracking for one helper until a termination signal arrives.

    Collaborators that talk to the desktop are created lazily in start() and
    can be replaced for testing.

    Args:
        config: Configuration dict with helper/window_search/events/display sections.
        verbose: Enable verbose logging in the controller and helper.
        bus_factory: Returns a connected AccessibilityBus.
        display_factory: Opens a DisplayConnection for a display name.
        helper: Show/hide command interface; built from config when None.
        pointer: Pointer position source; pynput-backed when None.
        glib: Module providing io_add_watch/unix_signal_add/source_remove
            (gi.repository.GLib when None).
    """

    def __init__(
        self,
        config: Optional[Dict] = None,
        verbose: bool = False,
        bus_factory: Callable[[], AccessibilityBus] = AccessibilityBus.connect,
        display_factory: Callable[[Optional[str]], DisplayConnection] = DisplayConnection.open,
        helper: Optional[HelperCommands] = None,
        pointer: Optional[PointerSource] = None,
        glib: Any = None,
    ) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._verbose = verbose
        self._bus_factory = bus_factory
        self._display_factory = display_factory
        self._helper = helper
        self._pointer = pointer
        self._glib = glib

        self._bus: Optional[AccessibilityBus] = None
        self._display: Optional[DisplayConnection] = None
        self._source_ids: List[int] = []

        self.helper_window: Any = None
        self.session: Optional[FocusSession] = None
        self.dispatcher: Optional[EventDispatcher] = None

        self.app_state = ApplicationState()
        self.app_state.on_change(self._on_state_change)

    def start(self) -> None:
        """Check startup preconditions and wire the focus subsystem.

        Algorithm:
            1. Connect to the accessibility bus.
            2. Open the X display.
            3. Locate the helper window below the root window.
            4. Build session and dispatcher; install X watch and signal handlers.
            5. Mark the run as tracking.

        Raises:
            StartupError: If any precondition is missing. The display is
                closed and the run stopped before raising.
        """
        helper_config = self._config["helper"]
        events_config = self._config["events"]

        try:
            self._bus = self._bus_factory()
            self._display = self._display_factory(self._config["display"]["name"])

            locator = WindowLocator(helper_config["window_class"])
            max_depth = int(self._config["window_search"]["max_depth"])
            self.helper_window = locator.locate(self._display.root, max_depth)
            if self.helper_window is None:
                raise HelperWindowNotFoundError(
                    f"Helper window '{locator.class_name}' not found "
                    f"within depth {max_depth}"
                )
            logger.info("AutoShowApp: helper window found: %s", self.helper_window)

            self.session = self._build_session()
            self.dispatcher = EventDispatcher(
                session=self.session,
                display=self._display,
                focus_event=events_config["focus"],
                activate_event=events_config["activate"],
                bus_errors=self._bus.bus_errors,
            )
            self._install_sources()
        except Exception as e:
            self._release()
            self.app_state.stop(f"startup failed: {e}")
            raise

        self.app_state.begin_tracking()
        logger.info("AutoShowApp: tracking focus")

    def run(self) -> int:
        """Start, then process events until stopped.

        Returns:
            Process exit code (0 on normal termination).
        """
        self.start()
        try:
            with self._bus.subscriptions(self.dispatcher.listeners):
                self._bus.run()
        finally:
            self.stop("main loop exited")
            self._release()
        return 0

    def stop(self, reason: str = "requested") -> None:
        """Stop the main loop; idempotent."""
        if self.app_state.stop(reason):
            logger.info("AutoShowApp: stopped (%s)", reason)

    def _build_session(self) -> FocusSession:
        helper_config = self._config["helper"]
        if self._helper is None:
            self._helper = HelperProcess(
                command=helper_config["command"],
                show_args=helper_config["show_args"],
                hide_args=helper_config["hide_args"],
                verbose=self._verbose,
            )
        if self._pointer is None:
            self._pointer = PointerSampler()

        prober = GeometryProber(
            document_frame_role=self._bus.document_frame_role,
            coord_type=self._bus.desktop_coords,
            bus_errors=self._bus.bus_errors,
        )
        controller = VisibilityController(
            registry=FocusRegistry(),
            helper=self._helper,
            pointer=self._pointer,
            verbose=self._verbose,
        )
        return FocusSession(prober, controller)

    def _install_sources(self) -> None:
        glib = self._get_glib()
        self._source_ids.append(
            glib.io_add_watch(
                self._display.fileno(),
                glib.PRIORITY_DEFAULT,
                glib.IO_IN,
                self.dispatcher.on_display_readable,
            )
        )
        for signum in _TERMINATION_SIGNALS:
            self._source_ids.append(
                glib.unix_signal_add(glib.PRIORITY_HIGH, signum, self._on_signal, signum)
            )

    def _on_signal(self, signum: int) -> bool:
        logger.info("AutoShowApp: received signal %s", signum)
        self.stop(f"signal {signum}")
        # Source stays installed; _release() removes it
        return True

    def _on_state_change(self, old_state: RunState, new_state: RunState) -> None:
        if new_state is RunState.STOPPED and self._bus is not None:
            self._bus.stop()

    def _release(self) -> None:
        if self._source_ids:
            glib = self._get_glib()
            while self._source_ids:
                glib.source_remove(self._source_ids.pop())

        if self._display is not None:
            self._display.close()

    def _get_glib(self) -> Any:
        if self._glib is None:
            from gi.repository import GLib
            self._glib = GLib
        return self._glib
