"""
FocusSession - per-process focus tracking state.

Holds the focus registry, the active application and the visibility
controller. All mutation goes through the session's methods, which the
EventDispatcher calls one event at a time from the main loop.
"""
import logging
from typing import Any, Optional

from autoshow.controllers.VisibilityController import VisibilityController
from autoshow.focus.FocusRegistry import FocusRegistry
from autoshow.focus.GeometryProber import GeometryProber
from autoshow.types import FocusTarget

logger = logging.getLogger(__name__)


class FocusSession:
    """Focus state of every application seen on the accessibility bus.

    Args:
        prober: GeometryProber classifying focused elements
        controller: VisibilityController reconciling helper visibility; its
            registry is the registry of this session
    """

    def __init__(self, prober: GeometryProber, controller: VisibilityController) -> None:
        self._prober = prober
        self._controller = controller
        self._active_app: Optional[int] = None

    @property
    def registry(self) -> FocusRegistry:
        return self._controller.registry

    @property
    def controller(self) -> VisibilityController:
        return self._controller

    @property
    def active_app(self) -> Optional[int]:
        """Application most recently focused or activated; None before the first event."""
        return self._active_app

    def focus_changed(self, app_id: int, element: Any) -> FocusTarget:
        """Record a focus change inside app_id and reconcile helper visibility.

        Focus implies the source application is frontmost, so it also
        becomes the active application.

        Args:
            app_id: Application that reported the focus change
            element: Accessible element that received focus

        Returns:
            The focus target recorded for app_id
        """
        target = self._prober.probe(element)
        self.registry.update(app_id, target)
        logger.debug("FocusSession: app=%s focus target=%s", app_id, target)

        self._active_app = app_id
        self._controller.reconcile(app_id)
        return target

    def window_activated(self, app_id: int) -> None:
        """Make app_id the active application and reconcile helper visibility."""
        self._active_app = app_id
        logger.debug("FocusSession: app=%s activated", app_id)
        self._controller.reconcile(app_id)
