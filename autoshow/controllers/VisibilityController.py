"""
VisibilityController - decides whether the input helper should be visible.

The controller reads the focus registry for the active application and
issues show/hide commands to the external helper. It owns the helper
visibility flag and is the only component that changes it.

Decision table:
- UNKNOWN: nothing happens
- NO_TARGET: hide (issued even when already hidden)
- Rect: show; when already shown, hide first so the helper refreshes
  at the current pointer location
"""
import logging

from autoshow.focus.FocusRegistry import FocusRegistry
from autoshow.protocols import HelperCommands, PointerSource
from autoshow.types import FocusMarker, HelperVisibility


class VisibilityController:
    """
    Two-state machine (HIDDEN, SHOWN) driving the external helper.

    Attributes:
        registry: FocusRegistry consulted on every reconcile
        helper: Show/hide command interface of the helper
        pointer: Pointer position source sampled before every show
    """

    def __init__(
        self,
        registry: FocusRegistry,
        helper: HelperCommands,
        pointer: PointerSource,
        verbose: bool = False
    ) -> None:
        self.registry = registry
        self.helper = helper
        self.pointer = pointer
        self._verbose = verbose
        self._state = HelperVisibility.HIDDEN

    @property
    def state(self) -> HelperVisibility:
        return self._state

    @property
    def is_shown(self) -> bool:
        return self._state is HelperVisibility.SHOWN

    def reconcile(self, active_app: int) -> None:
        """
        Bring helper visibility in line with the focus target of active_app.

        Args:
            active_app: Identifier of the application considered frontmost
        """
        target = self.registry.lookup(active_app)

        if target is FocusMarker.UNKNOWN:
            if self._verbose:
                logging.info(f"VisibilityController: no focus known for app={active_app}")
            return

        if target is FocusMarker.NO_TARGET:
            self._hide()
            return

        self._show()

    def _hide(self) -> None:
        self.helper.hide()
        self._state = HelperVisibility.HIDDEN

        if self._verbose:
            logging.info("VisibilityController: helper hidden")

    def _show(self) -> None:
        position = self.pointer.position()
        if position is None:
            # Retried on the next focus or activation event
            logging.debug("VisibilityController: pointer unavailable, show skipped")
            return

        if self._state is HelperVisibility.SHOWN:
            self._hide()

        self.helper.show()
        self._state = HelperVisibility.SHOWN

        if self._verbose:
            logging.info(f"VisibilityController: helper shown, pointer at {position}")
