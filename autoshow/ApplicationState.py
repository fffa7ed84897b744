"""Run state of one autoshow process.

starting: preconditions checked, session wired, nothing subscribed yet
tracking: listeners registered and the main loop dispatching events
stopped: the main loop was asked to quit; terminal

Signal handlers and AT-SPI callbacks all run on the GLib main loop thread,
so transitions need no locking.
"""
import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, List, Optional

logger = logging.getLogger(__name__)


class RunState(Enum):
    STARTING = "starting"
    TRACKING = "tracking"
    STOPPED = "stopped"


StateObserver = Callable[[RunState, RunState], None]


class ApplicationState:
    """Tracks whether autoshow is tracking focus and why it stopped.

    stop() may be reached from a signal handler, a startup failure and the
    main loop's own exit; only the first call stops, later ones report False.
    Observers run on every transition, e.g. to quit the main loop on stop.
    """

    _TRANSITIONS: Dict[RunState, FrozenSet[RunState]] = {
        RunState.STARTING: frozenset({RunState.TRACKING, RunState.STOPPED}),
        RunState.TRACKING: frozenset({RunState.STOPPED}),
        RunState.STOPPED: frozenset(),
    }

    def __init__(self) -> None:
        self._state = RunState.STARTING
        self._stop_reason: Optional[str] = None
        self._observers: List[StateObserver] = []

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_tracking(self) -> bool:
        return self._state is RunState.TRACKING

    @property
    def stop_reason(self) -> Optional[str]:
        """Why the run stopped; None while still starting or tracking."""
        return self._stop_reason

    def on_change(self, observer: StateObserver) -> None:
        self._observers.append(observer)

    def begin_tracking(self) -> None:
        """Mark startup as complete.

        Raises:
            ValueError: If the run already stopped or is tracking
        """
        self._move_to(RunState.TRACKING)

    def stop(self, reason: str) -> bool:
        """Stop the run, recording reason.

        Returns:
            True if this call stopped the run, False if it was already stopped
        """
        if self._state is RunState.STOPPED:
            return False
        self._stop_reason = reason
        self._move_to(RunState.STOPPED)
        return True

    def _move_to(self, new_state: RunState) -> None:
        old_state = self._state
        if new_state not in self._TRANSITIONS[old_state]:
            raise ValueError(f"Cannot go from {old_state.value} to {new_state.value}")

        self._state = new_state
        logger.debug("ApplicationState: %s -> %s", old_state.value, new_state.value)
        for observer in list(self._observers):
            observer(old_state, new_state)
