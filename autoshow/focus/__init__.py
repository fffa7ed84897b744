"""Focus tracking subsystem - per-application focus state and AT-SPI event routing.

Components:
- FocusRegistry: Last known focus target per application
- GeometryProber: Decides whether a focused element is eligible for the helper
- FocusSession: Owns the registry, the active application and the controller
- EventDispatcher: Routes AT-SPI and X events to the session
"""

from autoshow.focus.FocusSession import FocusSession

__all__ = ['FocusSession']
