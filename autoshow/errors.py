"""Fatal startup errors.

Each of these means a precondition the process cannot fix by itself is
missing; main.py reports them and exits with a nonzero status.
"""


class StartupError(RuntimeError):
    """Base class for errors that abort startup."""


class AccessibilityUnavailableError(StartupError):
    """The AT-SPI accessibility bus cannot be reached."""


class DisplayUnavailableError(StartupError):
    """The X display connection cannot be opened."""


class HelperWindowNotFoundError(StartupError):
    """The helper's window is not present in the window tree."""
