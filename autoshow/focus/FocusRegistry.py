from typing import Dict

from autoshow.types import FocusMarker, FocusTarget


class FocusRegistry:
    """Last known focus target per application identifier.

    Entries are overwritten on every focus change (last write wins) and never
    evicted; the number of entries is bounded by the number of applications
    that ever reported focus during the process lifetime.
    """

    def __init__(self) -> None:
        self._targets: Dict[int, FocusTarget] = {}

    def update(self, app_id: int, target: FocusTarget) -> None:
        """Record the focus target for an application, replacing any previous one.

        Args:
            app_id: Application identifier assigned by the accessibility bus
            target: Rect for an eligible element, FocusMarker.NO_TARGET otherwise
        """
        self._targets[app_id] = target

    def lookup(self, app_id: int) -> FocusTarget:
        """Return the last focus target of an application.

        Returns:
            The recorded target, or FocusMarker.UNKNOWN if the application
            has never reported focus
        """
        return self._targets.get(app_id, FocusMarker.UNKNOWN)

    def __contains__(self, app_id: object) -> bool:
        return app_id in self._targets

    def __len__(self) -> int:
        return len(self._targets)
