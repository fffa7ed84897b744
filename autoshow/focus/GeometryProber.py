import logging
from typing import Any, Optional, Tuple, Type

from autoshow.types import FocusMarker, FocusTarget, Rect

logger = logging.getLogger(__name__)


class GeometryProber:
    """Decides whether a focused accessible element is eligible for the helper.

    An element is eligible when it implements the EditableText interface, is
    not a document frame, and exposes screen extents through the Component
    interface. Missing interfaces are reported as FocusMarker.NO_TARGET, never
    as exceptions.

    The AT-SPI constants are injected so this class can be exercised without
    an accessibility bus.

    Args:
        document_frame_role: Role value marking whole-document containers
            (pyatspi.ROLE_DOCUMENT_FRAME)
        coord_type: Coordinate system for extents (pyatspi.DESKTOP_COORDS)
        bus_errors: Exception types raised when an element vanished from the
            bus while being queried (GLib.GError)
    """

    def __init__(
        self,
        document_frame_role: Any,
        coord_type: Any,
        bus_errors: Tuple[Type[BaseException], ...] = ()
    ) -> None:
        self._document_frame_role = document_frame_role
        self._coord_type = coord_type
        self._bus_errors = bus_errors

    def probe(self, element: Any) -> FocusTarget:
        """Return the screen rectangle of an eligible element, or NO_TARGET.

        Args:
            element: pyatspi Accessible that received focus

        Returns:
            Rect with the element's desktop extents, or FocusMarker.NO_TARGET
        """
        try:
            if not self._is_editable_text(element):
                return FocusMarker.NO_TARGET
            if element.getRole() == self._document_frame_role:
                return FocusMarker.NO_TARGET
            rect = self._screen_extents(element)
        except self._bus_errors as e:
            logger.debug("GeometryProber: element vanished while probing: %s", e)
            return FocusMarker.NO_TARGET

        if rect is None:
            return FocusMarker.NO_TARGET
        return rect

    def _is_editable_text(self, element: Any) -> bool:
        try:
            element.queryEditableText()
        except NotImplementedError:
            return False
        return True

    def _screen_extents(self, element: Any) -> Optional[Rect]:
        try:
            component = element.queryComponent()
        except NotImplementedError:
            return None

        extents = component.getExtents(self._coord_type)
        return Rect(
            x=int(extents.x),
            y=int(extents.y),
            width=int(extents.width),
            height=int(extents.height)
        )
