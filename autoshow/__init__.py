# autoshow/__init__.py
from .types import FocusMarker, HelperVisibility, Rect
from .focus.FocusRegistry import FocusRegistry
from .focus.FocusSession import FocusSession
from .focus.GeometryProber import GeometryProber
from .focus.EventDispatcher import EventDispatcher
from .controllers.VisibilityController import VisibilityController
from .x11.WindowLocator import WindowLocator
from .AutoShowApp import AutoShowApp

__all__ = [
    'FocusMarker',
    'HelperVisibility',
    'Rect',
    'FocusRegistry',
    'FocusSession',
    'GeometryProber',
    'EventDispatcher',
    'VisibilityController',
    'WindowLocator',
    'AutoShowApp'
]
