# tests/conftest.py
import pytest
from unittest.mock import Mock

from tests.atspi_fixtures import DESKTOP_COORDS, DOCUMENT_FRAME


@pytest.fixture
def helper():
    """Mock helper command interface; mock_calls records show/hide order."""
    return Mock(spec=["show", "hide"])


@pytest.fixture
def pointer():
    """Mock pointer source reporting a fixed position."""
    source = Mock(spec=["position"])
    source.position.return_value = (640, 480)
    return source


@pytest.fixture
def prober():
    from autoshow.focus.GeometryProber import GeometryProber
    return GeometryProber(document_frame_role=DOCUMENT_FRAME, coord_type=DESKTOP_COORDS)


@pytest.fixture
def registry():
    from autoshow.focus.FocusRegistry import FocusRegistry
    return FocusRegistry()


@pytest.fixture
def controller(registry, helper, pointer):
    from autoshow.controllers.VisibilityController import VisibilityController
    return VisibilityController(registry=registry, helper=helper, pointer=pointer)


@pytest.fixture
def session(prober, controller):
    from autoshow.focus.FocusSession import FocusSession
    return FocusSession(prober, controller)
