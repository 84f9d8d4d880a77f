"""pytest configuration and fixtures for pyqt-serialdict tests."""

import os

import pytest

from sample_types import Character, Element

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_globals():
    """Restore global config and host between tests."""
    from pyqt_serialdict.protocols import set_drawer_config, register_inspector_host
    yield
    set_drawer_config(None)
    register_inspector_host(None)


@pytest.fixture
def character():
    from pyqt_serialdict import SerializedDictionary

    hero = Character()
    hero.resistances = SerializedDictionary[Element, float]({Element.FIRE: 0.5})
    hero.inventory = SerializedDictionary(key_type=str, value_type=int)
    return hero


class RecordingHost:
    """Inspector host that records views and reports scripted changes."""

    def __init__(self):
        self.views = []
        self.changed = False
        self.undo = False
        self.created = []

    def draw(self, view):
        self.views.append(view)
        changed, self.changed = self.changed, False
        return changed

    def is_undo_or_redo(self):
        undo, self.undo = self.undo, False
        return undo

    def create_default(self, element_type):
        self.created.append(element_type)
        return element_type()


@pytest.fixture
def host():
    return RecordingHost()
