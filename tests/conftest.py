"""pytest configuration and fixtures for pyqt-celledit tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication, QHBoxLayout, QWidget

from pyqt_celledit.core import reset_edit_lock
from pyqt_celledit.protocols import set_editor_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def container(qapp):
    """Cell-sized widget with a layout, standing in for a grid cell."""
    widget = QWidget()
    QHBoxLayout(widget)
    widget.resize(120, 24)
    yield widget
    widget.deleteLater()


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default editor config and a fresh global lock."""
    set_editor_config(None)
    reset_edit_lock()
    yield
    set_editor_config(None)
    reset_edit_lock()
