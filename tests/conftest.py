"""
Shared fixtures for the gate editor tests.

Qt runs on the offscreen platform so the suite works without a display.
"""
import os
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QPoint

from core.Enums import Orientation
from editor.circuit.catalog import ComponentCatalog
from editor.circuit.canvas import CircuitScene


@pytest.fixture
def catalog(qapp):
    """The shared, fully loaded gate templates."""
    return ComponentCatalog.enumerate()


@pytest.fixture
def types(catalog):
    """Templates keyed by tag."""
    return {t.tag: t for t in catalog}


@pytest.fixture
def scene():
    return CircuitScene()


@pytest.fixture
def not_gate(scene, types):
    """A NOT gate at grid (0, 0), facing north."""
    return scene.addComp(QPoint(0, 0), types["NOT"], Orientation.NORTH)
