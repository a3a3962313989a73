"""Replaying draw commands onto a real QPainter."""
import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QImage, QPainter, QTransform

from core.Enums import Orientation
from editor.circuit.compitem import ComponentState
from editor.circuit.render import paint
from editor.styles import Color


def draw(comp, dx, dy, size=96):
    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    paint(painter, comp.render(QTransform.fromTranslate(dx, dy)))
    painter.end()
    return image


class TestPaint:

    def test_pin_marker_lands_on_pin(self, qapp, types):
        comp = ComponentState.new(QPoint(0, 0), types["NOT"])
        image = draw(comp, 20, 8)

        # input pin sits at (12, 48) inside the footprint
        assert image.pixelColor(20 + 12, 8 + 48) == Color.pin

    def test_icon_is_drawn(self, qapp, types):
        comp = ComponentState.new(QPoint(0, 0), types["AND"])
        image = draw(comp, 10, 10)

        assert image.pixelColor(10 + 24, 10 + 30).alpha() > 0

    def test_rotated_pin_marker(self, qapp, types):
        comp = ComponentState.new(QPoint(0, 0), types["NOT"], Orientation.EAST)
        image = draw(comp, 20, 20)

        # facing east the input pin ends up on the left edge, level with the anchor
        assert image.pixelColor(20 + 0, 20 + 12) == Color.pin

    def test_selection_outline(self, qapp, types):
        comp = ComponentState.new(QPoint(0, 0), types["NOT"])

        def leftEdge(image):
            # outline runs 4 units left of the footprint
            return [image.pixelColor(x, 20 + 24).alpha() for x in range(20 - 6, 20 - 2)]

        assert not any(leftEdge(draw(comp, 20, 20)))

        comp.selected = True
        assert any(leftEdge(draw(comp, 20, 20)))
