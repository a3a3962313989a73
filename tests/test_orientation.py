"""Orientation values, angles and key mapping."""
import math
import pytest

from core.Enums import Orientation


class TestOrientation:

    @pytest.mark.parametrize("orientation,angle", [
        (Orientation.NORTH, 0.0),
        (Orientation.EAST, math.pi / 2),
        (Orientation.SOUTH, math.pi),
        (Orientation.WEST, 3 * math.pi / 2),
    ])
    def test_angle_is_clockwise_radians(self, orientation, angle):
        assert orientation.angle() == pytest.approx(angle)
        assert math.radians(orientation.degrees()) == pytest.approx(angle)

    def test_vertical_orientations(self):
        assert Orientation.NORTH.isVertical()
        assert Orientation.SOUTH.isVertical()
        assert not Orientation.EAST.isVertical()
        assert not Orientation.WEST.isVertical()

    def test_values_wrap_around(self):
        assert Orientation(4) is Orientation.NORTH
        assert Orientation(Orientation.WEST + 1) is Orientation.NORTH

    @pytest.mark.parametrize("text,expected", [
        ("w", Orientation.NORTH),
        ("a", Orientation.WEST),
        ("s", Orientation.SOUTH),
        ("d", Orientation.EAST),
    ])
    def test_from_key(self, text, expected):
        assert Orientation.fromKey(text) is expected

    @pytest.mark.parametrize("text", ["W", "q", "", " ", "wd"])
    def test_from_key_ignores_other_text(self, text):
        assert Orientation.fromKey(text) is None
