"""Tests for the rectangle factory."""

from object_tasks.shapes import Rectangle, make_rectangle


class TestMakeRectangle:
    def test_dimensions(self):
        r = make_rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert make_rectangle(10, 20).get_area() == 200

    def test_returns_rectangle(self):
        assert isinstance(make_rectangle(1, 2), Rectangle)

    def test_area_is_computed_at_call_time(self):
        r = make_rectangle(10, 20)
        r.width = 5
        assert r.get_area() == 100
        r.height = 2.5
        assert r.get_area() == 12.5

    def test_zero_area(self):
        assert make_rectangle(0, 7).get_area() == 0

    def test_equality(self):
        assert make_rectangle(3, 4) == Rectangle(3, 4)
        assert make_rectangle(3, 4) != Rectangle(4, 3)
