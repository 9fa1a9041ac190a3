"""Tests for circle, ellipse, line, polyline and Bezier rasterization."""

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import WHITE, Rgba
from geometrize.core.scanline import Scanline
from geometrize.shapes import Bounds, Circle, Ellipse, Line, Polyline, QuadraticBezier

BOUNDS = Bounds.of_size(50, 50)


class TestEllipse:
    def test_symmetric_about_center(self):
        lines = Ellipse(25, 25, 10, 5).rasterize(BOUNDS)
        by_row = {line.y: line for line in lines}
        assert sorted(by_row) == list(range(21, 30))
        for dy in range(1, 5):
            above, below = by_row[25 - dy], by_row[25 + dy]
            assert (above.x1, above.x2) == (below.x1, below.x2)
        assert by_row[25] == Scanline(25, 15, 35)

    def test_rows_sorted(self):
        lines = Ellipse(20, 20, 7, 12).rasterize(BOUNDS)
        assert [line.y for line in lines] == sorted(line.y for line in lines)

    def test_clipped_at_canvas_edge(self):
        lines = Ellipse(0, 0, 8, 8).rasterize(BOUNDS)
        assert all(line.x1 >= 0 and line.y >= 0 for line in lines)
        assert lines[0] == Scanline(0, 0, 8)

    def test_draws_inside_canvas(self):
        bitmap = Bitmap(50, 50, Rgba(0, 0, 0, 255))
        bitmap.draw(Ellipse(25, 25, 24, 10).rasterize(BOUNDS), WHITE)
        assert bitmap[25, 25] == WHITE
        assert bitmap[25, 10] == Rgba(0, 0, 0, 255)

    def test_fully_outside_is_empty(self):
        assert Ellipse(-40, -40, 5, 5).rasterize(BOUNDS) == []


def test_circle_matches_equal_radii_ellipse():
    assert Circle(10, 12, 6).rasterize(BOUNDS) == Ellipse(10, 12, 6, 6).rasterize(BOUNDS)


class TestLine:
    def test_horizontal_line_pixels(self):
        lines = Line(2, 5, 6, 5).rasterize(BOUNDS)
        assert lines == [Scanline(5, x, x) for x in range(2, 7)]

    def test_diagonal_line_pixels(self):
        lines = Line(0, 0, 3, 3).rasterize(BOUNDS)
        assert lines == [Scanline(i, i, i) for i in range(4)]

    def test_trimmed_to_canvas(self):
        lines = Line(-5, 2, 3, 2).rasterize(BOUNDS)
        assert [line.x1 for line in lines] == [0, 1, 2, 3]


class TestPolyline:
    def test_shared_vertices_are_not_duplicated(self):
        lines = Polyline([(0, 0), (4, 0), (4, 4)]).rasterize(BOUNDS)
        pixels = [(line.x1, line.y) for line in lines]
        assert len(pixels) == len(set(pixels)) == 9

    def test_backtracking_segments_are_not_duplicated(self):
        lines = Polyline([(0, 0), (5, 0), (0, 0)]).rasterize(BOUNDS)
        assert len(lines) == 6

    def test_empty_polyline(self):
        assert Polyline().rasterize(BOUNDS) == []


class TestQuadraticBezier:
    def test_straight_control_point_gives_line(self):
        curve = QuadraticBezier(cx=5, cy=0, x1=0, y1=0, x2=10, y2=0)
        assert curve.rasterize(BOUNDS) == [Scanline(0, x, x) for x in range(11)]

    def test_endpoints_covered(self):
        lines = QuadraticBezier(cx=20, cy=0, x1=0, y1=30, x2=40, y2=30).rasterize(BOUNDS)
        pixels = {(line.x1, line.y) for line in lines}
        assert (0, 30) in pixels
        assert (40, 30) in pixels
