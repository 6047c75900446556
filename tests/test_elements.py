from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QColor, QPen

from timelinepaint.elements import Bounds, ShapeElement, ShapeKind, StrokeElement

from .helpers import blank_image, render_to_image, rgba


def test_stroke_bounds_from_points():
    s = StrokeElement([(0, 0), (10, 10)], Qt.black, 2)
    assert s.bounds() == Bounds(0, 0, 10, 10)


def test_stroke_bounds_with_negative_and_unordered_points():
    s = StrokeElement([(5, -3), (-2, 8), (4, 1)], Qt.black, 2)
    assert s.bounds() == Bounds(-2, -3, 7, 11)


def test_empty_stroke_has_no_bounds():
    assert StrokeElement([], Qt.black, 2).bounds() is None


def test_stroke_accepts_qpoints_and_copies_them():
    pts = [QPoint(1, 2), QPoint(3, 4)]
    s = StrokeElement(pts, Qt.black, 2)
    pts[0].setX(99)
    pts.append(QPoint(7, 7))
    assert s.points == ((1, 2), (3, 4))


def test_stroke_width_clamped_to_one():
    assert StrokeElement([(0, 0)], Qt.black, 0).stroke_width == 1
    assert StrokeElement([(0, 0)], Qt.black, -5).stroke_width == 1


def test_colors_are_copied_in_and_out():
    color = QColor(Qt.red)
    s = StrokeElement([(0, 0), (1, 1)], color, 2)
    color.setRgb(0, 0, 255)
    assert s.stroke_color == QColor(Qt.red)
    s.stroke_color.setRgb(0, 255, 0)
    assert s.stroke_color == QColor(Qt.red)


def test_single_point_stroke_draws_nothing():
    s = StrokeElement([(50, 50)], Qt.black, 10)
    img = render_to_image(s.render)
    assert img == blank_image()


def test_stroke_draws_polyline():
    s = StrokeElement([(10, 50), (90, 50)], Qt.blue, 6)
    img = render_to_image(s.render)
    assert img.pixel(50, 50) == rgba(Qt.blue)
    assert img.pixel(50, 10) == rgba(Qt.white)


def test_shape_bounds_is_geometry():
    sh = ShapeElement(ShapeKind.ELLIPSE, (10, 20, 30, 40), Qt.black, Qt.red, True, 2)
    assert sh.bounds() == Bounds(10, 20, 30, 40)
    assert sh.kind == ShapeKind.ELLIPSE


def test_shape_negative_size_clamped():
    sh = ShapeElement(ShapeKind.RECTANGLE, (10, 10, -5, -1), Qt.black, Qt.red, False, 2)
    assert sh.geometry == Bounds(10, 10, 0, 0)


def test_filled_rectangle_paints_interior_then_outline():
    sh = ShapeElement(ShapeKind.RECTANGLE, (10, 10, 40, 40), Qt.black, Qt.red, True, 2)
    img = render_to_image(sh.render)
    assert img.pixel(30, 30) == rgba(Qt.red)
    assert img.pixel(10, 30) == rgba(Qt.black)
    assert img.pixel(70, 70) == rgba(Qt.white)


def test_unfilled_shape_leaves_interior_alone():
    sh = ShapeElement(ShapeKind.RECTANGLE, (10, 10, 40, 40), Qt.black, Qt.red, False, 2)
    img = render_to_image(sh.render)
    assert img.pixel(30, 30) == rgba(Qt.white)
    assert img.pixel(10, 30) == rgba(Qt.black)


def test_degenerate_shape_renders_without_error():
    sh = ShapeElement(ShapeKind.ELLIPSE, (20, 20, 0, 0), Qt.black, Qt.red, True, 3)
    render_to_image(sh.render)


def test_render_restores_painter_state():
    sh = ShapeElement(ShapeKind.RECTANGLE, (10, 10, 40, 40), Qt.black, Qt.red, True, 5)

    def draw(p):
        p.setPen(QPen(QColor(Qt.green), 1))
        sh.render(p)
        assert p.pen().color() == QColor(Qt.green)
        assert p.pen().width() == 1

    render_to_image(draw)


def test_bounds_union_includes_zero_size_boxes():
    a = Bounds(10, 10, 0, 0)
    b = Bounds(20, 30, 5, 5)
    assert a.united(b) == Bounds(10, 10, 15, 25)
    assert a.united(None) == a


def test_bounds_from_corners_is_direction_independent():
    assert Bounds.from_corners((50, 50), (10, 10)) == Bounds(10, 10, 40, 40)
    assert Bounds.from_corners((10, 10), (50, 50)) == Bounds(10, 10, 40, 40)
    assert Bounds.from_corners((50, 10), (10, 50)) == Bounds(10, 10, 40, 40)
