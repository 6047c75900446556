from PyQt5.QtCore import Qt

from timelinepaint.elements import Bounds, ShapeElement, ShapeKind, StrokeElement
from timelinepaint.timeline import DrawingTimeline

from .helpers import render_to_image, rgba


def _rect(x, y, w, h, color):
    return ShapeElement(ShapeKind.RECTANGLE, (x, y, w, h), color, color, True, 2)


def test_empty_timeline():
    tl = DrawingTimeline()
    assert tl.is_empty()
    assert len(tl) == 0
    assert tl.total_bounds() is None
    assert tl.remove_last() is None


def test_append_ignores_none():
    tl = DrawingTimeline()
    tl.append(None)
    assert tl.is_empty()


def test_elements_is_read_only_snapshot():
    tl = DrawingTimeline()
    a = StrokeElement([(0, 0), (1, 1)], Qt.black, 2)
    tl.append(a)
    snap = tl.elements
    assert snap == (a,)
    assert isinstance(snap, tuple)
    tl.append(_rect(0, 0, 5, 5, Qt.red))
    assert snap == (a,)


def test_remove_last_pops_newest():
    tl = DrawingTimeline()
    a = StrokeElement([(0, 0), (1, 1)], Qt.black, 2)
    b = _rect(0, 0, 5, 5, Qt.red)
    tl.append(a)
    tl.append(b)
    assert tl.remove_last() is b
    assert list(tl) == [a]


def test_clear():
    tl = DrawingTimeline()
    tl.append(_rect(0, 0, 5, 5, Qt.red))
    tl.clear()
    assert tl.is_empty()


def test_total_bounds_single_stroke():
    tl = DrawingTimeline()
    tl.append(StrokeElement([(0, 0), (10, 10)], Qt.black, 2))
    assert tl.total_bounds() == Bounds(0, 0, 10, 10)


def test_total_bounds_mixed_and_empty_strokes():
    tl = DrawingTimeline()
    tl.append(StrokeElement([], Qt.black, 2))
    tl.append(StrokeElement([(5, 5), (10, 10)], Qt.black, 2))
    tl.append(_rect(20, 0, 10, 40, Qt.red))
    assert tl.total_bounds() == Bounds(5, 0, 25, 40)


def test_total_bounds_only_empty_strokes():
    tl = DrawingTimeline()
    tl.append(StrokeElement([], Qt.black, 2))
    assert tl.total_bounds() is None


def test_render_all_uses_insertion_order_not_type():
    tl = DrawingTimeline()
    tl.append(_rect(10, 10, 40, 40, Qt.red))
    tl.append(StrokeElement([(0, 30), (99, 30)], Qt.blue, 6))
    tl.append(_rect(25, 25, 10, 10, Qt.green))

    img = render_to_image(lambda p: tl.render_all(p, 100, 100))

    assert img.pixel(30, 30) == rgba(Qt.green)   # newest shape on top of both
    assert img.pixel(15, 30) == rgba(Qt.blue)    # stroke over the first shape
    assert img.pixel(15, 15) == rgba(Qt.red)
    assert img.pixel(80, 80) == rgba(Qt.white)


def test_render_all_clears_background_and_is_idempotent():
    tl = DrawingTimeline()
    tl.append(_rect(10, 10, 20, 20, Qt.red))

    def draw(p):
        p.fillRect(0, 0, 100, 100, Qt.black)
        tl.render_all(p, 100, 100)

    first = render_to_image(draw)
    second = render_to_image(lambda p: (tl.render_all(p, 100, 100), tl.render_all(p, 100, 100)))
    assert first.pixel(80, 80) == rgba(Qt.white)
    assert first == second
