"""Vector drawing elements stored on the timeline."""

from collections import namedtuple
from enum import Enum

from PyQt5.QtCore import QPoint, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QPen, QPolygon

from .constants import MIN_STROKE_WIDTH


class Bounds(namedtuple("Bounds", "x y width height")):
    """Axis-aligned box.  Zero width/height is legal and still unions."""

    __slots__ = ()

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def united(self, other):
        if other is None:
            return self
        left = min(self.x, other.x)
        top = min(self.y, other.y)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Bounds(left, top, right - left, bottom - top)

    def to_rectf(self):
        return QRectF(self.x, self.y, self.width, self.height)

    @classmethod
    def from_corners(cls, start, end):
        """Normalized box spanned by two (x, y) corners in any drag direction."""
        x0, y0 = start
        x1, y1 = end
        return cls(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))


class ShapeKind(Enum):
    RECTANGLE = "Rectangle"
    ELLIPSE = "Ellipse"


def _point_tuple(p):
    if isinstance(p, QPoint):
        return (p.x(), p.y())
    x, y = p
    return (int(x), int(y))


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------
class DrawingElement:
    """Base class for everything that can sit on the timeline.

    Elements are immutable once built: colors are copied in and copied out,
    and there are no setters.
    """

    def __init__(self, stroke_color, stroke_width):
        self._stroke_color = QColor(stroke_color)
        self._stroke_width = max(MIN_STROKE_WIDTH, int(stroke_width))

    @property
    def stroke_color(self):
        return QColor(self._stroke_color)

    @property
    def stroke_width(self):
        return self._stroke_width

    def _pen(self):
        return QPen(self._stroke_color, self._stroke_width,
                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)

    def render(self, painter):
        """Draw onto *painter*, leaving its state as it was."""
        painter.save()
        try:
            self._draw(painter)
        finally:
            painter.restore()

    def _draw(self, painter):
        raise NotImplementedError

    def bounds(self):
        raise NotImplementedError


class StrokeElement(DrawingElement):
    """Freehand polyline."""

    def __init__(self, points, stroke_color, stroke_width):
        super().__init__(stroke_color, stroke_width)
        self._points = tuple(_point_tuple(p) for p in points)

    @property
    def points(self):
        return self._points

    def __len__(self):
        return len(self._points)

    def _draw(self, painter):
        # A lone point draws nothing, no dot.
        if len(self._points) < 2:
            return
        painter.setPen(self._pen())
        painter.setBrush(Qt.NoBrush)
        painter.drawPolyline(QPolygon([QPoint(x, y) for x, y in self._points]))

    def bounds(self):
        if not self._points:
            return None
        xs = [x for x, _ in self._points]
        ys = [y for _, y in self._points]
        return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def __repr__(self):
        return f"StrokeElement({len(self._points)} points, {self._stroke_color.name()}, w={self._stroke_width})"


class ShapeElement(DrawingElement):
    """Axis-aligned rectangle or ellipse, optionally filled."""

    def __init__(self, kind, geometry, stroke_color, fill_color, filled,
                 stroke_width):
        super().__init__(stroke_color, stroke_width)
        self._kind = ShapeKind(kind)
        x, y, w, h = geometry
        self._geometry = Bounds(int(x), int(y), max(0, int(w)), max(0, int(h)))
        self._fill_color = QColor(fill_color)
        self._filled = bool(filled)

    @property
    def kind(self):
        return self._kind

    @property
    def geometry(self):
        return self._geometry

    @property
    def fill_color(self):
        return QColor(self._fill_color)

    @property
    def filled(self):
        return self._filled

    def _outline(self, painter, rect):
        if self._kind == ShapeKind.RECTANGLE:
            painter.drawRect(rect)
        else:
            painter.drawEllipse(rect)

    def _draw(self, painter):
        rect = self._geometry.to_rectf()
        # Interior first so the outline stays crisp on top
        if self._filled:
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(self._fill_color))
            self._outline(painter, rect)
        painter.setPen(self._pen())
        painter.setBrush(Qt.NoBrush)
        self._outline(painter, rect)

    def bounds(self):
        return self._geometry

    def __repr__(self):
        return (f"ShapeElement({self._kind.value}, {tuple(self._geometry)}, "
                f"filled={self._filled})")
