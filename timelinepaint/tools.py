from enum import Enum

from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QBrush, QColor, QPen, QPolygon

from .constants import BACKGROUND_COLOR, MIN_ERASER_SIZE, PREVIEW_FILL_ALPHA
from .elements import Bounds, ShapeElement, ShapeKind, StrokeElement


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ToolType(Enum):
    FREEHAND = "Freehand"
    RECTANGLE = "Rectangle"
    ELLIPSE = "Ellipse"
    ERASER = "Eraser"
    FILL = "Fill"

    @classmethod
    def lookup(cls, name):
        """Map a tool name (or ToolType) to a ToolType, None if unknown."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lower()
        for tt in cls:
            if tt.value.lower() == key:
                return tt
        return _ALIASES.get(key)


_ALIASES = {
    "pencil": ToolType.FREEHAND,
    "oval": ToolType.ELLIPSE,
}


def should_fill(fill_color, stroke_color):
    # Legacy rule, kept verbatim: only false when the fill colour equals both
    # the background and the stroke colour.
    fill = QColor(fill_color).rgba()
    return (fill != BACKGROUND_COLOR.rgba()
            or fill != QColor(stroke_color).rgba())


def eraser_diameter(stroke_width):
    return max(MIN_ERASER_SIZE, int(stroke_width))


# ---------------------------------------------------------------------------
# Tool classes (Strategy pattern)
# ---------------------------------------------------------------------------
class BaseTool:
    """Base interface for all drawing tools.  Also the inert unknown tool."""

    name = "None"

    def __init__(self, canvas):
        self.canvas = canvas

    def mouse_press(self, pos):
        pass

    def mouse_move(self, pos):
        pass

    def mouse_release(self, pos):
        pass

    def paint_overlay(self, painter):
        pass

    def reset(self):
        """Drop any in-progress gesture."""
        pass

    def get_cursor(self):
        return Qt.CrossCursor


class FreehandTool(BaseTool):
    name = "Freehand"

    def __init__(self, canvas):
        super().__init__(canvas)
        self._points = None

    def mouse_press(self, pos):
        self._points = [(pos.x(), pos.y())]

    def mouse_move(self, pos):
        if self._points is None:
            return
        self._points.append((pos.x(), pos.y()))
        self.canvas.changed.emit()

    def mouse_release(self, pos):
        points, self._points = self._points, None
        if points is None or len(points) < 2:
            return
        self.canvas.commit(StrokeElement(
            points, self.canvas.stroke_color, self.canvas.stroke_width))

    def paint_overlay(self, painter):
        if not self._points or len(self._points) < 2:
            return
        painter.save()
        painter.setPen(QPen(self.canvas.stroke_color, self.canvas.stroke_width,
                            Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
        painter.drawPolyline(QPolygon([QPoint(x, y) for x, y in self._points]))
        painter.restore()

    def reset(self):
        self._points = None


class _ShapeTool(BaseTool):
    kind = None

    def __init__(self, canvas):
        super().__init__(canvas)
        self._start = None
        self._end = None

    def _box(self):
        return Bounds.from_corners(self._start, self._end)

    def mouse_press(self, pos):
        self._start = (pos.x(), pos.y())
        self._end = self._start

    def mouse_move(self, pos):
        if self._start is None:
            return
        self._end = (pos.x(), pos.y())
        self.canvas.changed.emit()

    def mouse_release(self, pos):
        if self._start is None:
            return
        self._end = (pos.x(), pos.y())
        c = self.canvas
        element = ShapeElement(
            self.kind, self._box(), c.stroke_color, c.fill_color,
            should_fill(c.fill_color, c.stroke_color), c.stroke_width)
        self.reset()
        c.commit(element)

    def paint_overlay(self, painter):
        if self._start is None or self._end is None:
            return
        c = self.canvas
        rect = self._box().to_rectf()
        painter.save()
        if should_fill(c.fill_color, c.stroke_color):
            fill = QColor(c.fill_color)
            fill.setAlpha(PREVIEW_FILL_ALPHA)
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(fill))
            self._draw(painter, rect)
        painter.setPen(QPen(c.stroke_color, c.stroke_width, Qt.DashLine))
        painter.setBrush(Qt.NoBrush)
        self._draw(painter, rect)
        painter.restore()

    def _draw(self, painter, rect):
        if self.kind == ShapeKind.RECTANGLE:
            painter.drawRect(rect)
        else:
            painter.drawEllipse(rect)

    def reset(self):
        self._start = None
        self._end = None


class RectangleTool(_ShapeTool):
    name = "Rectangle"
    kind = ShapeKind.RECTANGLE


class EllipseTool(_ShapeTool):
    name = "Ellipse"
    kind = ShapeKind.ELLIPSE


class EraserTool(BaseTool):
    name = "Eraser"

    def __init__(self, canvas):
        super().__init__(canvas)
        self._last = None

    def mouse_press(self, pos):
        self._last = QPoint(pos)
        self.canvas.erase_at(self._last)

    def mouse_move(self, pos):
        if self._last is None:
            return
        self.canvas.erase_line(self._last, pos)
        self._last = QPoint(pos)

    def mouse_release(self, pos):
        self._last = None

    def reset(self):
        self._last = None


class FillTool(BaseTool):
    name = "Fill"

    def mouse_press(self, pos):
        self.canvas.fill_at(pos, self.canvas.stroke_color)


TOOL_CLASSES = {
    ToolType.FREEHAND: FreehandTool,
    ToolType.RECTANGLE: RectangleTool,
    ToolType.ELLIPSE: EllipseTool,
    ToolType.ERASER: EraserTool,
    ToolType.FILL: FillTool,
}


def make_tools(canvas):
    return {tt: cls(canvas) for tt, cls in TOOL_CLASSES.items()}
