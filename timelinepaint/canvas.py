import logging
import time
from enum import Enum

from PyQt5.QtCore import QObject, QPoint, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QImage, QPainter
from PyQt5.QtWidgets import QSizePolicy, QWidget

from . import raster
from .constants import (
    BACKGROUND_COLOR, DEFAULT_FILL_COLOR, DEFAULT_HEIGHT, DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_WIDTH, DEFAULT_WIDTH, MIN_STROKE_WIDTH,
)
from .easter_egg import KonamiCode, paint_cool_face
from .timeline import DrawingTimeline
from .tools import BaseTool, ToolType, eraser_diameter, make_tools

log = logging.getLogger("paint")


class Mode(Enum):
    VECTOR = "Vector"
    RASTER = "Raster"


def _as_point(pos):
    if isinstance(pos, QPoint):
        return QPoint(pos)
    x, y = pos
    return QPoint(int(x), int(y))


# ---------------------------------------------------------------------------
# Canvas controller
# ---------------------------------------------------------------------------
class CanvasController(QObject):
    """Drawing state behind the canvas widget.

    Content lives either in the vector timeline or in a raster buffer, never
    both.  The mode is derived from the buffer: there is no raster mode
    without a buffer.  Erasing, filling and the easter egg switch to raster
    mode lazily; ``clear_all`` is the only way back.

    Style attributes (``stroke_color``, ``fill_color``, ``stroke_width``) are
    written by the UI layer and read by tools when a gesture commits and on
    every preview frame.
    """

    changed = pyqtSignal()
    mode_changed = pyqtSignal(object)

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, parent=None):
        super().__init__(parent)
        self._timeline = DrawingTimeline()
        self._raster = None
        self._width = max(0, int(width))
        self._height = max(0, int(height))

        self.stroke_color = QColor(DEFAULT_STROKE_COLOR)
        self.fill_color = QColor(DEFAULT_FILL_COLOR)
        self._stroke_width = DEFAULT_STROKE_WIDTH
        self.antialiasing = True

        self._tools = make_tools(self)
        self._inert_tool = BaseTool(self)
        self._current_tool_type = ToolType.FREEHAND
        self._current_tool = self._tools[ToolType.FREEHAND]

    # --- Style ---
    @property
    def stroke_width(self):
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, value):
        self._stroke_width = max(MIN_STROKE_WIDTH, int(value))

    # --- Tool switching ---
    def set_tool(self, tool):
        """Select a tool by ToolType or name.  Unknown names select an inert
        tool that ignores all pointer input."""
        tool_type = ToolType.lookup(tool)
        self._current_tool.reset()
        self._current_tool_type = tool_type
        if tool_type is None:
            log.info(f"[tool] unknown tool {tool!r}, pointer input ignored")
            self._current_tool = self._inert_tool
        else:
            self._current_tool = self._tools[tool_type]
            log.info(f"[tool] {self._current_tool.name}")
        self.changed.emit()

    def current_tool_type(self):
        return self._current_tool_type

    def current_tool(self):
        return self._current_tool

    # --- State queries ---
    @property
    def mode(self):
        return Mode.VECTOR if self._raster is None else Mode.RASTER

    @property
    def size(self):
        return self._width, self._height

    def raster_image(self):
        """Copy of the raster buffer, or None in vector mode."""
        if self._raster is None:
            return None
        return QImage(self._raster)

    def elements(self):
        return self._timeline.elements

    def element_count(self):
        return len(self._timeline)

    def is_empty(self):
        return self._timeline.is_empty()

    def total_bounds(self):
        return self._timeline.total_bounds()

    # --- Pointer input ---
    def mouse_press(self, pos, button=Qt.LeftButton):
        if button != Qt.LeftButton:
            return
        # A fresh press discards whatever an interrupted gesture left behind
        self._current_tool.reset()
        self._current_tool.mouse_press(_as_point(pos))

    def mouse_move(self, pos, buttons=Qt.LeftButton):
        if not (buttons & Qt.LeftButton):
            return
        self._current_tool.mouse_move(_as_point(pos))

    def mouse_release(self, pos, button=Qt.LeftButton):
        if button != Qt.LeftButton:
            return
        self._current_tool.mouse_release(_as_point(pos))
        self.changed.emit()

    # --- Commit ---
    def commit(self, element):
        """Store a finished element: on the timeline in vector mode, painted
        straight into the buffer in raster mode."""
        if element is None:
            return
        if self._raster is None:
            self._timeline.append(element)
        else:
            p = raster.make_painter(self._raster, self.antialiasing)
            element.render(p)
            p.end()
        log.debug(f"[commit] {element!r} mode={self.mode.value}")
        self.changed.emit()

    def undo(self):
        """Remove the newest timeline element.  Nothing to undo in raster mode."""
        element = self._timeline.remove_last()
        if element is not None:
            log.info(f"[undo] removed {element!r}")
            self.changed.emit()
        return element

    # --- Raster mode ---
    def ensure_raster(self):
        """Switch to raster mode, carrying the timeline into the buffer.

        The timeline is rendered into the new buffer before it is cleared so
        no committed content is lost.  No-op in raster mode.
        """
        if self._raster is not None:
            return
        img = raster.new_buffer(self._width, self._height)
        p = raster.make_painter(img, self.antialiasing)
        self._timeline.render_all(p, img.width(), img.height())
        p.end()
        count = len(self._timeline)
        self._timeline.clear()
        self._raster = img
        log.info(f"[raster] converted {count} elements into {img.width()}x{img.height()} buffer")
        self.mode_changed.emit(Mode.RASTER)

    def erase_at(self, pos):
        self.ensure_raster()
        raster.erase_dot(self._raster, _as_point(pos), eraser_diameter(self._stroke_width))
        self.changed.emit()

    def erase_line(self, start, end):
        self.ensure_raster()
        raster.erase_line(self._raster, _as_point(start), _as_point(end),
                          eraser_diameter(self._stroke_width))
        self.changed.emit()

    def fill_at(self, pos, color):
        self.ensure_raster()
        pos = _as_point(pos)
        count = raster.flood_fill(self._raster, pos.x(), pos.y(), color)
        if count:
            self.changed.emit()
        return count

    def draw_easter_egg(self):
        log.info("[easter_egg] drawing")
        self.ensure_raster()
        p = raster.make_painter(self._raster)
        paint_cool_face(p, self._width, self._height)
        p.end()
        self.changed.emit()

    # --- Canvas operations ---
    def resize(self, width, height):
        self._width = max(0, int(width))
        self._height = max(0, int(height))
        # Vector content is replayed at whatever size the next frame has
        if self._raster is not None:
            self._raster = raster.grow_buffer(self._raster, self._width, self._height)
        self.changed.emit()

    def clear_all(self):
        log.info("[clear_all] called")
        was_raster = self._raster is not None
        self._timeline.clear()
        self._raster = None
        for tool in self._tools.values():
            tool.reset()
        if was_raster:
            self.mode_changed.emit(Mode.VECTOR)
        self.changed.emit()

    # --- Paint ---
    def render(self, painter):
        """Compose a frame: committed content, then the live tool preview."""
        if self.antialiasing:
            painter.setRenderHint(QPainter.Antialiasing)
        if self._raster is not None:
            painter.drawImage(0, 0, self._raster)
        else:
            self._timeline.render_all(painter, self._width, self._height)
        self._current_tool.paint_overlay(painter)


# ---------------------------------------------------------------------------
# Canvas widget
# ---------------------------------------------------------------------------
class Canvas(QWidget):
    easter_egg_triggered = pyqtSignal()
    cursor_moved = pyqtSignal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller = CanvasController(self.width(), self.height(), parent=self)
        self.controller.changed.connect(self.update)
        self._konami = KonamiCode()

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(200, 150)
        self.setCursor(Qt.CrossCursor)

    def set_tool(self, tool):
        self.controller.set_tool(tool)
        self.setCursor(self.controller.current_tool().get_cursor())

    # --- Mouse events ---
    def mousePressEvent(self, event):
        self.setFocus()
        self.controller.mouse_press(event.pos(), event.button())

    def mouseMoveEvent(self, event):
        self.cursor_moved.emit(event.pos().x(), event.pos().y())
        self.controller.mouse_move(event.pos(), event.buttons())

    def mouseReleaseEvent(self, event):
        self.controller.mouse_release(event.pos(), event.button())

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.controller.resize(self.width(), self.height())

    def keyPressEvent(self, event):
        if self._konami.feed(event.key()):
            self.controller.draw_easter_egg()
            self.easter_egg_triggered.emit()
            return
        super().keyPressEvent(event)

    # --- Paint ---
    _paint_count = 0

    def paintEvent(self, event):
        t0 = time.perf_counter()
        self._paint_count += 1
        painter = QPainter(self)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)
        self.controller.render(painter)
        painter.end()
        elapsed = (time.perf_counter() - t0) * 1000
        if elapsed > 16 or self._paint_count % 100 == 0:
            log.debug(
                f"[paint #{self._paint_count}] paint_ms={elapsed:.1f} "
                f"mode={self.controller.mode.value} "
                f"elements={self.controller.element_count()}"
            )
