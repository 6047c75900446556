#!/usr/bin/env python3
"""Timeline Paint main window and entry point."""

import logging
import os
import sys
import traceback

from PyQt5.QtCore import QPointF, QSettings, QSize, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QIcon, QKeySequence, QPainter, QPen, QPixmap
from PyQt5.QtWidgets import (
    QApplication, QColorDialog, QFrame, QGridLayout, QHBoxLayout,
    QLabel, QMainWindow, QMessageBox, QPushButton, QSlider, QToolBar,
    QToolButton, QVBoxLayout, QWidget,
)

from .canvas import Canvas, Mode
from .constants import (
    APP_NAME, DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR, DEFAULT_STROKE_WIDTH,
    LOG_DIR, MAX_STROKE_WIDTH, MIN_STROKE_WIDTH, ORG_NAME, PALETTE_COLORS,
    WINDOW_HEIGHT, WINDOW_WIDTH,
)
from .tools import ToolType

log = logging.getLogger("paint")

TOOL_SHORTCUTS = {
    ToolType.FREEHAND: "P",
    ToolType.RECTANGLE: "R",
    ToolType.ELLIPSE: "O",
    ToolType.ERASER: "E",
    ToolType.FILL: "F",
}


def _make_tool_icon(tool_type, size=24):
    """Draw a simple icon for each tool programmatically."""
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)
    p = QPainter(pm)
    p.setRenderHint(QPainter.Antialiasing)
    p.setPen(QPen(QColor(40, 40, 40), 1.5))
    m = 3  # margin

    if tool_type == ToolType.FREEHAND:
        p.drawLine(m, size - m, size - m, m)
        p.drawLine(size - m, m, size - m - 3, m + 1)
    elif tool_type == ToolType.RECTANGLE:
        p.drawRect(m, m + 3, size - 2 * m, size - 2 * m - 6)
    elif tool_type == ToolType.ELLIPSE:
        p.drawEllipse(m, m + 3, size - 2 * m, size - 2 * m - 6)
    elif tool_type == ToolType.ERASER:
        p.setBrush(QBrush(QColor(255, 200, 200)))
        p.drawRect(m, m + 4, size - 2 * m, size - 2 * m - 4)
    elif tool_type == ToolType.FILL:
        p.setBrush(QBrush(QColor(0, 120, 215)))
        p.drawRect(m + 2, m + 6, size - 2 * m - 6, size - 2 * m - 6)
        p.drawLine(size - m - 4, m + 6, size - m, size - m - 4)
    p.end()
    return QIcon(pm)


# ---------------------------------------------------------------------------
# Toolbar widgets
# ---------------------------------------------------------------------------
class ColorSwatch(QWidget):
    """Small clickable color swatch."""
    clicked = pyqtSignal(QColor, int)  # color, button (1=left, 2=right)

    def __init__(self, color, parent=None, size=22):
        super().__init__(parent)
        self.color = QColor(color)
        self.setFixedSize(size, size)

    def paintEvent(self, event):
        p = QPainter(self)
        p.setPen(QPen(QColor(128, 128, 128), 1))
        p.setBrush(QBrush(self.color))
        p.drawRect(0, 0, self.width() - 1, self.height() - 1)
        p.end()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.color, 1)
        elif event.button() == Qt.RightButton:
            self.clicked.emit(self.color, 2)


class ColorIndicator(QWidget):
    """Labelled stroke and fill swatches."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.stroke_color = QColor(DEFAULT_STROKE_COLOR)
        self.fill_color = QColor(DEFAULT_FILL_COLOR)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        self._stroke = ColorSwatch(self.stroke_color, size=26)
        self._fill = ColorSwatch(self.fill_color, size=26)
        layout.addWidget(QLabel("Stroke"), 0, 0, Qt.AlignCenter)
        layout.addWidget(QLabel("Fill"), 0, 1, Qt.AlignCenter)
        layout.addWidget(self._stroke, 1, 0, Qt.AlignCenter)
        layout.addWidget(self._fill, 1, 1, Qt.AlignCenter)

    def set_colors(self, stroke, fill):
        self.stroke_color = QColor(stroke)
        self.fill_color = QColor(fill)
        self._stroke.color = QColor(stroke)
        self._fill.color = QColor(fill)
        self._stroke.update()
        self._fill.update()


class ColorPalette(QWidget):
    """Fixed palette.  Left click picks the stroke color, right click the fill."""
    color_picked = pyqtSignal(QColor, int)

    COLUMNS = 8

    def __init__(self, parent=None, swatch_size=18):
        super().__init__(parent)
        grid = QGridLayout(self)
        grid.setSpacing(1)
        grid.setContentsMargins(0, 0, 0, 0)
        for i, hex_color in enumerate(PALETTE_COLORS):
            swatch = ColorSwatch(hex_color, size=swatch_size)
            swatch.setToolTip(f"{hex_color}  (L-click: stroke, R-click: fill)")
            swatch.clicked.connect(self.color_picked)
            grid.addWidget(swatch, i // self.COLUMNS, i % self.COLUMNS)


class StrokeWidthSelector(QWidget):
    """Slider for stroke width with a live preview dot and "Npx" label."""
    width_changed = pyqtSignal(int)

    def __init__(self, parent=None, value=DEFAULT_STROKE_WIDTH):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(4)

        self._preview = QWidget()
        self._preview.setFixedSize(26, 26)
        self._preview.paintEvent = self._paint_preview
        layout.addWidget(self._preview)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(MIN_STROKE_WIDTH, MAX_STROKE_WIDTH)
        self.slider.setValue(value)
        self.slider.setFixedWidth(100)
        self.slider.setToolTip("Stroke width for drawing and eraser")
        self.slider.valueChanged.connect(self._on_value)
        layout.addWidget(self.slider)

        self._label = QLabel(f"{value}px")
        self._label.setFixedWidth(34)
        layout.addWidget(self._label)

    def _paint_preview(self, event):
        p = QPainter(self._preview)
        p.setRenderHint(QPainter.Antialiasing)
        p.fillRect(self._preview.rect(), QColor(255, 255, 255))
        p.setPen(QPen(QColor(200, 200, 200), 1))
        p.drawRect(0, 0, 25, 25)
        r = self.slider.value() / 2.0
        p.setPen(Qt.NoPen)
        p.setBrush(QBrush(QColor(0, 0, 0)))
        p.drawEllipse(QPointF(13, 13), r, r)
        p.end()

    def _on_value(self, v):
        self._label.setText(f"{v}px")
        self._preview.update()
        self.width_changed.emit(v)


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------
class PaintApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.canvas = Canvas()
        self.setCentralWidget(self.canvas)
        self.controller = self.canvas.controller

        self.controller.changed.connect(self._update_status)
        self.controller.mode_changed.connect(self._on_mode_changed)
        self.canvas.easter_egg_triggered.connect(self._on_easter_egg)

        self._build_toolbar()
        self._build_menus()
        self._build_status_bar()

        self._restore_settings()
        self._sync_style_to_canvas()
        self._on_tool_selected(ToolType.FREEHAND)
        self.canvas.setFocus()

    # ---- Toolbar ----
    def _build_toolbar(self):
        tb = QToolBar("Main")
        tb.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, tb)

        bar = QWidget()
        bar_layout = QHBoxLayout(bar)
        bar_layout.setContentsMargins(4, 2, 4, 2)
        bar_layout.setSpacing(6)

        def _vsep():
            s = QFrame()
            s.setFrameShape(QFrame.VLine)
            s.setFrameShadow(QFrame.Sunken)
            return s

        def _group(content, label_text):
            group = QWidget()
            vbox = QVBoxLayout(group)
            vbox.setContentsMargins(4, 2, 4, 0)
            vbox.setSpacing(1)
            vbox.addWidget(content)
            lbl = QLabel(label_text)
            lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet("color: gray; font-size: 9px;")
            vbox.addWidget(lbl)
            return group

        # --- Tools ---
        self._tool_buttons = {}
        tools_widget = QWidget()
        tools_row = QHBoxLayout(tools_widget)
        tools_row.setContentsMargins(0, 0, 0, 0)
        tools_row.setSpacing(1)
        for tt in ToolType:
            btn = QToolButton()
            btn.setIcon(_make_tool_icon(tt, size=24))
            btn.setIconSize(QSize(24, 24))
            btn.setFixedSize(32, 32)
            btn.setCheckable(True)
            btn.setToolTip(f"{tt.value} ({TOOL_SHORTCUTS[tt]})")
            btn.clicked.connect(lambda checked, t=tt: self._on_tool_selected(t))
            tools_row.addWidget(btn)
            self._tool_buttons[tt] = btn

        clear_btn = QPushButton("Clear")
        clear_btn.setFixedHeight(32)
        clear_btn.setStyleSheet("background: #ffc8c8;")
        clear_btn.setToolTip("Clear the entire canvas")
        clear_btn.clicked.connect(self._clear_canvas)
        tools_row.addWidget(clear_btn)

        bar_layout.addWidget(_group(tools_widget, "Tools"))
        bar_layout.addWidget(_vsep())

        # --- Stroke width ---
        self._width_sel = StrokeWidthSelector()
        self._width_sel.width_changed.connect(self._on_stroke_width)
        bar_layout.addWidget(_group(self._width_sel, "Stroke Width"))
        bar_layout.addWidget(_vsep())

        # --- Colors ---
        colors_widget = QWidget()
        colors_layout = QHBoxLayout(colors_widget)
        colors_layout.setContentsMargins(0, 0, 0, 0)
        colors_layout.setSpacing(4)

        self._indicator = ColorIndicator()
        colors_layout.addWidget(self._indicator, 0, Qt.AlignVCenter)

        self._palette = ColorPalette()
        self._palette.color_picked.connect(self._on_palette_pick)
        colors_layout.addWidget(self._palette)

        custom_btn = QPushButton("...")
        custom_btn.setFixedSize(28, 28)
        custom_btn.setToolTip("Custom stroke color")
        custom_btn.clicked.connect(self._custom_color)
        colors_layout.addWidget(custom_btn, 0, Qt.AlignVCenter)

        bar_layout.addWidget(_group(colors_widget, "Colors (L-click: stroke, R-click: fill)"))
        bar_layout.addStretch()
        tb.addWidget(bar)

    def _on_tool_selected(self, tool_type):
        for tt, btn in self._tool_buttons.items():
            btn.setChecked(tt == tool_type)
        self.canvas.set_tool(tool_type)
        self._update_status()

    def _on_stroke_width(self, width):
        self.controller.stroke_width = width
        self.canvas.update()

    def _on_palette_pick(self, color, button):
        if button == 1:
            self._indicator.stroke_color = QColor(color)
        else:
            self._indicator.fill_color = QColor(color)
        self._sync_style_to_canvas()

    def _custom_color(self):
        c = QColorDialog.getColor(self._indicator.stroke_color, self, "Choose Custom Color")
        if c.isValid():
            self._indicator.stroke_color = c
            self._sync_style_to_canvas()

    def _sync_style_to_canvas(self):
        ind = self._indicator
        ind.set_colors(ind.stroke_color, ind.fill_color)
        self.controller.stroke_color = QColor(ind.stroke_color)
        self.controller.fill_color = QColor(ind.fill_color)
        self.controller.stroke_width = self._width_sel.slider.value()
        self.canvas.update()

    # ---- Menus ----
    def _build_menus(self):
        mb = self.menuBar()

        edit_menu = mb.addMenu("&Edit")
        self._add_action(edit_menu, "&Undo", self.controller.undo, QKeySequence("Ctrl+Z"))
        edit_menu.addSeparator()
        self._add_action(edit_menu, "C&lear Canvas", self._clear_canvas, QKeySequence("Ctrl+L"))

        tools_menu = mb.addMenu("&Tools")
        for tt in ToolType:
            self._add_action(tools_menu, tt.value,
                             lambda t=tt: self._on_tool_selected(t),
                             QKeySequence(TOOL_SHORTCUTS[tt]))

        help_menu = mb.addMenu("&Help")
        self._add_action(help_menu, "&About", self._show_about)

    def _add_action(self, menu, text, slot, shortcut=None):
        action = menu.addAction(text)
        def _handler(checked=False, _s=slot, _t=text):
            log.info(f"[action] {_t}")
            try:
                _s()
            except Exception as e:
                log.error(f"[action ERROR] {_t}: {e}", exc_info=True)
        action.triggered.connect(_handler)
        if shortcut:
            action.setShortcut(shortcut)
            action.setShortcutContext(Qt.ApplicationShortcut)
            self.addAction(action)
        return action

    def _clear_canvas(self):
        self.controller.clear_all()

    # ---- Status bar ----
    def _build_status_bar(self):
        sb = self.statusBar()
        self._tool_label = QLabel()
        self._mode_label = QLabel()
        self._content_label = QLabel()
        sb.addWidget(self._tool_label)
        sb.addWidget(self._mode_label)
        sb.addPermanentWidget(self._content_label)

    def _update_status(self):
        if not hasattr(self, "_tool_label"):
            return
        tt = self.controller.current_tool_type()
        self._tool_label.setText(f"Tool: {tt.value if tt else 'None'}")
        self._mode_label.setText(f"Mode: {self.controller.mode.value}")
        b = self.controller.total_bounds()
        count = self.controller.element_count()
        if b is None:
            self._content_label.setText(f"{count} elements")
        else:
            self._content_label.setText(
                f"{count} elements  {b.width} x {b.height} at ({b.x}, {b.y})")

    def _on_mode_changed(self, mode):
        log.info(f"[mode] {mode.value}")
        if mode == Mode.RASTER:
            self.statusBar().showMessage("Canvas converted to pixels", 2000)
        self._update_status()

    def _on_easter_egg(self):
        QMessageBox.information(
            self, "Easter Egg",
            "Konami Code Activated! \U0001F60E\n\nSecret easter egg unlocked!")

    def _show_about(self):
        QMessageBox.about(
            self, f"About {APP_NAME}",
            f"<h3>{APP_NAME}</h3>"
            "<p>A paint program built with Python and PyQt5.</p>"
            "<p>Freehand strokes and shapes are kept as a replayable "
            "timeline until the eraser or the fill bucket is used, at which "
            "point the canvas switches to pixels.</p>",
        )

    # ---- Settings persistence ----
    def _settings(self):
        return QSettings(ORG_NAME, APP_NAME)

    def _save_settings(self):
        settings = self._settings()
        settings.setValue("geometry", self.saveGeometry())
        settings.setValue("stroke_width", self.controller.stroke_width)
        settings.setValue("stroke_color", self._indicator.stroke_color.name(QColor.HexArgb))
        settings.setValue("fill_color", self._indicator.fill_color.name(QColor.HexArgb))

    def _restore_settings(self):
        settings = self._settings()
        geom = settings.value("geometry")
        if geom:
            self.restoreGeometry(geom)
        width = settings.value("stroke_width", DEFAULT_STROKE_WIDTH, type=int)
        self._width_sel.slider.setValue(max(MIN_STROKE_WIDTH, min(MAX_STROKE_WIDTH, width)))
        for attr in ("stroke_color", "fill_color"):
            value = settings.value(attr)
            if value and QColor(value).isValid():
                setattr(self._indicator, attr, QColor(value))

    def closeEvent(self, event):
        self._save_settings()
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def _setup_logging():
    os.makedirs(LOG_DIR, exist_ok=True)
    logging.basicConfig(filename=os.path.join(LOG_DIR, "debug.log"),
                        level=logging.DEBUG,
                        format="%(asctime)s %(message)s", force=True)


def main():
    _setup_logging()
    def _excepthook(t, v, tb):
        log.error("".join(traceback.format_exception(t, v, tb)))
        sys.__excepthook__(t, v, tb)
    sys.excepthook = _excepthook
    log.info("Starting")
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)
    window = PaintApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
