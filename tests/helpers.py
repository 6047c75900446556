from PyQt5.QtCore import QPoint, Qt
from PyQt5.QtGui import QColor, QImage, QPainter


def rgba(color):
    return QColor(color).rgba()


def blank_image(width=100, height=100, color=Qt.white):
    img = QImage(width, height, QImage.Format_ARGB32)
    img.fill(QColor(color))
    return img


def render_to_image(draw, width=100, height=100, antialiasing=False):
    """Run draw(painter) on a fresh white image and return it."""
    img = blank_image(width, height)
    p = QPainter(img)
    if antialiasing:
        p.setRenderHint(QPainter.Antialiasing)
    draw(p)
    p.end()
    return img


def drag(ctrl, points, button=Qt.LeftButton):
    """Press at the first point, move through the rest, release at the last."""
    ctrl.mouse_press(QPoint(*points[0]), button)
    for pt in points[1:]:
        ctrl.mouse_move(QPoint(*pt), button)
    ctrl.mouse_release(QPoint(*points[-1]), button)
