"""Konami code detection and the sunglasses face it paints."""

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPainterPath, QPen

KONAMI_SEQUENCE = (
    Qt.Key_Up, Qt.Key_Up, Qt.Key_Down, Qt.Key_Down,
    Qt.Key_Left, Qt.Key_Right, Qt.Key_Left, Qt.Key_Right,
    Qt.Key_B, Qt.Key_A,
)


class KonamiCode:
    """Rolling window over the last key presses."""

    def __init__(self, sequence=KONAMI_SEQUENCE):
        self._sequence = tuple(int(k) for k in sequence)
        self._keys = []

    def feed(self, key):
        """Record *key*; True exactly when it completes the sequence."""
        self._keys.append(int(key))
        if len(self._keys) > len(self._sequence):
            self._keys.pop(0)
        if tuple(self._keys) == self._sequence:
            self._keys.clear()
            return True
        return False

    def reset(self):
        self._keys.clear()


def _round_pen(width, color=Qt.black):
    return QPen(QColor(color), width, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)


def paint_cool_face(painter, width, height):
    """Yellow face with sunglasses, a third of the smaller dimension wide,
    centred in a width x height area."""
    cx = width / 2.0
    cy = height / 2.0
    size = min(width, height) / 3.0
    if size <= 0:
        return
    half = size / 2.0

    painter.save()
    painter.setRenderHint(QPainter.Antialiasing)

    # Face with a diagonal gradient
    grad = QLinearGradient(cx - half, cy - half, cx + half, cy + half)
    grad.setColorAt(0.0, QColor(255, 255, 0))
    grad.setColorAt(1.0, QColor(255, 220, 0))
    painter.setPen(Qt.NoPen)
    painter.setBrush(QBrush(grad))
    painter.drawEllipse(QRectF(cx - half, cy - half, size, size))

    # Highlight
    painter.setBrush(QColor(255, 255, 200, 90))
    painter.drawEllipse(QRectF(cx - size / 3, cy - size / 3, size / 3, size / 4))

    painter.setBrush(Qt.NoBrush)
    painter.setPen(_round_pen(2.5))
    painter.drawEllipse(QRectF(cx - half, cy - half, size, size))

    # Sunglasses
    gw = size / 4
    gh = size / 6
    gy = cy - gh
    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor(Qt.black))
    painter.drawRoundedRect(QRectF(cx - gw - 10, gy, gw, gh), 7.5, 6)
    painter.drawRoundedRect(QRectF(cx + 10, gy, gw, gh), 7.5, 6)

    painter.setBrush(QColor(100, 180, 255, 80))
    painter.drawRoundedRect(QRectF(cx - gw - 5, gy + 3, gw / 2, gh / 3), 5, 4)
    painter.drawRoundedRect(QRectF(cx + 15, gy + 3, gw / 2, gh / 3), 5, 4)

    painter.setBrush(Qt.NoBrush)
    mid = gy + gh / 2
    bridge = QPainterPath(QPointF(cx - 10, mid - 3))
    bridge.quadTo(QPointF(cx, mid - 8), QPointF(cx + 10, mid - 3))
    painter.setPen(_round_pen(3.5))
    painter.drawPath(bridge)

    painter.setPen(_round_pen(3))
    for sign in (-1, 1):
        x0 = cx + sign * (gw + 10)
        arm = QPainterPath(QPointF(x0, mid))
        arm.quadTo(QPointF(x0 + sign * 10, mid + 5),
                   QPointF(x0 + sign * 20, gy + gh + 10))
        painter.drawPath(arm)

    # Smile
    sw = size / 2
    sh = size / 6
    sy = cy + size / 8
    smile = QPainterPath(QPointF(cx - sw / 2, sy + sh / 2))
    smile.cubicTo(QPointF(cx - sw / 4, sy + sh), QPointF(cx + sw / 4, sy + sh),
                  QPointF(cx + sw / 2, sy + sh / 2))
    painter.setPen(_round_pen(3.5))
    painter.drawPath(smile)

    painter.restore()
