"""Pixel-buffer operations used once the canvas is in raster mode."""

import logging
from collections import deque

from PyQt5.QtCore import QPoint, QPointF, Qt
from PyQt5.QtGui import QColor, QImage, QPainter, QPen

from .constants import BACKGROUND_COLOR

log = logging.getLogger("paint")

BUFFER_FORMAT = QImage.Format_ARGB32


def new_buffer(width, height, color=BACKGROUND_COLOR):
    """Allocate a buffer of at least 1x1 filled with *color*."""
    img = QImage(max(1, width), max(1, height), BUFFER_FORMAT)
    img.fill(QColor(color))
    return img


def make_painter(img, antialiasing=True):
    p = QPainter(img)
    if antialiasing:
        p.setRenderHint(QPainter.Antialiasing)
    return p


def grow_buffer(img, width, height):
    """Return a buffer covering max(old, new) in each axis.

    The buffer never shrinks, so content outside a smaller window survives
    and comes back when the window grows again.  Returns *img* itself when
    no growth is needed.
    """
    new_w = max(img.width(), width)
    new_h = max(img.height(), height)
    if new_w == img.width() and new_h == img.height():
        return img
    grown = new_buffer(new_w, new_h)
    p = QPainter(grown)
    p.setCompositionMode(QPainter.CompositionMode_Source)
    p.drawImage(0, 0, img)
    p.end()
    log.debug(f"[raster] grow {img.width()}x{img.height()} -> {new_w}x{new_h}")
    return grown


def flood_fill(img, x, y, fill_color):
    """4-connected fill of the region containing (x, y).

    Returns the number of pixels recoloured.  Out-of-bounds seeds and seeds
    already of the fill colour are no-ops.  Filled pixels stop matching the
    target, so no visited set is kept.
    """
    w, h = img.width(), img.height()
    if x < 0 or x >= w or y < 0 or y >= h:
        return 0
    target = img.pixel(x, y)
    fill = QColor(fill_color).rgba()
    if target == fill:
        return 0
    count = 0
    queue = deque()
    queue.append((x, y))
    while queue:
        cx, cy = queue.popleft()
        if img.pixel(cx, cy) != target:
            continue
        img.setPixel(cx, cy, fill)
        count += 1
        for nx, ny in ((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)):
            if 0 <= nx < w and 0 <= ny < h:
                queue.append((nx, ny))
    log.debug(f"[fill] seed=({x},{y}) pixels={count}")
    return count


def erase_dot(img, pos, diameter, color=BACKGROUND_COLOR):
    """Stamp a filled disc of the background colour centred on *pos*."""
    p = make_painter(img)
    p.setPen(Qt.NoPen)
    p.setBrush(QColor(color))
    r = diameter / 2.0
    p.drawEllipse(QPointF(pos.x(), pos.y()), r, r)
    p.end()


def erase_line(img, start, end, diameter, color=BACKGROUND_COLOR):
    """Round-capped background line so a fast drag leaves no gaps."""
    p = make_painter(img)
    p.setPen(QPen(QColor(color), diameter, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
    p.drawLine(QPoint(start), QPoint(end))
    p.end()
