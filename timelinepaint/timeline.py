"""Chronological store of committed vector elements.

Creation order is z-order: whatever was committed last is painted last and
therefore sits on top, regardless of whether it is a stroke or a shape.
"""

from .constants import BACKGROUND_COLOR


class DrawingTimeline:

    def __init__(self):
        self._elements = []

    def append(self, element):
        if element is None:
            return
        self._elements.append(element)

    def render_all(self, painter, width, height):
        """Paint the background, then every element oldest-first."""
        painter.fillRect(0, 0, width, height, BACKGROUND_COLOR)
        for element in self._elements:
            element.render(painter)

    def clear(self):
        self._elements.clear()

    def remove_last(self):
        """Pop the newest element; None when the timeline is empty."""
        if not self._elements:
            return None
        return self._elements.pop()

    def total_bounds(self):
        total = None
        for element in self._elements:
            b = element.bounds()
            if b is None:
                continue
            total = b if total is None else total.united(b)
        return total

    @property
    def elements(self):
        return tuple(self._elements)

    def is_empty(self):
        return not self._elements

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(tuple(self._elements))
