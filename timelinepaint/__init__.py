"""Timeline Paint — a small paint program with a vector timeline and an
on-demand raster buffer, built with Python + PyQt5."""

__version__ = "1.0.0"
