"""Split long subtitle captions into screen-sized lines and re-time them."""

__version__ = "0.1.0"
