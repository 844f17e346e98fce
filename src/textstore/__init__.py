"""Line-addressable text store for terminal editors."""

__all__ = [
    "adapters",
    "buffer",
    "runtime",
]

__version__ = "0.1.0"
